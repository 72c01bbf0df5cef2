"""Cache-first Discord lookups and role mutations used by the reaction pipeline."""

from __future__ import annotations

from typing import Optional

import discord

ROLE_REASON = "Reaction role menu"


class DiscordGateway:
    """Thin wrapper over a ``discord.Client`` for the calls the pipeline needs.

    Every fetch consults the client cache first and falls back to the REST
    API. Failures surface as ``discord.HTTPException`` (or a subclass).
    """

    def __init__(self, client: discord.Client):
        self.client = client

    def is_self(self, user_id: Optional[int]) -> bool:
        user = self.client.user
        return user is not None and user_id == user.id

    async def fetch_channel(self, channel_id: int):
        channel = self.client.get_channel(channel_id)
        if channel is None:
            channel = await self.client.fetch_channel(channel_id)
        return channel

    async def fetch_message(self, channel, message_id: int) -> discord.Message:
        return await channel.fetch_message(message_id)

    async def fetch_guild(self, guild_id: int) -> discord.Guild:
        guild = self.client.get_guild(guild_id)
        if guild is None:
            guild = await self.client.fetch_guild(guild_id)
        return guild

    async def fetch_member(self, guild: discord.Guild, user_id: int) -> discord.Member:
        member = guild.get_member(user_id)
        if member is None:
            member = await guild.fetch_member(user_id)
        return member

    async def grant_role(self, member: discord.Member, role_id: int) -> None:
        await member.add_roles(discord.Object(id=role_id), reason=ROLE_REASON)

    async def revoke_role(self, member: discord.Member, role_id: int) -> None:
        await member.remove_roles(discord.Object(id=role_id), reason=ROLE_REASON)


__all__ = ["DiscordGateway", "ROLE_REASON"]
