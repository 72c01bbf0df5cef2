"""Reaction-driven role assignment for the watched role menu channel."""

from __future__ import annotations

import logging

import discord
from discord.ext import commands

from .filters import ReactionFilter
from .gateway import DiscordGateway
from .models import ReactionDirection, ReactionEvent
from .role_list import RoleListError, parse
from .roles import RoleNotFound, resolve_role_id

logger = logging.getLogger("rolebot.reaction_roles")


class ReactionRoleManager:
    """Grants or revokes the role a reaction selects on a role menu message.

    Each event is handled on its own: the role list is parsed again from the
    message every time, and any failure only drops that one event.
    """

    def __init__(
        self,
        gateway: DiscordGateway,
        reaction_filter: ReactionFilter,
        *,
        ignore_self: bool = False,
    ):
        self.gateway = gateway
        self.reaction_filter = reaction_filter
        self.ignore_self = ignore_self

    async def on_raw_reaction_add(self, payload: discord.RawReactionActionEvent) -> None:
        await self._dispatch(payload, ReactionDirection.ADDED)

    async def on_raw_reaction_remove(self, payload: discord.RawReactionActionEvent) -> None:
        await self._dispatch(payload, ReactionDirection.REMOVED)

    async def _dispatch(self, payload: discord.RawReactionActionEvent, direction: ReactionDirection) -> None:
        if self.ignore_self and self.gateway.is_self(payload.user_id):
            return
        await self.handle_reaction(ReactionEvent.from_payload(payload, direction))

    async def handle_reaction(self, event: ReactionEvent) -> None:
        try:
            channel = await self.gateway.fetch_channel(event.channel_id)
        except (discord.HTTPException, discord.InvalidData):
            return
        if not self.reaction_filter.accepts(channel):
            return

        try:
            message = await self.gateway.fetch_message(channel, event.message_id)
        except discord.HTTPException:
            return

        if event.guild_id is None or event.user_id is None:
            return
        if event.is_custom:
            logger.info("Server custom emojis are not supported (%s on message %s)", event.emoji, event.message_id)
            return

        try:
            role_name = parse(message.content).role_for(event.emoji)
        except RoleListError as exc:
            logger.error("Error while parsing role menu %s for %s: %s", event.message_id, event.emoji, exc)
            return

        try:
            guild = await self.gateway.fetch_guild(event.guild_id)
        except discord.HTTPException as exc:
            logger.error("Error %s while getting guild %s", exc, event.guild_id)
            return

        try:
            role_id = resolve_role_id(guild.roles, role_name)
        except RoleNotFound as exc:
            logger.error("Error while getting role by name: %s", exc)
            return

        try:
            member = await self.gateway.fetch_member(guild, event.user_id)
        except discord.HTTPException as exc:
            logger.error("Error %s while getting member %s in guild %s", exc, event.user_id, event.guild_id)
            return

        await self._apply(event, member, role_id, role_name)

    async def _apply(self, event: ReactionEvent, member: discord.Member, role_id: int, role_name: str) -> None:
        if event.direction is ReactionDirection.ADDED:
            action, mutate = "AddRole", self.gateway.grant_role
        else:
            action, mutate = "RemoveRole", self.gateway.revoke_role
        try:
            await mutate(member, role_id)
        except discord.HTTPException as exc:
            logger.error("%s %s for member %s failed: %s", action, role_name, event.user_id, exc)
            return
        logger.info("%s %s for member %s", action, role_name, event.user_id)


def setup_reaction_roles(bot: commands.Bot, *, watch_channel: str, ignore_self: bool = False) -> ReactionRoleManager:
    manager = ReactionRoleManager(
        DiscordGateway(bot),
        ReactionFilter(watch_channel),
        ignore_self=ignore_self,
    )
    bot.add_listener(manager.on_raw_reaction_add)
    bot.add_listener(manager.on_raw_reaction_remove)
    logger.info("Watching #%s for role menu reactions", watch_channel)
    return manager


__all__ = ["ReactionRoleManager", "setup_reaction_roles"]
