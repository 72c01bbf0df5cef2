"""Channel scoping for reaction events."""

from __future__ import annotations

from typing import Optional

import discord


class ReactionFilter:
    """Accepts only guild channels whose name matches the watched channel exactly."""

    def __init__(self, watch_channel: str):
        self.watch_channel = watch_channel

    def accepts(self, channel: Optional[object]) -> bool:
        if not isinstance(channel, discord.abc.GuildChannel):
            return False
        return channel.name == self.watch_channel

    def __repr__(self) -> str:
        return f"<ReactionFilter watch_channel={self.watch_channel!r}>"


__all__ = ["ReactionFilter"]
