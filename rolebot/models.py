"""Dataclasses and shared type definitions for RoleBot."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

import discord


class ReactionDirection(enum.Enum):
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class ReactionEvent:
    """A single reaction change on a message, detached from the gateway payload."""

    emoji: str
    is_custom: bool
    channel_id: int
    message_id: int
    direction: ReactionDirection
    user_id: Optional[int] = None
    guild_id: Optional[int] = None

    @classmethod
    def from_payload(
        cls,
        payload: discord.RawReactionActionEvent,
        direction: ReactionDirection,
    ) -> "ReactionEvent":
        emoji = payload.emoji
        is_custom = not emoji.is_unicode_emoji()
        return cls(
            emoji=str(emoji) if is_custom else (emoji.name or ""),
            is_custom=is_custom,
            channel_id=payload.channel_id,
            message_id=payload.message_id,
            direction=direction,
            user_id=payload.user_id,
            guild_id=payload.guild_id,
        )


__all__ = [
    "ReactionDirection",
    "ReactionEvent",
]
