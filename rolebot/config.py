"""Environment-driven settings for RoleBot."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .utils import bool_from_env, str_from_env

DEFAULT_WATCH_CHANNEL = "channel-management"


@dataclass(frozen=True)
class BotSettings:
    token: str
    watch_channel: str = DEFAULT_WATCH_CHANNEL
    log_level: str = "INFO"
    ignore_self: bool = False

    @classmethod
    def from_env(cls) -> "BotSettings":
        token = os.getenv("DISCORD_TOKEN", "").strip()
        if not token:
            raise RuntimeError("Missing DISCORD_TOKEN. Set it in your environment or .env file.")
        return cls(
            token=token,
            watch_channel=str_from_env("ROLEBOT_WATCH_CHANNEL", DEFAULT_WATCH_CHANNEL),
            log_level=str_from_env("ROLEBOT_LOG_LEVEL", "INFO").upper(),
            ignore_self=bool_from_env("ROLEBOT_IGNORE_SELF", False),
        )

    def __repr__(self) -> str:
        return (
            f"<BotSettings watch_channel={self.watch_channel!r} "
            f"log_level={self.log_level!r} ignore_self={self.ignore_self}>"
        )


__all__ = ["BotSettings", "DEFAULT_WATCH_CHANNEL"]
