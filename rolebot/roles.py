"""Guild role lookup by name."""

from __future__ import annotations

from typing import Iterable

import discord


class RoleNotFound(Exception):
    """Raised when a guild has no role with the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no role named {name!r} in this guild")


def resolve_role_id(roles: Iterable[discord.Role], name: str) -> int:
    """Return the id of the role called exactly ``name``."""
    role = discord.utils.get(roles, name=name)
    if role is None:
        raise RoleNotFound(name)
    return role.id


__all__ = ["RoleNotFound", "resolve_role_id"]
