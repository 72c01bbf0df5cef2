"""Parsing of the emoji-to-role list embedded in a role menu message.

A role menu is any message whose text ends with a role list: the block after
the last blank line, one ``<emoji>: <role name>`` entry per line::

    React to get a role!

    🎮: Gamer
    🎨: Artist
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger("rolebot.role_list")

ROLE_LIST_SEPARATOR = "\n\n"


class RoleListError(Exception):
    """Raised when a role menu message cannot be turned into a role name."""


class NoRoleListFound(RoleListError):
    def __init__(self) -> None:
        super().__init__("couldn't find a role list in the message")


class MalformedLine(RoleListError):
    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"couldn't find a role within {line!r}")


class NoRoleForEmoji(RoleListError):
    def __init__(self, emoji: str) -> None:
        self.emoji = emoji
        super().__init__(f"no role listed for {emoji}")


def extract_role_list(text: str) -> str:
    """Return the block after the last blank line of ``text``."""
    if ROLE_LIST_SEPARATOR not in text:
        raise NoRoleListFound()
    return text.rsplit(ROLE_LIST_SEPARATOR, 1)[1]


def _split_entry(line: str) -> Tuple[str, str]:
    key, sep, role = line.partition(":")
    if not sep:
        raise MalformedLine(line)
    return key.strip(), role.strip()


class RoleList:
    """The well-formed ``(line, role name)`` entries of a role list, in document order.

    An emoji selects every entry whose line contains it anywhere, so a line
    may list several emojis for one role. The last selected entry wins.
    """

    def __init__(self, entries: Sequence[Tuple[str, str]] = ()):
        self.entries: Tuple[Tuple[str, str], ...] = tuple(entries)

    def get(self, emoji: str, default: Optional[str] = None) -> Optional[str]:
        role = default
        for line, name in self.entries:
            if emoji in line:
                role = name
        return role

    def role_for(self, emoji: str) -> str:
        role = self.get(emoji)
        if role is None:
            raise NoRoleForEmoji(emoji)
        return role

    def __contains__(self, emoji: object) -> bool:
        return isinstance(emoji, str) and self.get(emoji) is not None

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"<RoleList entries={len(self.entries)}>"


def parse_role_list(role_list: str) -> RoleList:
    """Collect the entries of a role list block.

    Lines without a colon are logged and skipped.
    """
    entries: List[Tuple[str, str]] = []
    for line in role_list.splitlines():
        if not line.strip():
            continue
        try:
            _key, role = _split_entry(line)
        except MalformedLine as exc:
            logger.warning("Skipping role list line: %s", exc)
            continue
        entries.append((line, role))
    return RoleList(entries)


def role_name_for_emoji(role_list: str, emoji: str) -> str:
    """Return the role name listed for ``emoji`` in a role list block."""
    return parse_role_list(role_list).role_for(emoji)


def parse(text: str) -> RoleList:
    """Parse the role list at the end of a whole message."""
    return parse_role_list(extract_role_list(text))


__all__ = [
    "MalformedLine",
    "NoRoleForEmoji",
    "NoRoleListFound",
    "ROLE_LIST_SEPARATOR",
    "RoleList",
    "RoleListError",
    "extract_role_list",
    "parse",
    "parse_role_list",
    "role_name_for_emoji",
]
