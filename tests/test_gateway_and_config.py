import importlib
import os
import unittest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import discord

from rolebot.config import DEFAULT_WATCH_CHANNEL, BotSettings
from rolebot.gateway import ROLE_REASON, DiscordGateway


class DiscordGatewayTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.client = MagicMock()
        self.client.user = SimpleNamespace(id=999)
        self.client.fetch_channel = AsyncMock()
        self.client.fetch_guild = AsyncMock()
        self.gateway = DiscordGateway(self.client)

    def test_is_self(self) -> None:
        self.assertTrue(self.gateway.is_self(999))
        self.assertFalse(self.gateway.is_self(1))
        self.client.user = None
        self.assertFalse(self.gateway.is_self(999))

    async def test_channel_prefers_cache(self) -> None:
        cached = object()
        self.client.get_channel.return_value = cached
        self.assertIs(await self.gateway.fetch_channel(5), cached)
        self.client.fetch_channel.assert_not_awaited()

    async def test_channel_falls_back_to_fetch(self) -> None:
        fetched = object()
        self.client.get_channel.return_value = None
        self.client.fetch_channel.return_value = fetched
        self.assertIs(await self.gateway.fetch_channel(5), fetched)
        self.client.fetch_channel.assert_awaited_once_with(5)

    async def test_guild_prefers_cache(self) -> None:
        cached = SimpleNamespace(roles=[])
        self.client.get_guild.return_value = cached
        self.assertIs(await self.gateway.fetch_guild(7), cached)
        self.client.fetch_guild.assert_not_awaited()

    async def test_guild_fetched_once_for_roles_and_member(self) -> None:
        roles = [SimpleNamespace(name="Gamer", id=10)]
        member = object()
        fetched = MagicMock()
        fetched.roles = roles
        fetched.get_member.return_value = None
        fetched.fetch_member = AsyncMock(return_value=member)
        self.client.get_guild.return_value = None
        self.client.fetch_guild.return_value = fetched
        guild = await self.gateway.fetch_guild(7)
        self.assertEqual(guild.roles, roles)
        self.assertIs(await self.gateway.fetch_member(guild, 8), member)
        self.client.fetch_guild.assert_awaited_once_with(7)

    async def test_member_falls_back_to_fetch(self) -> None:
        member = object()
        guild = MagicMock()
        guild.get_member.return_value = None
        guild.fetch_member = AsyncMock(return_value=member)
        self.assertIs(await self.gateway.fetch_member(guild, 8), member)
        guild.fetch_member.assert_awaited_once_with(8)
        self.client.fetch_guild.assert_not_awaited()

    async def test_role_mutations_use_role_id(self) -> None:
        member = MagicMock()
        member.add_roles = AsyncMock()
        member.remove_roles = AsyncMock()
        await self.gateway.grant_role(member, 20)
        await self.gateway.revoke_role(member, 20)
        (granted,), grant_kwargs = member.add_roles.await_args
        (revoked,), revoke_kwargs = member.remove_roles.await_args
        self.assertIsInstance(granted, discord.Object)
        self.assertEqual((granted.id, revoked.id), (20, 20))
        self.assertEqual(grant_kwargs["reason"], ROLE_REASON)
        self.assertEqual(revoke_kwargs["reason"], ROLE_REASON)


class BotSettingsTests(unittest.TestCase):
    def test_missing_token_is_fatal(self) -> None:
        with patch.dict(os.environ, {"DISCORD_TOKEN": ""}, clear=True):
            with self.assertRaises(RuntimeError):
                BotSettings.from_env()

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {"DISCORD_TOKEN": "secret"}, clear=True):
            settings = BotSettings.from_env()
        self.assertEqual(settings.token, "secret")
        self.assertEqual(settings.watch_channel, DEFAULT_WATCH_CHANNEL)
        self.assertEqual(settings.log_level, "INFO")
        self.assertFalse(settings.ignore_self)
        self.assertNotIn("secret", repr(settings))

    def test_overrides(self) -> None:
        env = {
            "DISCORD_TOKEN": "secret",
            "ROLEBOT_WATCH_CHANNEL": "role-menu",
            "ROLEBOT_LOG_LEVEL": "debug",
            "ROLEBOT_IGNORE_SELF": "on",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = BotSettings.from_env()
        self.assertEqual(settings.watch_channel, "role-menu")
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertTrue(settings.ignore_self)

    def test_invalid_boolean_falls_back(self) -> None:
        with patch.dict(os.environ, {"DISCORD_TOKEN": "secret", "ROLEBOT_IGNORE_SELF": "maybe"}, clear=True):
            with self.assertLogs("rolebot.utils", level="WARNING"):
                settings = BotSettings.from_env()
        self.assertFalse(settings.ignore_self)


class BootstrapTests(unittest.TestCase):
    def test_only_message_content_intent_is_privileged(self) -> None:
        with patch.dict(os.environ, {"DISCORD_TOKEN": "secret"}):
            bot_module = importlib.import_module("bot")
        self.assertTrue(bot_module.intents.message_content)
        self.assertFalse(bot_module.intents.members)
        self.assertFalse(bot_module.intents.presences)


if __name__ == "__main__":
    unittest.main()
