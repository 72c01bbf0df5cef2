import logging
import sys

import discord
from discord.ext import commands
from dotenv import load_dotenv

from rolebot.config import BotSettings
from rolebot.reaction_roles import setup_reaction_roles

load_dotenv()

SETTINGS = BotSettings.from_env()

logging.basicConfig(
    level=SETTINGS.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("rolebot")

intents = discord.Intents.default()
intents.message_content = True


class RoleBot(commands.Bot):
    async def setup_hook(self) -> None:
        setup_reaction_roles(
            self,
            watch_channel=SETTINGS.watch_channel,
            ignore_self=SETTINGS.ignore_self,
        )


bot = RoleBot(command_prefix=commands.when_mentioned, intents=intents)


@bot.event
async def on_ready():
    logger.info("%s is connected!", bot.user.name if bot.user else "RoleBot")


def main():
    try:
        bot.run(SETTINGS.token, log_handler=None)
    except discord.DiscordException as exc:
        logger.error("Client error: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
