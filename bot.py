"""
Point d'entrée principal du AnimeBot.

Ce script initialise le bot Discord et charge tous les cogs situés dans le
dossier ``cogs`` (fiches anime / manga AniList, aide).
"""

import asyncio
import logging
import os
import sys

import discord
from discord.ext import commands

from modules import core
from modules.anilist import AniListError
from modules.models import MalformedUpstreamRecord

logger = logging.getLogger(__name__)

# Configuration des intents Discord
intents = discord.Intents.default()
intents.message_content = True
intents.guilds = True


class AnimeBot(commands.Bot):
    """Classe principale du bot."""

    def __init__(self):
        super().__init__(
            command_prefix=core.COMMAND_PREFIX,
            intents=intents,
            help_command=None,
            case_insensitive=True
        )

    async def setup_hook(self) -> None:
        """Configure le bot au démarrage."""
        await self.load_extensions()

    async def on_ready(self):
        """Appelé quand le bot est prêt et connecté."""
        logger.info(f"Bot connecté en tant que {self.user.name} (ID: {self.user.id})")
        logger.info(f"Version Discord.py : {discord.__version__}")
        logger.info("------")

    async def load_extensions(self) -> None:
        """Charge tous les cogs depuis le dossier cogs."""
        cogs_dir = os.path.join(os.path.dirname(__file__), "cogs")
        for filename in sorted(os.listdir(cogs_dir)):
            if filename.endswith(".py") and not filename.startswith("_"):
                extension = f"cogs.{filename[:-3]}"
                try:
                    await self.load_extension(extension)
                    logger.info(f"Extension chargée : {filename}")
                except commands.ExtensionError as e:
                    logger.error(f"Échec du chargement de l'extension {filename}: {e}")

    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError) -> None:
        """Gestion centralisée des erreurs de commande."""
        if isinstance(error, commands.CommandNotFound):
            return
        if isinstance(error, commands.MissingRequiredArgument):
            await ctx.send(f"❗ Argument manquant : `{error.param.name}`")
            return

        original = getattr(error, "original", error)
        if isinstance(original, MalformedUpstreamRecord):
            logger.error(f"Fiche AniList invalide pour {ctx.message.content!r} : {original}")
            await ctx.send("❌ AniList a renvoyé une fiche incomplète.")
        elif isinstance(original, AniListError):
            logger.error(f"Erreur AniList pour {ctx.message.content!r} : {original}")
            await ctx.send("❌ AniList est indisponible pour le moment, réessaie plus tard.")
        else:
            logger.error(f"Erreur dans la commande {ctx.command} : {original!r}", exc_info=original)
            await ctx.send(f"❌ Une erreur est survenue : `{type(original).__name__}`")


async def main() -> None:
    core.setup_logging()
    if not core.DISCORD_TOKEN:
        logger.error("❌ Le token Discord n'est pas défini (clé DISCORD_BOT_TOKEN).")
        sys.exit(1)

    bot = AnimeBot()
    async with bot:
        await bot.start(core.DISCORD_TOKEN)


if __name__ == "__main__":
    asyncio.run(main())
