"""
Module core pour le AnimeBot.

Centralise la configuration lue depuis l'environnement (ou un fichier
``.env``) ainsi que la mise en place du logging.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Charger les variables d'environnement si .env présent
load_dotenv()

###############################################################################
# Configuration
###############################################################################

DISCORD_TOKEN = os.getenv("DISCORD_BOT_TOKEN")
COMMAND_PREFIX = os.getenv("COMMAND_PREFIX", "!")
ANILIST_API_URL = os.getenv("ANILIST_API_URL", "https://graphql.anilist.co")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "bot.log")

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging() -> None:
    """Configure le logging (fichier + console) une seule fois au démarrage."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(LOG_FILE, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
