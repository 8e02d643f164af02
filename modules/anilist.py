# modules/anilist.py

import logging
from typing import Any, Dict, Optional

import requests

from modules import core
from modules.models import Anime, Manga

logger = logging.getLogger(__name__)

_MEDIA_FIELDS = """
      id
      idMal
      title {
        romaji
        english
        native
      }
      format
      status
      genres
      source
      averageScore
      siteUrl
      description
      coverImage {
        extraLarge
        large
        medium
        color
      }
"""

ANIME_QUERY = """
query ($search: String) {
  Media(search: $search, type: ANIME) {
%s
      season
      seasonYear
      episodes
      duration
      externalLinks {
        url
        type
      }
      trailer {
        id
        site
      }
      studios {
        edges {
          id
          isMain
        }
        nodes {
          id
          name
        }
      }
  }
}
""" % _MEDIA_FIELDS

MANGA_QUERY = """
query ($search: String) {
  Media(search: $search, type: MANGA) {
%s
      type
      chapters
      volumes
      startDate {
        year
        month
        day
      }
      endDate {
        year
        month
        day
      }
      tags {
        name
      }
      staff {
        edges {
          id
          role
        }
        nodes {
          id
          name {
            full
          }
        }
      }
  }
}
""" % _MEDIA_FIELDS


class AniListError(Exception):
    """Erreur de communication avec l'API AniList."""


class MediaNotFound(AniListError):
    """Aucun média ne correspond à la recherche."""

    def __init__(self, search: str) -> None:
        self.search = search
        super().__init__(f"Aucun résultat AniList pour '{search}'")


def query_anilist(query: str, variables: Optional[dict] = None) -> Dict[str, Any]:
    """Exécute une requête GraphQL (bloquant, à lancer via ``asyncio.to_thread``)."""
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json"
    }
    payload = {"query": query, "variables": variables or {}}

    try:
        response = requests.post(core.ANILIST_API_URL, json=payload, headers=headers)
    except requests.RequestException as e:
        logger.error(f"Erreur réseau AniList : {e}")
        raise AniListError(f"AniList injoignable : {e}") from e

    if response.status_code == 404:
        raise MediaNotFound((variables or {}).get("search", ""))
    if response.status_code != 200:
        logger.error(f"❌ Erreur AniList {response.status_code} : {response.text}")
        raise AniListError(f"Erreur AniList: {response.status_code}")

    try:
        return response.json()
    except ValueError as e:
        raise AniListError("Réponse AniList illisible") from e


def _fetch_media(query: str, search: str) -> Dict[str, Any]:
    data = query_anilist(query, {"search": search})
    media = (data.get("data") or {}).get("Media")
    if not media:
        raise MediaNotFound(search)
    return media


def fetch_anime(search: str) -> Anime:
    logger.info(f"Recherche anime : {search}")
    return Anime.from_dict(_fetch_media(ANIME_QUERY, search))


def fetch_manga(search: str) -> Manga:
    logger.info(f"Recherche manga : {search}")
    return Manga.from_dict(_fetch_media(MANGA_QUERY, search))
