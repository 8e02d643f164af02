"""Transformers propres aux fiches anime."""

from __future__ import annotations

from typing import Optional

from helpers.formatter import EMPTY_STR, NO_TRAILER, code, link, present_or, title_case
from modules.models import Anime

# (sous-chaîne recherchée dans l'URL, libellé affiché)
STREAMING_PROVIDERS = [
    ("hbo", "HBO"),
    ("netflix", "Netflix"),
    ("crunchyroll", "Crunchyroll"),
]


def transform_season(anime: Anime) -> str:
    season = anime.season or ""
    year = "" if anime.season_year is None else str(anime.season_year)
    text = title_case(f"{season} {year}".strip())
    return text or EMPTY_STR


def transform_format(anime: Anime) -> str:
    return present_or(anime.format, render=lambda fmt: fmt if fmt == "TV" else title_case(fmt))


def transform_status(anime: Anime) -> str:
    return present_or(
        anime.status,
        render=lambda status: "Not Released" if status.startswith("NOT") else title_case(status),
    )


def transform_episodes(anime: Anime) -> str:
    return present_or(anime.episodes)


def transform_duration(anime: Anime) -> str:
    return present_or(anime.duration, render=lambda minutes: f"{minutes} mins")


def transform_source(anime: Anime) -> str:
    return present_or(anime.source, render=title_case)


def transform_studios(anime: Anime) -> str:
    """Studios principaux, séparés par `` x ``."""
    if not anime.studios:
        return EMPTY_STR
    studios = " x ".join(code(title_case(studio.name)) for studio in anime.studios if studio.is_main)
    return studios or EMPTY_STR


def _provider(url: str) -> Optional[str]:
    lowered = url.lower()
    for needle, label in STREAMING_PROVIDERS:
        if needle in lowered:
            return label
    return None


def transform_links(anime: Anime) -> str:
    """Liens de streaming reconnus (HBO, Netflix, Crunchyroll)."""
    if not anime.external_links:
        return EMPTY_STR
    links = []
    for external in anime.external_links:
        if external.type.lower() != "streaming":
            continue
        label = _provider(external.url)
        if label:
            links.append(link(label, external.url))
    return " ".join(links) or EMPTY_STR


def transform_trailer(anime: Anime) -> str:
    # Le site n'est pas vérifié : AniList renvoie "youtube" ou "dailymotion"
    return present_or(
        anime.trailer,
        default=NO_TRAILER,
        render=lambda trailer: link("YouTube", f"https://www.{trailer.site}.com/watch?v={trailer.id}"),
    )
