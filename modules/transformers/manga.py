"""Transformers propres aux fiches manga."""

from __future__ import annotations

from typing import Optional

from helpers.formatter import (
    EMPTY_STR,
    MAX_DESCRIPTION,
    bold,
    code,
    italics,
    link,
    present_or,
    remove_underscores_and_titlecase,
    title_case,
    truncate,
)
from modules.models import FuzzyDate, Manga
from modules.transformers.common import transform_description, transform_mal_link

MONTHS = ("", "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def transform_type(manga: Manga) -> str:
    return (manga.media_type or "manga").lower()


def format_date(date: FuzzyDate) -> str:
    """``Jan 5 2020`` ; les composantes absentes valent 0."""
    month = date.month or 0
    abbr = MONTHS[month] if 0 <= month < len(MONTHS) else ""
    return f"{abbr} {date.day or 0} {date.year or 0}".strip()


def transform_date(manga: Manga) -> str:
    if manga.start_date is None or manga.start_date.is_empty:
        return EMPTY_STR
    start = format_date(manga.start_date)
    if manga.end_date is not None and manga.end_date.is_complete:
        return f"{start} - {format_date(manga.end_date)}"
    return start


def transform_format(manga: Manga) -> str:
    return present_or(manga.format, render=remove_underscores_and_titlecase)


def transform_status(manga: Manga) -> str:
    return present_or(manga.status, render=remove_underscores_and_titlecase)


def transform_chapters(manga: Manga) -> str:
    return present_or(manga.chapters)


def transform_volumes(manga: Manga) -> str:
    return present_or(manga.volumes)


def transform_source(manga: Manga) -> str:
    return present_or(manga.source, render=remove_underscores_and_titlecase)


def transform_staff(manga: Manga) -> str:
    """Auteur (``story``) et dessinateur (``art``), affiché une seule fois si identiques.

    Sans rôle correspondant, le premier crédit est retenu ; en cas de
    plusieurs correspondances, la dernière l'emporte.
    """
    if not manga.staff:
        return EMPTY_STR

    writer = artist = manga.staff[0]
    for credit in manga.staff:
        role = credit.role.lower()
        if "story" in role:
            writer = credit
        if "art" in role:
            artist = credit

    if writer.name == artist.name:
        return code(title_case(writer.name))
    return f"{code(title_case(writer.name))} x {code(title_case(artist.name))}"


def transform_tags(manga: Manga) -> str:
    if not manga.tags:
        return EMPTY_STR
    return italics(manga.tags[0].name)


def transform_description_and_mal_link(manga: Manga) -> str:
    description = transform_description(manga)
    url: Optional[str] = transform_mal_link(manga)
    if url is None:
        return description
    # Le lien doit survivre à la limite de longueur de Discord
    suffix = bold(link("MyAnimeList", url))
    description = truncate(description, MAX_DESCRIPTION - len(suffix) - 2)
    return f"{description}\n\n{suffix}"
