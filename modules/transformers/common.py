"""
Transformers communs aux fiches anime et manga.

Chaque fonction prend une fiche et renvoie une valeur prête à afficher ; une
donnée absente donne toujours un placeholder, jamais une chaîne vide.
"""

from __future__ import annotations

import re
from typing import Optional, Union

from helpers.formatter import EMPTY_STR, code, html_to_markdown, present_or, title_case
from modules.models import Anime, MalformedUpstreamRecord, Manga

Media = Union[Anime, Manga]

DEFAULT_COLOR = 0x0000FF
NO_DESCRIPTION = "<i>No Description Yet</i>"

_HEX_COLOR = re.compile(r"#?([0-9A-Fa-f]{1,6})")


def transform_title(media: Media) -> str:
    """Titre affiché : romaji, sinon anglais, sinon natif."""
    title = media.title
    for candidate in (title.romaji, title.english, title.native):
        if candidate is not None:
            return candidate
    raise MalformedUpstreamRecord("title", "no title variant present")


def transform_english_title(media: Media) -> str:
    """Titre anglais en priorité, puis romaji, puis natif."""
    title = media.title
    for candidate in (title.english, title.romaji, title.native):
        if candidate is not None:
            return candidate
    raise MalformedUpstreamRecord("title", "no title variant present")


def transform_score(media: Media) -> str:
    return present_or(media.average_score, render=lambda score: f"{score}/100")


def transform_genres(media: Media) -> str:
    genres = " - ".join(code(title_case(genre)) for genre in media.genres)
    return genres or EMPTY_STR


def transform_color(media: Media) -> int:
    """Couleur de l'embed (RGB 24 bits), bleu par défaut."""
    color = media.cover_image.color
    if color is None:
        return DEFAULT_COLOR
    match = _HEX_COLOR.fullmatch(color.strip())
    if not match:
        return DEFAULT_COLOR
    return int(match.group(1), 16)


def transform_thumbnail(media: Media) -> Optional[str]:
    cover = media.cover_image
    return cover.extra_large or cover.large or cover.medium


def transform_anilist(media: Media) -> str:
    return media.site_url


def transform_mal_link(media: Media) -> Optional[str]:
    if media.id_mal is None:
        return None
    kind = "anime" if isinstance(media, Anime) else "manga"
    return f"https://www.myanimelist.net/{kind}/{media.id_mal}"


def transform_description(media: Media) -> str:
    return html_to_markdown(present_or(media.description, default=NO_DESCRIPTION))
