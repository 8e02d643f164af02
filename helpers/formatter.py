# helpers/formatter.py
"""
Petits utilitaires de mise en forme pour les embeds Discord.

Toutes les fonctions sont pures : elles prennent une chaîne et renvoient une
chaîne en markdown Discord, sans jamais lever d'exception.
"""

from __future__ import annotations

import html
import re
from typing import Any, Callable, Optional

EMPTY_STR = "-"
NO_TRAILER = "None"

_WORD = re.compile(r"[^\W_]+(?:'[^\W_]+)?")


def title_case(text: str) -> str:
    """Met une majuscule à chaque mot (``RELEASING`` -> ``Releasing``)."""
    return _WORD.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), text)


def remove_underscores_and_titlecase(text: str) -> str:
    return title_case(text.replace("_", " "))


def code(text: str) -> str:
    return f"`{text}`"


def italics(text: str) -> str:
    return f"*{text}*"


def bold(text: str) -> str:
    return f"**{text}**"


def link(label: str, url: str) -> str:
    return f"[{label}]({url})"


def present_or(value: Optional[Any], default: str = EMPTY_STR, render: Callable[[Any], str] = str) -> str:
    """Rend ``value`` avec ``render``, ou ``default`` si la valeur est absente."""
    if value is None:
        return default
    return render(value)


# Balises HTML renvoyées par AniList dans les descriptions
_INLINE_TAGS = [
    (re.compile(r"</?(?:i|em)>", re.I), "*"),
    (re.compile(r"</?(?:b|strong)>", re.I), "**"),
    (re.compile(r"</?u>", re.I), "__"),
    (re.compile(r"</?(?:s|strike|del)>", re.I), "~~"),
]
_BREAK = re.compile(r"<br\s*/?>", re.I)
_PARAGRAPH = re.compile(r"</p>", re.I)
_ANCHOR = re.compile(r"<a\s+[^>]*href=[\"']([^\"']+)[\"'][^>]*>(.*?)</a>", re.I | re.S)
_ANY_TAG = re.compile(r"<[^>]+>")
_BLANK_LINES = re.compile(r"\n{3,}")


def html_to_markdown(text: str) -> str:
    """Convertit le sous-ensemble HTML d'AniList en markdown Discord."""
    text = (text or "").replace("\r\n", "\n")
    # AniList double souvent les <br> avec de vrais retours à la ligne
    text = re.sub(r"<br\s*/?>\n", "\n", text, flags=re.I)
    text = _BREAK.sub("\n", text)
    text = _PARAGRAPH.sub("\n\n", text)
    text = _ANCHOR.sub(lambda m: link(m.group(2).strip(), m.group(1)), text)
    for pattern, marker in _INLINE_TAGS:
        text = pattern.sub(marker, text)
    text = _ANY_TAG.sub("", text)
    text = html.unescape(text)
    text = _BLANK_LINES.sub("\n\n", text)
    return text.strip()


# Limites imposées par Discord
MAX_TITLE = 256
MAX_DESCRIPTION = 4096
MAX_FIELD_VALUE = 1024
MAX_FOOTER = 2048


def truncate(text: str, limit: int) -> str:
    """Coupe ``text`` à ``limit`` caractères en terminant par ``…``."""
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"
