"""
Assemblage des embeds anime / manga.

``build_anime_payload`` et ``build_manga_payload`` appellent les transformers
dans un ordre fixe et produisent un ``EmbedPayload`` neutre, converti en
``discord.Embed`` seulement au moment de l'envoi.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import discord

from helpers.formatter import MAX_DESCRIPTION, MAX_FIELD_VALUE, MAX_FOOTER, MAX_TITLE, title_case, truncate
from modules.models import Anime, Manga
from modules.transformers import anime as anime_tf
from modules.transformers import common
from modules.transformers import manga as manga_tf


@dataclass(frozen=True)
class EmbedField:
    name: str
    value: str
    inline: bool = True


@dataclass(frozen=True)
class EmbedPayload:
    title: str
    description: str
    color: int
    fields: Tuple[EmbedField, ...]
    footer: Optional[str] = None
    thumbnail: Optional[str] = None
    url: Optional[str] = None

    def to_embed(self) -> discord.Embed:
        embed = discord.Embed(
            title=truncate(self.title, MAX_TITLE),
            description=truncate(self.description, MAX_DESCRIPTION),
            color=self.color,
            url=self.url,
        )
        for field in self.fields:
            embed.add_field(name=field.name, value=truncate(field.value, MAX_FIELD_VALUE), inline=field.inline)
        if self.footer:
            embed.set_footer(text=truncate(self.footer, MAX_FOOTER))
        if self.thumbnail:
            embed.set_thumbnail(url=self.thumbnail)
        return embed


def build_anime_payload(anime: Anime) -> EmbedPayload:
    fields: List[EmbedField] = [
        EmbedField("Type", "Anime"),
        EmbedField("Status", anime_tf.transform_status(anime)),
        EmbedField("Season", anime_tf.transform_season(anime)),
        EmbedField("Format", anime_tf.transform_format(anime)),
        EmbedField("Episodes", anime_tf.transform_episodes(anime)),
        EmbedField("Duration", anime_tf.transform_duration(anime)),
        EmbedField("Source", anime_tf.transform_source(anime)),
        EmbedField("Average Score", common.transform_score(anime)),
        EmbedField("Genres", common.transform_genres(anime), inline=False),
        EmbedField("Studios", anime_tf.transform_studios(anime), inline=False),
        EmbedField("Anilist", common.transform_anilist(anime), inline=False),
        EmbedField("Streaming At", anime_tf.transform_links(anime), inline=False),
        EmbedField("Trailer", anime_tf.transform_trailer(anime), inline=False),
    ]
    return EmbedPayload(
        title=common.transform_title(anime),
        description=common.transform_description(anime),
        color=common.transform_color(anime),
        fields=tuple(fields),
        footer=common.transform_mal_link(anime),
        thumbnail=common.transform_thumbnail(anime),
        url=anime.site_url,
    )


def build_manga_payload(manga: Manga) -> EmbedPayload:
    fields: List[EmbedField] = [
        EmbedField("Type", title_case(manga_tf.transform_type(manga))),
        EmbedField("Status", manga_tf.transform_status(manga)),
        EmbedField("Published", manga_tf.transform_date(manga)),
        EmbedField("Format", manga_tf.transform_format(manga)),
        EmbedField("Chapters", manga_tf.transform_chapters(manga)),
        EmbedField("Volumes", manga_tf.transform_volumes(manga)),
        EmbedField("Source", manga_tf.transform_source(manga)),
        EmbedField("Average Score", common.transform_score(manga)),
        EmbedField("Top Tag", manga_tf.transform_tags(manga)),
        EmbedField("Genres", common.transform_genres(manga), inline=False),
        EmbedField("Staff", manga_tf.transform_staff(manga), inline=False),
        EmbedField("Anilist", common.transform_anilist(manga), inline=False),
    ]
    return EmbedPayload(
        title=common.transform_title(manga),
        description=manga_tf.transform_description_and_mal_link(manga),
        color=common.transform_color(manga),
        fields=tuple(fields),
        footer=common.transform_english_title(manga),
        thumbnail=common.transform_thumbnail(manga),
        url=manga.site_url,
    )
