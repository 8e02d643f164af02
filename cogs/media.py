# cogs/media.py
"""
!anime / !manga : fiche AniList d'un anime ou d'un manga.

La requête AniList (bloquante) tourne dans un thread via ``asyncio.to_thread``
pour ne pas bloquer les autres commandes ; l'envoi se fait ensuite sur la
boucle principale.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import discord
from discord.ext import commands

from modules import anilist
from modules.embeds import EmbedPayload, build_anime_payload, build_manga_payload

logger = logging.getLogger(__name__)


def first_token(text: Optional[str]) -> Optional[str]:
    """Premier mot de la recherche (``None`` si vide)."""
    if not text:
        return None
    parts = text.split()
    return parts[0] if parts else None


class Media(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    async def _send_payload(self, ctx: commands.Context, payload: EmbedPayload) -> None:
        try:
            await ctx.send(embed=payload.to_embed())
        except discord.HTTPException as e:
            logger.error(f"Erreur lors de l'envoi du message : {e!r}")

    @commands.command(name="anime")
    async def anime(self, ctx: commands.Context, *, search: str = None):
        """📺 Affiche la fiche AniList d'un anime."""
        term = first_token(search)
        if not term:
            await ctx.send("❗ Utilisation : `!anime <titre>`")
            return

        async with ctx.typing():
            try:
                record = await asyncio.to_thread(anilist.fetch_anime, term)
            except anilist.MediaNotFound:
                await ctx.send(f"❌ Aucun anime trouvé pour `{term}`.")
                return
            payload = build_anime_payload(record)

        await self._send_payload(ctx, payload)

    @commands.command(name="manga", aliases=["m"])
    async def manga(self, ctx: commands.Context, *, search: str = None):
        """📚 Affiche la fiche AniList d'un manga."""
        term = first_token(search)
        if not term:
            await ctx.send("❗ Utilisation : `!manga <titre>`")
            return

        async with ctx.typing():
            try:
                record = await asyncio.to_thread(anilist.fetch_manga, term)
            except anilist.MediaNotFound:
                await ctx.send(f"❌ Aucun manga trouvé pour `{term}`.")
                return
            payload = build_manga_payload(record)

        await self._send_payload(ctx, payload)


async def setup(bot: commands.Bot):
    await bot.add_cog(Media(bot))
