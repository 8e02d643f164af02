# cogs/help.py
from __future__ import annotations

from typing import List

import discord
from discord.ext import commands

EMBED_COLOR = 0x5865F2


def _cmd_sig(cmd: commands.Command, prefix: str) -> str:
    sig = f"{prefix}{cmd.qualified_name}"
    if cmd.signature:
        sig += f" {cmd.signature}"
    return f"`{sig}`"


def build_help_embed(cmds: List[commands.Command], prefix: str) -> discord.Embed:
    embed = discord.Embed(
        title="📖 Commandes disponibles",
        description="Recherche d'animes et de mangas sur AniList.",
        color=EMBED_COLOR,
    )
    for cmd in sorted(cmds, key=lambda c: c.qualified_name.lower()):
        if getattr(cmd, "hidden", False):
            continue
        value = cmd.short_doc or "—"
        if cmd.aliases:
            value += "\nAlias : " + ", ".join(f"`{prefix}{a}`" for a in cmd.aliases)
        embed.add_field(name=_cmd_sig(cmd, prefix), value=value, inline=False)
    return embed


class Help(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @commands.command(name="help", aliases=["aide"])
    async def help(self, ctx: commands.Context):
        """❓ Liste les commandes du bot."""
        embed = build_help_embed(list(self.bot.commands), ctx.clean_prefix)
        await ctx.send(embed=embed)


async def setup(bot: commands.Bot):
    await bot.add_cog(Help(bot))
