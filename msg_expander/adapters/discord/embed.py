"""Summary -> discord.Embed."""

import discord

from msg_expander.domain.models import Summary


def summary_to_embed(summary: Summary) -> discord.Embed:
    embed = discord.Embed(
        description=summary.description,
        color=summary.color,
        timestamp=summary.timestamp,
    )
    embed.set_author(name=summary.author_name, icon_url=summary.author_icon_url)
    embed.set_footer(text=summary.footer_text)
    if summary.image_url:
        embed.set_image(url=summary.image_url)
    return embed
