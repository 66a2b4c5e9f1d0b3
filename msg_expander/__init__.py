"""msg_expander — expands Discord message links into embeds."""

from msg_expander.config import __version__

__all__ = ["__version__"]
