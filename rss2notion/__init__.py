"""Mirror RSS feed content into a Notion database."""

__version__ = "0.1.0"
