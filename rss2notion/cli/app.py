"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .feeds import feeds_command
from .run import clean_command, run_command

app = typer.Typer(
    name="rss2notion",
    help="Mirror RSS feeds into a Notion database",
    no_args_is_help=True,
)

# Register commands
app.command("run")(run_command)
app.command("clean")(clean_command)
app.command("feeds")(feeds_command)


if __name__ == "__main__":
    app()
