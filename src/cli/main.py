"""hike CLI entry point."""

import logging

import typer

from cli.commands import hikes, replay

app = typer.Typer(
    name="hike",
    help="Replay GPS tracks and manage saved hikes.",
    no_args_is_help=True,
)

app.command("replay")(replay.replay_track)
app.command("list")(hikes.list_hikes)
app.command("show")(hikes.show_hike)
app.command("delete")(hikes.delete_hike)
app.command("set-user")(hikes.set_user)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Configure logging once for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


if __name__ == "__main__":
    app()
