"""logfold CLI entry point."""

from typing import Optional

import typer
from rich.console import Console

app = typer.Typer(
    name="logfold",
    help="Self-compacting file logger",
    no_args_is_help=True,
    invoke_without_command=True,
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Path to a logfold.yaml file"
    ),
    show_version: bool = typer.Option(
        False, "--version", "-V", help="Show version and exit"
    ),
) -> None:
    """Self-compacting file logger."""
    if show_version:
        from logfold import __version__

        console.print(f"logfold {__version__}")
        raise typer.Exit()
    ctx.obj = {"config": config}


@app.command()
def version():
    """Show logfold version."""
    from logfold import __version__

    console.print(f"logfold {__version__}")


from logfold.cli.log import log
from logfold.cli.compact import compact
from logfold.cli.show import show
from logfold.cli.path import path

app.command()(log)
app.command()(compact)
app.command()(show)
app.command()(path)


if __name__ == "__main__":
    app()
