"""stencil CLI - Main entry point."""
import typer

from . import info_cmd, precompile_cmd, render_cmd

app = typer.Typer(
    name="stencil",
    help="stencil CLI - Precompile and render storefront templates",
    no_args_is_help=True,
    add_completion=False,
)

# Register all commands
app.command()(precompile_cmd.precompile)
app.command()(render_cmd.render)
app.command()(info_cmd.version)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
