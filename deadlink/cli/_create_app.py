"""Create the main Typer CLI app."""

import typer

from deadlink.api.config.DeadLinkConfig import DeadLinkConfig
from deadlink.api.lint.cmd_check import cmd_check
from deadlink.api.lint.cmd_fix import cmd_fix
from deadlink.cli._handle_stage_result import _handle_stage_result
from deadlink.utils.logger import configure_logging


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Find dead and permanently redirected links in Markdown documents",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

        try:
            level = DeadLinkConfig.load().log.level
        except ValueError:
            level = "INFO"  # commands report the configuration error themselves
        configure_logging(DeadLinkConfig.get_home_dir(), level)

    @app.command(name="check")
    def check_cmd(
        path: str = typer.Argument(..., help="Path to Markdown file to check"),
        check_relative: bool | None = typer.Option(
            None, "--check-relative/--no-check-relative", help="Check relative URIs (requires --base-uri)"
        ),
        base_uri: str | None = typer.Option(None, "--base-uri", help="Base URI to resolve relative URIs against"),
        ignore: list[str] | None = typer.Option(None, "--ignore", "-i", help="URI to skip (repeatable)"),
    ) -> None:
        """Report dead and permanently redirected links in a file."""
        _handle_stage_result(cmd_check)(path=path, check_relative=check_relative, base_uri=base_uri, ignore=ignore)

    @app.command(name="fix")
    def fix_cmd(
        path: str = typer.Argument(..., help="Path to Markdown file to fix"),
        check_relative: bool | None = typer.Option(
            None, "--check-relative/--no-check-relative", help="Check relative URIs (requires --base-uri)"
        ),
        base_uri: str | None = typer.Option(None, "--base-uri", help="Base URI to resolve relative URIs against"),
        ignore: list[str] | None = typer.Option(None, "--ignore", "-i", help="URI to skip (repeatable)"),
        dry_run: bool = typer.Option(False, "--dry-run", help="Report fixes without writing the file"),
    ) -> None:
        """Rewrite permanently redirected links to their final destination."""
        _handle_stage_result(cmd_fix)(
            path=path, check_relative=check_relative, base_uri=base_uri, ignore=ignore, dry_run=dry_run
        )

    return app
