"""Main CLI entry point for buildinfo."""

from pathlib import Path

import click
from pydantic import ValidationError

from buildinfo.builder import BuildInfoBuilder
from buildinfo.cli.display import show_build_summary, show_error, show_success
from buildinfo.core.config import ConfigLoader, Settings, get_settings
from buildinfo.core.exceptions import BuildInfoError, ConfigurationError
from buildinfo.core.logger import get_logger, setup_logging

logger = get_logger(__name__)


def _load_settings() -> Settings:
    """Load settings, reporting invalid values as a CLI error."""
    try:
        return get_settings()
    except (ValidationError, ConfigurationError) as e:
        show_error("Invalid Settings", str(e))
        raise SystemExit(1) from e


@click.group(invoke_without_command=True)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, version: bool, verbose: bool) -> None:
    """buildinfo - assemble CI build-info documents."""
    if version:
        from buildinfo import __version__

        click.echo(f"buildinfo version {__version__}")
        return

    settings = _load_settings()
    setup_logging(settings.logging, level="DEBUG" if verbose else None)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.argument("description", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write JSON to this file")
@click.option("--indent", "-n", type=int, default=None, help="JSON indentation (default from settings)")
@click.option("--summary", "-s", is_flag=True, help="Show a summary table of the build")
def assemble(description: Path, output: Path | None, indent: int | None, summary: bool) -> None:
    """Assemble a build-info document from a YAML build description.

    Example:
        buildinfo assemble build.yaml --output build-info.json
    """
    settings = _load_settings().builder

    try:
        data = ConfigLoader(description).load()
        build_info = BuildInfoBuilder.from_dict(data, settings=settings).build()
    except BuildInfoError as e:
        logger.debug(f"Failed to assemble {description}: {e}")
        show_error("Invalid Build", e.message)
        raise SystemExit(1) from e

    document = build_info.to_json(indent=settings.json_indent if indent is None else indent)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document + "\n", encoding="utf-8")
        show_success("Build Info Written", f"{build_info.name}#{build_info.number} saved to {output}")
    else:
        click.echo(document)

    if summary:
        show_build_summary(build_info)


if __name__ == "__main__":
    main()
