"""Command-line interface for direnum."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click

from direnum.core.config import ConfigurationError, MainConfig, load_main_config
from direnum.core.data.filesystem import (
    DirectoryEntry,
    DirectoryIterator,
    FsPath,
    file_attrib,
    get_backend,
)
from direnum.utils.logging import configure_logging

try:
    __version__ = version("direnum")
except PackageNotFoundError:
    __version__ = "unknown"

CONFIG_EXTENSIONS = {".yaml", ".yml"}


def validate_config_path(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: Path | None,
) -> Path | None:
    """Validate configuration file path.

    Raises:
        click.BadParameter: If the path is a directory or not a YAML file
    """
    if value is None:
        return value

    if value.exists() and value.is_dir():
        raise click.BadParameter("Configuration path must be a file, not a directory")

    if value.suffix.lower() not in CONFIG_EXTENSIONS:
        extensions_str = ", ".join(sorted(CONFIG_EXTENSIONS))
        raise click.BadParameter(f"Invalid configuration file extension. Supported extensions: {extensions_str}")

    return value


def validate_log_level(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str | None,
) -> str | None:
    """Validate and normalize log level.

    Raises:
        click.BadParameter: If the level is not recognised
    """
    if value is None:
        return value

    normalized_value = value.upper().strip()

    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if normalized_value not in valid_levels:
        raise click.BadParameter(f'Invalid log level "{value}". Valid options: {", ".join(sorted(valid_levels))}')

    return normalized_value


def format_entry(entry: DirectoryEntry, long: bool) -> str:
    """Render one entry as a listing line.

    Args:
        entry: Entry to render
        long: Include kind and size columns

    Returns:
        The entry name, or "<kind> <size> <name>" in long form
    """
    if not long:
        return entry.name
    kind = "d" if entry.is_directory else "-"
    return f"{kind} {entry.size:>12} {entry.name}"


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(path_type=Path),
    default=None,
    callback=validate_config_path,
    help="Configuration file path (.yaml or .yml). Defaults apply when omitted.",
)
@click.option(
    "--log-level",
    "-l",
    type=str,
    default=None,
    callback=validate_log_level,
    help="Logging verbosity level, overrides the configuration file",
)
@click.version_option(version=__version__, prog_name="direnum")
@click.pass_context
def cli(ctx: click.Context, config: Path | None, log_level: str | None) -> None:
    """direnum - enumerate directory entries.

    Examples:

        # List the current directory
        direnum ls

        # List with kind and size columns
        direnum ls --long /var/log

        # Show attributes of one path
        direnum stat setup.cfg
    """
    try:
        main_config = load_main_config(config) if config is not None else MainConfig()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(
        log_level=log_level or main_config.application.log_level,
        enable_syslog=main_config.application.syslog_enabled,
    )
    ctx.obj = main_config


@cli.command("ls")
@click.argument("path", type=click.Path(path_type=Path), default=Path("."))
@click.option("--long", "-L", "long_format", is_flag=True, help="Show entry kind and size")
@click.pass_obj
def ls_command(config: MainConfig, path: Path, long_format: bool) -> None:
    """List the members of one directory.

    The listing is not recursive and not sorted. A path that cannot be
    listed prints nothing.
    """
    backend = get_backend(config.listing.backend)
    with DirectoryIterator(path, backend) as iterator:
        for entry in iterator:
            if not config.listing.show_hidden and entry.name.startswith("."):
                continue
            click.echo(format_entry(entry, long_format))


@cli.command("stat")
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_context
def stat_command(ctx: click.Context, path: Path) -> None:
    """Show type, size and modification time of a path."""
    attribute = file_attrib(path)
    if attribute is None:
        click.echo(f"Cannot access {path}", err=True)
        ctx.exit(1)

    click.echo(f"type: {FsPath(str(path)).what().name.lower()}")
    click.echo(f"directory: {'yes' if attribute.is_directory else 'no'}")
    click.echo(f"size: {attribute.bytes}")
    click.echo(f"modified: {attribute.modified.isoformat(sep=' ', timespec='seconds')}")
