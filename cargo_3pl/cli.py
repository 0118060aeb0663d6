"""CLI entry point: cargo-3pl.

Usually run through cargo, which passes the subcommand name along:

    cargo 3pl                          # report for the current project
    cargo 3pl --features tls > THIRD-PARTY-LICENSES
    cargo 3pl --require-files          # fail when a dependency has no license file
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cargo_3pl import __version__
from cargo_3pl.color import COLOR_CHOICES, color_enabled, colorize
from cargo_3pl.config import ReportOptions, default_color
from cargo_3pl.core.logging import setup_logging
from cargo_3pl.exceptions import ThirdPartyError
from cargo_3pl.metadata import CargoMetadataSource, MetadataOptions, MetadataSource
from cargo_3pl.runner import generate_report


class _CargoCommand(click.Command):
    """Show usage the way cargo subcommands do."""

    def format_usage(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        formatter.write_usage("cargo 3pl", "[OPTIONS]")


def _metadata_source() -> MetadataSource:
    return CargoMetadataSource()


@click.command(cls=_CargoCommand)
@click.option(
    "--features",
    metavar="FEATURES",
    multiple=True,
    help="Space or comma separated list of features to activate",
)
@click.option("--all-features", is_flag=True, help="Activate all available features")
@click.option("--no-default-features", is_flag=True, help="Do not activate the `default` feature")
@click.option(
    "--target",
    "targets",
    metavar="TRIPLE",
    multiple=True,
    help="Filter dependencies matching the given target-triple",
)
@click.option("--require-files", is_flag=True, help="Require all dependencies to have license files")
@click.option(
    "--source",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Path for license files (experimental)",
)
@click.option("--show-url", is_flag=True, hidden=True, help="Show the package url (experimental)")
@click.option(
    "--color",
    type=click.Choice(COLOR_CHOICES),
    default=default_color,
    show_default=True,
    help="Coloring of warnings and errors",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.version_option(__version__, prog_name="cargo-3pl")
# cargo invokes external subcommands as `cargo-3pl 3pl [OPTIONS]`
@click.argument("subcommand", required=False, type=click.Choice(["3pl"]), metavar="")
def main(
    features: tuple[str, ...],
    all_features: bool,
    no_default_features: bool,
    targets: tuple[str, ...],
    require_files: bool,
    source: Path | None,
    show_url: bool,
    color: str,
    verbose: bool,
    subcommand: str | None,
) -> None:
    """Generate a report of the third-party licenses of a Cargo project."""
    setup_logging("DEBUG" if verbose else None)

    options = ReportOptions(
        metadata=MetadataOptions(
            features=features,
            all_features=all_features,
            no_default_features=no_default_features,
            targets=targets,
        ),
        require_files=require_files,
        source=source,
        show_url=show_url,
        color=color,
    )
    use_color = color_enabled(options.color, sys.stderr)

    def warn(message: str) -> None:
        click.echo(colorize(message, "warning", use_color), err=True, color=use_color)

    try:
        generate_report(
            _metadata_source(),
            options,
            click.get_binary_stream("stdout"),
            warn,
        )
    except (ThirdPartyError, OSError) as e:
        click.echo(colorize(str(e), "error", use_color), err=True, color=use_color)
        sys.exit(1)


if __name__ == "__main__":
    main()
