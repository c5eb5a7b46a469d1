"""
tsformats CLI entry point.

Usage:
    tsformats classify VALUE... [--stdin] [--format table|json|csv]
    tsformats formats [--category CATEGORY]
    tsformats overlaps [--probe P]... [--unexpected-only]
    tsformats check
    tsformats config show
"""

import click

from tsformats.cli.commands import check, classify, config, formats, overlaps


@click.group()
@click.version_option(package_name="tsformats")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: from configuration)",
)
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON")
def cli(log_level: str | None, json_logs: bool):
    """tsformats - Timestamp format classification"""
    from pydantic import ValidationError

    from tsformats.config import get_settings
    from tsformats.core.exceptions import ConfigurationError
    from tsformats.logging import setup_logging

    try:
        settings = get_settings().logging
    except (ConfigurationError, ValidationError) as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    setup_logging(
        level=log_level or settings.level,
        json_format=json_logs or settings.json_format,
        log_file=settings.file,
    )


cli.add_command(classify)
cli.add_command(formats)
cli.add_command(overlaps)
cli.add_command(check)
cli.add_command(config)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
