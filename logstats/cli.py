import sys
from pathlib import Path

import click

from logstats.aggregator import process_file
from logstats.infra.config_loader import load_config
from logstats.infra.logging_config import setup_logging
from logstats.reporter import format_report


@click.command(context_settings={"max_content_width": 90})
@click.argument("file", type=click.Path(path_type=Path))
def main(file: Path) -> None:
    """Analyze the occurrences of entry types in a log file.

    Each line in FILE should contain a complete JSON object with a `type`
    field. The entries are grouped by this type and for each unique type
    the following statistics are printed:

    \b
    - the number of entries with this type
    - the space used (in bytes, excluding the line terminator) by all
      entries with this type
    """
    config = load_config()
    setup_logging(config.logging)

    result = process_file(file)
    if result.is_err():
        click.echo(result.error.describe(), err=True)  # type: ignore[union-attr]
        sys.exit(1)

    for line in format_report(result.unwrap()):
        click.echo(line)
