import sys

import click
import orjson

from .config import get_settings
from .logging import get_logger, setup_logging
from .pipeline import ProcessedBatch, coerce_articles, process_articles
from .ui import show_summary

logger = get_logger(__name__)


def load_articles(stream) -> list:
    """Read a JSON array of article records.

    Accepts either a bare array or an object with an "articles"/"items" key,
    the shapes aggregation endpoints usually return.
    """
    try:
        payload = orjson.loads(stream.read())
    except orjson.JSONDecodeError as e:
        raise click.ClickException(f"Input is not valid JSON: {e}") from e

    if isinstance(payload, dict):
        payload = payload.get('articles', payload.get('items'))

    if not isinstance(payload, list):
        raise click.ClickException("Input must be a JSON array of articles")

    if not all(isinstance(record, dict) for record in payload):
        raise click.ClickException("Every article must be a JSON object")

    try:
        return coerce_articles(payload)
    except (TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid article record: {e}") from e


def dump_batch(batch: ProcessedBatch, pretty: bool = False) -> bytes:
    option = orjson.OPT_INDENT_2 if pretty else 0
    return orjson.dumps(batch.to_dict(), option=option)


@click.command()
@click.argument("input_file", type=click.File("rb"), default="-")
@click.option(
    "--output",
    "-o",
    type=click.File("wb"),
    default="-",
    help="Output file (default: stdout)",
)
@click.option(
    "--threshold",
    type=click.FloatRange(0.0, 1.0),
    help="Minimum similarity to merge two articles",
)
@click.option(
    "--window-hours",
    type=click.FloatRange(min=0.0, min_open=True),
    help="Maximum publish-time gap inside a story",
)
@click.option("--no-dedupe", is_flag=True, help="Skip title deduplication")
@click.option(
    "--since",
    type=click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"]),
    help="Only keep articles published after this time (UTC)",
)
@click.option("--log-level", default=None, help="Log level")
@click.option("--pretty", is_flag=True, help="Indent the JSON output")
@click.option("--summary", is_flag=True, help="Print a cluster table instead of JSON")
def cli(
    input_file,
    output,
    threshold,
    window_hours,
    no_dedupe,
    since,
    log_level,
    pretty,
    summary,
):
    """Deduplicate, enrich and cluster a JSON batch of news articles."""
    settings = get_settings()
    setup_logging(log_level=log_level or settings.log_level)

    articles = load_articles(input_file)

    try:
        batch = process_articles(
            articles,
            deduplicate=False if no_dedupe else None,
            since=since,
            similarity_threshold=threshold,
            time_window_hours=window_hours,
            settings=settings,
        )
    except Exception as e:
        logger.error("CLI execution failed", error=str(e))
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    if summary:
        show_summary(batch)
        return

    output.write(dump_batch(batch, pretty=pretty))
    output.write(b"\n")


if __name__ == "__main__":
    cli()
