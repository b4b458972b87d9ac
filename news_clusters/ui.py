"""Terminal summary of a processed batch."""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .pipeline import ProcessedBatch

ASSESSMENT_STYLES = {
    'positive': 'green',
    'neutral': 'dim',
    'negative': 'red',
}


def _truncate(text: str, max_chars: int = 70) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars - 3] + "..."


def build_cluster_table(batch: ProcessedBatch) -> Table:
    """One row per cluster: lead headline, size, sources and lead sentiment."""
    table = Table(show_header=True, header_style="bold cyan", box=box.SIMPLE)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Lead story")
    table.add_column("Articles", justify="right")
    table.add_column("Sources", style="dim")
    table.add_column("Sentiment", justify="center")
    table.add_column("Lang", justify="center", style="dim")

    for index, cluster in enumerate(batch.clusters, start=1):
        lead = cluster.lead.to_dict()
        sentiment = lead.get('sentiment') or {}
        assessment = sentiment.get('assessment', 'neutral')
        style = ASSESSMENT_STYLES.get(assessment, 'dim')
        table.add_row(
            str(index),
            escape(_truncate(lead["title"])),
            str(len(cluster)),
            ", ".join(sorted(cluster.source_ids)) or "-",
            f"[{style}]{assessment}[/{style}]",
            lead.get('detectedLanguage') or "-",
        )

    return table


def show_summary(batch: ProcessedBatch, console: Console | None = None) -> None:
    """Print the cluster table and batch totals."""
    console = console or Console()
    console.print(build_cluster_table(batch))
    console.print(
        f"[bold]{len(batch.items)}[/bold] articles in "
        f"[bold]{len(batch.clusters)}[/bold] stories "
        f"([dim]{batch.duplicates_removed} duplicates removed[/dim])"
    )
