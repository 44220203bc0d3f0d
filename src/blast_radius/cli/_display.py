"""Rich rendering of analysis results."""

from rich.table import Table

from ..models import BlastRadiusResult, DependencyReport, MatchType, ResolvedFile
from ._common import LEVEL_COLORS, console


def _level(value: str) -> str:
    color = LEVEL_COLORS.get(value, "white")
    return f"[{color}]{value.upper()}[/{color}]"


def render_resolved(files: list[ResolvedFile]) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("Requested")
    table.add_column("Match")
    table.add_column("Resolved to")

    for f in files:
        if f.match_type is MatchType.UNRESOLVED:
            hint = ", ".join(f.suggestions) if f.suggestions else "no suggestions"
            table.add_row(f.requested_path, "[red]unresolved[/red]", f"[dim]{hint}[/dim]")
            continue
        match = f.match_type.value
        if f.distance is not None:
            match = f"{match} ({f.distance})"
        style = "green" if f.match_type is MatchType.EXACT else "yellow"
        table.add_row(f.requested_path, f"[{style}]{match}[/{style}]", f.resolved_path or "")

    console.print(table)


def render_result(result: BlastRadiusResult) -> None:
    risk = result.risk
    console.print()
    console.print(f"[bold cyan]BLAST RADIUS[/bold cyan] -- {result.metadata.get('app', '')}")
    console.print(f"Risk {_level(risk.level.value)}  score [bold]{risk.score}[/bold]/100")
    console.print(f"[dim]{risk.description}[/dim]")
    console.print()

    render_resolved(result.changed_files)

    if result.components:
        table = Table(title="Affected components", show_header=True)
        table.add_column("Component")
        table.add_column("Type")
        table.add_column("Depth", justify="right")
        table.add_column("File", style="dim")
        for c in result.components:
            table.add_row(c.label, c.type.value, str(c.depth), c.file)
        console.print(table)

    if result.integrations:
        console.print(
            "Integrations: "
            + ", ".join(f"{p.type.value} ({_level(p.level.value)})" for p in result.integrations)
        )

    if result.recommendations:
        console.print()
        console.print("[bold]Recommendations[/bold]")
        for rec in result.recommendations:
            console.print(
                f"  {_level(rec.priority.value)} [bold]{rec.category}[/bold]: "
                f"{rec.recommendation} [dim]({', '.join(rec.test_types)})[/dim]"
            )
    console.print()


def render_dependencies(report: DependencyReport) -> None:
    console.print(f"[bold cyan]{report.file}[/bold cyan] (depth {report.depth})")

    table = Table(show_header=True)
    table.add_column("Direction")
    table.add_column("File")
    table.add_column("Depth", justify="right")
    for node in report.transitive_dependencies:
        table.add_row("depends on", node.file, str(node.depth))
    for node in report.transitive_dependents:
        table.add_row("used by", node.file, str(node.depth))

    if table.row_count:
        console.print(table)
    else:
        console.print("[dim]No inferred neighbours.[/dim]")
