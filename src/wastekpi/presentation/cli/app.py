"""Waste KPI CLI application using Typer.

Renders KPIs, trends and waste flows from the CSV record source as Rich
tables. Every command re-reads the data directory.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from wastekpi.application.dtos import KPIFigures, SankeyData
from wastekpi.application.queries import (
    AvailablePeriodsQuery,
    BranchComparisonQuery,
    BranchKPIQuery,
    CompanyKPIQuery,
    KPITrendQuery,
    SiteKPIQuery,
    WasteFlowQuery,
)
from wastekpi.domain.kpi import KPIKind, rate_kpi
from wastekpi.domain.organization import HierarchyLevel
from wastekpi.domain.shared import (
    DomainException,
    format_percentage,
    format_weight,
    period_label,
)
from wastekpi.infrastructure.persistence import CsvSourceFactory
from wastekpi_config import Settings, get_settings

app = typer.Typer(
    name="wastekpi",
    help="Waste KPI - construction waste indicators from CSV records",
    no_args_is_help=True,
)
console = Console()

kpi_app = typer.Typer(
    name="kpi",
    help="KPIs of the company, a branch or a site",
    no_args_is_help=True,
)
app.add_typer(kpi_app)

logger = logging.getLogger(__name__)

KPI_LABELS = {
    KPIKind.SORTING_RATE: "Sorting rate",
    KPIKind.REAL_RECYCLING_RATE: "Real recycling rate",
    KPIKind.FINAL_DISPOSAL_RATE: "Final disposal rate",
    KPIKind.WASTE_INTENSITY: "Waste intensity",
}

PeriodOption = typer.Option(
    None,
    "--period",
    "-p",
    help="Period in YYYY-MM format (defaults to the configured period)",
)


def _configure_logging(verbose: bool, settings: Settings) -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if verbose:
        level = logging.DEBUG

    # Tables go to stdout, logs to stderr
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj["settings"]


def _factory(ctx: typer.Context) -> CsvSourceFactory:
    return CsvSourceFactory(_settings(ctx))


def _period(ctx: typer.Context, period: Optional[str]) -> str:
    return period or _settings(ctx).default_year_month


def _fail(exc: DomainException) -> typer.Exit:
    console.print(f"[red]Error:[/red] {exc.message} [dim]({exc.code.value})[/dim]")
    return typer.Exit(code=1)


def _format_kpi(kind: KPIKind, value: float) -> str:
    rating = rate_kpi(kind, value)
    text = (
        f"{value:.2f} t/100M JPY"
        if kind is KPIKind.WASTE_INTENSITY
        else format_percentage(value)
    )
    return f"[{rating.color}]{text}[/] [dim]{rating.value}[/dim]"


def _render_figures(title: str, figures: KPIFigures) -> None:
    table = Table(title=f"{title} - {period_label(figures.year_month)}")
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    table.add_row("Total waste", format_weight(figures.total_waste))
    table.add_row("Sorted", format_weight(figures.sorted_waste))
    table.add_row("Mixed", format_weight(figures.mixed_waste))
    table.add_row("Recycled", format_weight(figures.recycled_waste))
    table.add_row("Thermal recycled", format_weight(figures.thermal_recycled_waste))
    table.add_row("Final disposal", format_weight(figures.final_disposal_waste))
    table.add_section()
    for kind in KPIKind:
        value = figures.kpi_value(kind)
        if value is not None:
            table.add_row(KPI_LABELS[kind], _format_kpi(kind, value))

    console.print(table)


def _render_flow(flow: SankeyData) -> None:
    if flow.message:
        console.print(f"[yellow]{flow.message}[/yellow]")
        return

    table = Table(
        title=(
            f"Waste flow {flow.scope} - {period_label(flow.year_month)} "
            f"({format_weight(flow.total_weight)})"
        ),
    )
    table.add_column("From")
    table.add_column("To")
    table.add_column("Weight", justify="right")
    for link in flow.links:
        source = flow.nodes[link.source]
        target = flow.nodes[link.target]
        table.add_row(
            f"[{source.color}]{source.name}[/]",
            f"[{target.color}]{target.name}[/]",
            format_weight(link.value),
        )
    console.print(table)


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Directory with branches.csv, sites.csv and waste-records.csv",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Load settings and configure logging for all commands."""
    settings = get_settings()
    if data_dir is not None:
        settings = settings.model_copy(update={"data_dir": str(data_dir)})
    _configure_logging(verbose, settings)
    ctx.obj = {"settings": settings}


@kpi_app.command("company")
def company_kpi(
    ctx: typer.Context,
    period: Optional[str] = PeriodOption,
) -> None:
    """Show company-wide KPIs."""
    try:
        result = CompanyKPIQuery.from_factory(_factory(ctx)).execute(
            _period(ctx, period),
        )
    except DomainException as e:
        raise _fail(e) from e

    _render_figures(
        f"Company ({result.branch_count} branches, {result.site_count} sites)",
        result,
    )


@kpi_app.command("branch")
def branch_kpi(
    ctx: typer.Context,
    branch_id: str = typer.Argument(..., help="Branch id"),
    period: Optional[str] = PeriodOption,
) -> None:
    """Show KPIs of one branch."""
    try:
        result = BranchKPIQuery.from_factory(_factory(ctx)).execute(
            branch_id,
            _period(ctx, period),
        )
    except DomainException as e:
        raise _fail(e) from e

    if result is None:
        console.print(f"[red]Branch '{branch_id}' not found[/red]")
        raise typer.Exit(code=1)

    _render_figures(
        f"{result.branch_name} ({result.site_count} active sites)",
        result,
    )


@kpi_app.command("site")
def site_kpi(
    ctx: typer.Context,
    site: str = typer.Argument(..., help="Site id (or code with --by-code)"),
    period: Optional[str] = PeriodOption,
    by_code: bool = typer.Option(False, "--by-code", help="Look up by site code"),
) -> None:
    """Show KPIs of one site."""
    query = SiteKPIQuery.from_factory(_factory(ctx))
    try:
        if by_code:
            result = query.execute_by_code(site, _period(ctx, period))
        else:
            result = query.execute(site, _period(ctx, period))
    except DomainException as e:
        raise _fail(e) from e

    if result is None:
        console.print(f"[red]Site '{site}' not found[/red]")
        raise typer.Exit(code=1)

    _render_figures(f"{result.site_name} ({result.branch_name})", result)


@kpi_app.command("branches")
def branch_comparison(
    ctx: typer.Context,
    period: Optional[str] = PeriodOption,
) -> None:
    """Compare all branches that produced waste."""
    year_month = _period(ctx, period)
    try:
        results = BranchComparisonQuery.from_factory(_factory(ctx)).execute(
            year_month,
        )
    except DomainException as e:
        raise _fail(e) from e

    table = Table(title=f"Branch comparison - {period_label(year_month)}")
    table.add_column("Branch")
    table.add_column("Sites", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Sorting", justify="right")
    table.add_column("Recycling", justify="right")
    table.add_column("Disposal", justify="right")
    for result in results:
        table.add_row(
            result.branch_name,
            str(result.site_count),
            format_weight(result.total_waste),
            _format_kpi(KPIKind.SORTING_RATE, result.sorting_rate),
            _format_kpi(KPIKind.REAL_RECYCLING_RATE, result.real_recycling_rate),
            _format_kpi(KPIKind.FINAL_DISPOSAL_RATE, result.final_disposal_rate),
        )
    console.print(table)


@app.command("trend")
def kpi_trend(
    ctx: typer.Context,
    level: HierarchyLevel = typer.Argument(..., help="site, branch or company"),
    target_id: Optional[str] = typer.Option(
        None,
        "--target",
        "-t",
        help="Site or branch id",
    ),
    months: Optional[int] = typer.Option(
        None,
        "--months",
        "-m",
        min=1,
        help="Number of most recent periods",
    ),
) -> None:
    """Show KPIs over the most recent periods."""
    if level.requires_target_id() and not target_id:
        console.print(f"[red]--target is required for level '{level.value}'[/red]")
        raise typer.Exit(code=1)

    months = months or _settings(ctx).default_trend_months
    try:
        series = KPITrendQuery.from_factory(_factory(ctx)).execute(
            level,
            target_id=target_id,
            months=months,
        )
    except DomainException as e:
        raise _fail(e) from e

    if not series:
        console.print("[yellow]No data[/yellow]")
        return

    table = Table(title=f"KPI trend ({level.value}, last {months} periods)")
    table.add_column("Period")
    table.add_column("Total", justify="right")
    table.add_column("Sorting", justify="right")
    table.add_column("Recycling", justify="right")
    table.add_column("Disposal", justify="right")
    for point in series:
        table.add_row(
            period_label(point.year_month),
            format_weight(point.total_waste),
            format_percentage(point.sorting_rate),
            format_percentage(point.real_recycling_rate),
            format_percentage(point.final_disposal_rate),
        )
    console.print(table)


@app.command("flow")
def waste_flow(
    ctx: typer.Context,
    period: Optional[str] = PeriodOption,
    site_id: Optional[str] = typer.Option(None, "--site-id"),
    site_code: Optional[str] = typer.Option(None, "--site-code"),
    branch_id: Optional[str] = typer.Option(None, "--branch-id"),
) -> None:
    """Show waste flows from waste types to treatment."""
    try:
        flow = WasteFlowQuery.from_factory(_factory(ctx)).execute(
            _period(ctx, period),
            site_id=site_id,
            site_code=site_code,
            branch_id=branch_id,
        )
    except DomainException as e:
        raise _fail(e) from e

    _render_flow(flow)


@app.command("periods")
def list_periods(ctx: typer.Context) -> None:
    """List periods that have waste records."""
    try:
        periods = AvailablePeriodsQuery.from_factory(_factory(ctx)).execute()
    except DomainException as e:
        raise _fail(e) from e

    if not periods:
        console.print("[yellow]No waste records found[/yellow]")
        return
    for period in periods:
        console.print(f"{period}  [dim]{period_label(period)}[/dim]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
