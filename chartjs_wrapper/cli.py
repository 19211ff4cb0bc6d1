"""Command Line Interface using Typer and Rich."""

from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .charts import ChartConfig, ChartRenderer, ChartType, ValueTypeRegistry, fit
from .config import time_policy_from_env
from .engine import filter_data, load_data, series_from_frame
from .errors import ChartError
from .logging_setup import setup_logging

app = typer.Typer(no_args_is_help=True)
console = Console()


class ChartTypeOption(str, Enum):
    """CLI enum for dataset type selection."""

    bar = "bar"
    line = "line"
    scatter = "scatter"
    bubble = "bubble"
    pie = "pie"
    doughnut = "doughnut"
    radar = "radar"
    polarArea = "polarArea"


class TimePolicyOption(str, Enum):
    """CLI enum for the date/time wire format."""

    rfc3339 = "rfc3339"
    epoch_millis = "epoch_millis"


@app.callback()
def callback(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"),
) -> None:
    """Chart.js configuration builder CLI."""
    setup_logging(log_level)


def _registry(time_policy: TimePolicyOption | None) -> ValueTypeRegistry:
    return ValueTypeRegistry(time_policy_from_env(time_policy.value if time_policy else None))


def _apply_filters(df, filter_expr: list[str] | None):
    for expr in filter_expr or []:
        if ":" not in expr:
            raise typer.BadParameter(f"Invalid filter format: '{expr}'. Use COL:VAL1,VAL2,...")
        col, values_str = expr.split(":", 1)
        values = [v.strip() for v in values_str.split(",")]
        df = filter_data(df=df, column=col, values=values)
    return df


@app.command()
def chart(
    file: str = typer.Argument(..., help="Path to data file (CSV, JSON, Parquet)"),
    x: str = typer.Option(..., "--x", "-x", help="Column name for x values"),
    y: str = typer.Option(..., "--y", "-y", help="Column name for y values"),
    chart_type: ChartTypeOption = typer.Option(ChartTypeOption.line, "--type", "-t", help="Dataset type"),
    output: str = typer.Option("chart.html", "--output", "-o", help="Output file path (.html or .json)"),
    title: str = typer.Option(None, "--title", help="Chart title"),
    label: str = typer.Option(None, "--label", "-l", help="Dataset label (defaults to the y column)"),
    tooltip: str = typer.Option(None, "--tooltip", help="Column with per-point tooltip text"),
    radius: str = typer.Option(None, "--radius", help="Integer column with bubble radii"),
    regression: bool = typer.Option(False, "--regression", help="Add a least-squares line over the points"),
    legend: bool = typer.Option(True, "--legend/--no-legend", help="Show the legend"),
    filter_expr: list[str] = typer.Option(
        None, "--filter", help="Filter expression as COL:VAL1,VAL2,... (repeatable)"
    ),
    time_policy: TimePolicyOption = typer.Option(
        None, "--time-policy", help="Date/time wire format (default from CHARTJS_WRAPPER_TIME_POLICY)"
    ),
) -> None:
    """
    Create a Chart.js configuration from a data file.

    Examples:
        chartjs-wrapper chart data.csv --x day --y sales --type bar -o chart.html
        chartjs-wrapper chart data.csv --x height --y weight --regression -o fit.json
        chartjs-wrapper chart data.csv --x a --y b --tooltip name --type scatter
    """
    output_path = Path(output)
    suffix = output_path.suffix.lower()
    if suffix not in (".html", ".json"):
        raise typer.BadParameter(f"Unsupported output format: {suffix}. Supported: .html, .json")
    registry = _registry(time_policy)
    with console.status("[bold green]Loading data..."):
        df = _apply_filters(load_data(file), filter_expr)
    try:
        with console.status("[bold blue]Building chart..."):
            series = series_from_frame(df, x, y, radius=radius, tooltip=tooltip, registry=registry)
            config = ChartConfig(registry=registry)
            if title:
                config.with_title(title)
            if legend:
                config.enable_legend()
            if regression:
                config.add_linear_regression_series(label or y, series)
            else:
                config.add_series(ChartType(chart_type.value), label or y, series)
            if suffix == ".json":
                output_path.write_text(config.to_json(indent=2), encoding="utf-8")
            else:
                ChartRenderer().export([config.build()], output_path, title=title or "Chart")
    except (ChartError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc
    if config.last_regression is not None:
        console.print(f"R² = {config.last_regression.r_squared:.4f}")
    console.print(f"[green]✓[/green] Chart saved to: [bold]{output_path}[/bold]")


@app.command(name="fit")
def fit_command(
    file: str = typer.Argument(..., help="Path to data file (CSV, JSON, Parquet)"),
    x: str = typer.Option(..., "--x", "-x", help="Column name for x values"),
    y: str = typer.Option(..., "--y", "-y", help="Column name for y values"),
    filter_expr: list[str] = typer.Option(
        None, "--filter", help="Filter expression as COL:VAL1,VAL2,... (repeatable)"
    ),
) -> None:
    """Print the least-squares line through two numeric columns."""
    with console.status("[bold green]Loading data..."):
        df = _apply_filters(load_data(file), filter_expr)
    try:
        result = fit(series_from_frame(df, x, y))
    except (ChartError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc
    table = Table(title=f"Linear fit: {y} ~ {x}")
    table.add_column("points", justify="right")
    table.add_column("slope", justify="right")
    table.add_column("intercept", justify="right")
    table.add_column("R²", justify="right", style="bold")
    slope = "-" if result.slope is None else f"{result.slope:.6g}"
    intercept = "-" if result.intercept is None else f"{result.intercept:.6g}"
    table.add_row(str(len(result.fitted)), slope, intercept, f"{result.r_squared:.4f}")
    console.print(table)


@app.command(name="value-types")
def value_types(
    time_policy: TimePolicyOption = typer.Option(None, "--time-policy", help="Date/time wire format"),
) -> None:
    """List plottable value types and their axis categories."""
    registry = _registry(time_policy)
    table = Table(title=f"Value types ({registry.time_policy.value})")
    table.add_column("type")
    table.add_column("axis", style="cyan")
    table.add_column("strategy", style="dim")
    for entry in registry.entries():
        table.add_row(entry.name, entry.category.value, getattr(entry.strategy, "__name__", repr(entry.strategy)))
    console.print(table)


if __name__ == "__main__":
    app()
