"""Tabular data loading and column-to-series conversion using Polars."""

from io import BytesIO
from typing import BinaryIO

import polars as pl

from .charts.data import Series, to_series
from .charts.registry import ValueTypeRegistry


def load_data(source: str | BinaryIO) -> pl.DataFrame:
    """
    Read CSV, JSON, or Parquet based on the file extension.

    CSV date and datetime columns are parsed into temporal dtypes so that
    they plot on a time axis.

    Args:
        source: Path to the data file or a file-like object with a .name attribute.

    Returns:
        A Polars DataFrame containing the loaded data.

    Raises:
        ValueError: If the file format is unsupported.
    """
    if isinstance(source, str):
        filename = source
        file_source = source
    else:
        filename = getattr(source, "name", "")
        file_source = BytesIO(source.read())
    filename_lower = filename.lower()
    if filename_lower.endswith(".csv"):
        return pl.read_csv(file_source, try_parse_dates=True)
    elif filename_lower.endswith(".json"):
        return pl.read_json(file_source)
    elif filename_lower.endswith(".parquet"):
        return pl.read_parquet(file_source)
    else:
        raise ValueError(f"Unsupported format: {filename}")


def filter_data(df: pl.DataFrame, column: str, values: list[str]) -> pl.DataFrame:
    """
    Keep rows whose column value, compared as text, is one of `values`.

    Raises:
        ValueError: If the column does not exist in the DataFrame.
    """
    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found in data")
    return df.filter(pl.col(column).cast(pl.Utf8).is_in(values))


def series_from_frame(
    df: pl.DataFrame,
    x: str,
    y: str,
    *,
    radius: str | None = None,
    tooltip: str | None = None,
    registry: ValueTypeRegistry | None = None,
) -> Series:
    """
    Build a series from DataFrame columns, in row order.

    Rows with a null in any selected column are dropped.

    Args:
        df: Source DataFrame.
        x: Column for x values.
        y: Column for y values.
        radius: Optional integer column producing a bubble series.
        tooltip: Optional column cast to text producing a tooltip series.
        registry: Registry used to wrap values.

    Returns:
        A PairSeries, RadiusSeries or TooltipSeries.

    Raises:
        ValueError: If a column is missing or both radius and tooltip are given.
    """
    if radius is not None and tooltip is not None:
        raise ValueError("Use either radius or tooltip, not both")
    columns = [x, y] + [c for c in (radius, tooltip) if c is not None]
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ValueError(f"Columns not found: {', '.join(missing)}")
    selected = df.select(columns).drop_nulls()
    if tooltip is not None:
        selected = selected.with_columns(pl.col(tooltip).cast(pl.Utf8))
    if radius is not None:
        selected = selected.with_columns(pl.col(radius).cast(pl.Int64))
    return to_series(selected.iter_rows(), registry)
