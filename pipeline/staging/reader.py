# pipeline/staging/reader.py
#
# Standardised read of the roster input tables.
#
# Design decisions:
#   - Thin wrapper around Polars I/O so the rest of the pipeline never calls
#     polars readers directly, keeping the input format swappable.
#   - CSV is read with try_parse_dates so ISO timestamps arrive as temporal
#     columns; validate.py still normalises whatever dtype comes in.
#   - There is deliberately no writer: computed scores are not persisted.
from __future__ import annotations

from pathlib import Path

import polars as pl


class EntradaAusenteError(FileNotFoundError):
    """Raised when an input table is missing. The message names the file."""


def read_tabela(path: Path, formato: str) -> pl.DataFrame:
    """Read one input table.

    Args:
        path:    File to read.
        formato: "parquet" or "csv".

    Returns:
        DataFrame with the schema stored in the file.

    Raises:
        EntradaAusenteError: if ``path`` does not exist.
        ValueError: if ``formato`` is not supported.
    """
    if not path.exists():
        raise EntradaAusenteError(f"Input table not found: {path}")
    if formato == "parquet":
        return pl.read_parquet(path)
    if formato == "csv":
        return pl.read_csv(path, try_parse_dates=True)
    raise ValueError(f"Unsupported input format: {formato!r}")
