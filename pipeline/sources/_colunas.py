# pipeline/sources/_colunas.py
#
# Shared helpers for the roster input validators.
#
# Design decisions:
#   - Timestamps are normalised to naive UTC (Datetime[us], no time zone), the
#     same convention the batch uses for "agora". Date columns become midnight
#     UTC, tz-aware columns are converted, naive columns are assumed UTC.
#   - Missing required columns are a hard failure (EntradaInvalidaError): a
#     score computed without, say, data_matricula would be silently wrong.
from __future__ import annotations

import polars as pl


class EntradaInvalidaError(Exception):
    """Raised when an input table lacks required columns.

    The message names the table and every missing column.
    """


def exigir_colunas(df: pl.DataFrame, tabela: str, obrigatorias: tuple[str, ...]) -> None:
    faltando = [c for c in obrigatorias if c not in df.columns]
    if faltando:
        raise EntradaInvalidaError(
            f"Table {tabela!r} is missing required column(s): {', '.join(faltando)}"
        )


def instante_utc(df: pl.DataFrame, coluna: str) -> pl.Expr:
    """Expression that normalises ``coluna`` to naive-UTC Datetime[us]."""
    dtype = df.schema[coluna]
    col = pl.col(coluna)
    if dtype == pl.String:
        return col.str.to_datetime(time_unit="us", time_zone="UTC").dt.replace_time_zone(None)
    if dtype == pl.Date:
        return col.cast(pl.Datetime("us"))
    if isinstance(dtype, pl.Datetime) and dtype.time_zone is not None:
        return col.dt.convert_time_zone("UTC").dt.replace_time_zone(None).cast(pl.Datetime("us"))
    return col.cast(pl.Datetime("us"))
