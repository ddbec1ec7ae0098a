# pipeline/sources/fatos/validate.py
#
# Validate and clean the fatos observados DataFrame.
#
# Design decisions:
#   - natureza (the enquadramento) is NOT validated against the known list:
#     unknown values flow through and simply weigh 0 in the score, matching
#     the API engine.
#   - Rows with tipo outside {FO+, FO-} are dropped; they cannot be routed or
#     counted in the report.
#   - Rows without data_fato are dropped: the FO- reference instant depends on
#     it and a fact without a date cannot be placed in the heatmap.
#   - Optional columns (categoria, tratativa, dias_suspensao) are created when
#     absent so downstream code can rely on the schema.
#
# Invariants:
#   - rm, tipo, natureza and data_fato are non-null in every surviving row.
#   - dias_suspensao is Int64 and may be null.
from __future__ import annotations

import polars as pl

from pipeline.sources._colunas import exigir_colunas, instante_utc

COLUNAS_OBRIGATORIAS: tuple[str, ...] = ("rm", "tipo", "data_fato")
TIPOS_VALIDOS: tuple[str, ...] = ("FO+", "FO-")  # source of truth: api/domain/fato_observado/enums.py :: TipoFO


def validate_fatos(df: pl.DataFrame) -> pl.DataFrame:
    """Validate and clean a fatos DataFrame.

    Steps applied:
        1. Require rm, tipo and data_fato columns.
        2. Add missing optional columns.
        3. Normalise types; null natureza becomes "Pendente".
        4. Drop rows with empty rm, unknown tipo or null data_fato.

    Raises:
        EntradaInvalidaError: if a required column is missing.
    """
    exigir_colunas(df, "fatos", COLUNAS_OBRIGATORIAS)

    # Step 2: optional columns.
    opcionais = {
        "natureza": pl.lit("Pendente"),
        "categoria": pl.lit(""),
        "tratativa": pl.lit(""),
        "dias_suspensao": pl.lit(None, dtype=pl.Int64),
    }
    faltando = [expr.alias(nome) for nome, expr in opcionais.items() if nome not in df.columns]
    if faltando:
        df = df.with_columns(faltando)

    # Step 3: normalise types.
    df = df.with_columns(
        pl.col("rm").cast(pl.String).str.strip_chars(),
        pl.col("tipo").cast(pl.String).str.strip_chars(),
        pl.col("natureza").cast(pl.String).fill_null("Pendente"),
        pl.col("categoria").cast(pl.String).fill_null(""),
        pl.col("tratativa").cast(pl.String).fill_null(""),
        pl.col("dias_suspensao").cast(pl.Int64),
        instante_utc(df, "data_fato").alias("data_fato"),
    )

    # Step 4: required values.
    return df.filter(
        pl.col("rm").is_not_null()
        & (pl.col("rm") != "")
        & pl.col("tipo").is_in(list(TIPOS_VALIDOS))
        & pl.col("data_fato").is_not_null()
    )
