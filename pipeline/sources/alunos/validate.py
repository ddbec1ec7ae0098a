# pipeline/sources/alunos/validate.py
#
# Validate and clean the alunos (student roster) DataFrame.
#
# Design decisions:
#   - Rows without rm are dropped: without a registration number we cannot
#     join the student to their fatos.
#   - Rows without data_matricula are dropped: the time bonus needs a
#     reference instant when the student has no FO-.
#   - Grade columns nota_1..nota_4 are optional. A missing column is created
#     as all-null (no grade posted yet), never as zero.
#   - Grades are NOT clamped to [0, 10] here; out-of-range values are kept so
#     the report reflects the source data. Merit only counts grades >= 8.0.
#   - Deduplication key is rm, keeping the first occurrence.
#
# Invariants:
#   - rm and data_matricula are non-null in every surviving row.
#   - nota_1..nota_4 exist and are Float64.
from __future__ import annotations

import polars as pl

from pipeline.sources._colunas import exigir_colunas, instante_utc

COLUNAS_OBRIGATORIAS: tuple[str, ...] = ("rm", "data_matricula")
COLUNAS_NOTAS: tuple[str, ...] = ("nota_1", "nota_2", "nota_3", "nota_4")
COLUNAS_OPCIONAIS_TEXTO: tuple[str, ...] = ("nome", "serie", "turma")


def validate_alunos(df: pl.DataFrame) -> pl.DataFrame:
    """Validate and clean a student roster DataFrame.

    Steps applied:
        1. Require rm and data_matricula columns.
        2. Add missing optional columns (grades as null, text as "").
        3. Normalise rm to stripped string and data_matricula to naive UTC.
        4. Drop rows with empty rm or null data_matricula.
        5. Deduplicate by rm, keeping first.

    Raises:
        EntradaInvalidaError: if a required column is missing.
    """
    exigir_colunas(df, "alunos", COLUNAS_OBRIGATORIAS)

    # Step 2: optional columns.
    faltando = [
        *(pl.lit(None, dtype=pl.Float64).alias(c) for c in COLUNAS_NOTAS if c not in df.columns),
        *(pl.lit("").alias(c) for c in COLUNAS_OPCIONAIS_TEXTO if c not in df.columns),
    ]
    if faltando:
        df = df.with_columns(faltando)

    # Step 3: normalise types.
    df = df.with_columns(
        pl.col("rm").cast(pl.String).str.strip_chars(),
        instante_utc(df, "data_matricula").alias("data_matricula"),
        *(pl.col(c).cast(pl.Float64) for c in COLUNAS_NOTAS),
    )

    # Step 4: required values.
    df = df.filter(
        pl.col("rm").is_not_null()
        & (pl.col("rm") != "")
        & pl.col("data_matricula").is_not_null()
    )

    # Step 5: deduplicate.
    return df.unique(subset=["rm"], keep="first", maintain_order=True)
