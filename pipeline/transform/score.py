# pipeline/transform/score.py
#
# Batch behaviour score for a whole roster.
#
# Design decisions:
#   - This module duplicates the weight constants from
#     api/domain/comportamento/score.py. ADR (below) explains why we do not
#     import from the api package.
#   - One output row per student, with the same breakdown columns the API
#     engine reports (base, bonus_merito, bonus_tempo, ajustes, total,
#     dias_sem_faltas, qtd_notas_merito) plus classificacao.
#   - Arithmetic is Float64 with a final round to 2 decimals. The API engine
#     uses Decimal; both agree to the cent for every weight in the table.
#   - "agora" is a parameter, never read from the clock here. Scores for the
#     same data differ from one day to the next by design.
#
# ADR: Why not import from api/domain?
#   The pipeline is an offline standalone artefact. Importing from the API
#   package would couple the batch runtime to the web stack (FastAPI,
#   Pydantic). Constants copied here are annotated with their source so
#   divergence is caught in code review.
#   Source of truth: api/domain/comportamento/score.py
#
# Invariants:
#   - calcular_scores_batch is a pure function over DataFrames. No IO.
#   - total is always within [0, 10]; the other terms are never clamped.
#   - Students without fatos get ajustes = 0 and use data_matricula as the
#     reference instant.
from __future__ import annotations

from datetime import UTC, datetime

import polars as pl

# ---------------------------------------------------------------------------
# Constants — source of truth: api/domain/comportamento/score.py
# ---------------------------------------------------------------------------
_BASE = 8.00
_NOTA_MINIMA_MERITO = 8.0
_BONUS_POR_NOTA_MERITO = 0.50
_CARENCIA_DIAS = 60
_BONUS_POR_DIA = 0.20
_SCORE_MINIMO = 0.0
_SCORE_MAXIMO = 10.0

_PESOS_ENQUADRAMENTO: dict[str, float] = {
    "Advertência Oral": -0.10,
    "Advertência Escrita": -0.30,
    "Suspensão": -0.50,  # multiplicado por dias_suspensao (null -> 1)
    "Elogio Individual": 0.50,
    "Elogio Coletivo": 0.30,
}

_FAIXAS_CLASSIFICACAO: tuple[tuple[float, str], ...] = (
    (10.0, "Excepcional"),
    (9.0, "Ótimo"),
    (7.0, "Bom"),
    (5.0, "Regular"),
    (2.0, "Insuficiente"),
)
_CLASSIFICACAO_PISO = "Incompatível"

_COLUNAS_NOTAS: tuple[str, ...] = ("nota_1", "nota_2", "nota_3", "nota_4")
_MICROS_POR_DIA = 86_400 * 1_000_000


def calcular_scores_batch(
    alunos_df: pl.DataFrame,
    fatos_df: pl.DataFrame,
    agora: datetime,
) -> pl.DataFrame:
    """Compute the behaviour score breakdown for every student.

    Args:
        alunos_df: Output of validate_alunos: rm (str), data_matricula
                   (naive UTC datetime), nota_1..nota_4 (float|null), plus
                   optional nome/serie/turma.
        fatos_df:  Output of validate_fatos: rm (str), tipo (str), natureza
                   (str), dias_suspensao (int|null), data_fato (naive UTC).
        agora:     Reference instant. Aware datetimes are converted to UTC.

    Returns:
        DataFrame with rm, nome, serie, turma, base, bonus_merito, bonus_tempo,
        ajustes, total, dias_sem_faltas, qtd_notas_merito, classificacao.
    """
    agora_utc = _naive_utc(agora)

    ultimo_negativo = (
        fatos_df.filter(pl.col("tipo") == "FO-")
        .group_by("rm")
        .agg(pl.col("data_fato").max().alias("ultimo_fo_negativo"))
    )
    ajustes = (
        fatos_df.with_columns(_delta_expr().alias("delta"))
        .group_by("rm")
        .agg(pl.col("delta").sum().alias("ajustes"))
    )

    qtd_merito = pl.sum_horizontal(
        [(pl.col(c) >= _NOTA_MINIMA_MERITO).fill_null(False).cast(pl.Int64) for c in _COLUNAS_NOTAS]
    )
    referencia = pl.coalesce(pl.col("ultimo_fo_negativo"), pl.col("data_matricula"))
    diff_micros = (pl.lit(agora_utc, dtype=pl.Datetime("us")) - referencia).dt.total_microseconds()
    dias = (diff_micros.abs() / _MICROS_POR_DIA).ceil().cast(pl.Int64)

    result = (
        alunos_df.join(ultimo_negativo, on="rm", how="left")
        .join(ajustes, on="rm", how="left")
        .with_columns(
            qtd_merito.alias("qtd_notas_merito"),
            dias.alias("dias_sem_faltas"),
            pl.col("ajustes").fill_null(0.0),
        )
        .with_columns(
            pl.lit(_BASE).alias("base"),
            (pl.col("qtd_notas_merito") * _BONUS_POR_NOTA_MERITO).alias("bonus_merito"),
            pl.when(pl.col("dias_sem_faltas") > _CARENCIA_DIAS)
            .then((pl.col("dias_sem_faltas") - _CARENCIA_DIAS) * _BONUS_POR_DIA)
            .otherwise(0.0)
            .alias("bonus_tempo"),
        )
        .with_columns(
            (pl.col("base") + pl.col("bonus_merito") + pl.col("bonus_tempo") + pl.col("ajustes"))
            .clip(_SCORE_MINIMO, _SCORE_MAXIMO)
            .alias("total"),
        )
        .with_columns(
            [pl.col(c).round(2) for c in ("base", "bonus_merito", "bonus_tempo", "ajustes", "total")]
        )
        .with_columns(_classificacao_expr().alias("classificacao"))
    )

    return result.select(
        "rm",
        *(c for c in ("nome", "serie", "turma") if c in result.columns),
        "base",
        "bonus_merito",
        "bonus_tempo",
        "ajustes",
        "total",
        "dias_sem_faltas",
        "qtd_notas_merito",
        "classificacao",
    )


def _delta_expr() -> pl.Expr:
    """Per-fato score delta keyed on natureza. Unknown values weigh 0."""
    natureza = pl.col("natureza")
    expr = pl.when(natureza == "Suspensão").then(
        _PESOS_ENQUADRAMENTO["Suspensão"] * pl.col("dias_suspensao").fill_null(1)
    )
    for nome, peso in _PESOS_ENQUADRAMENTO.items():
        if nome == "Suspensão":
            continue
        expr = expr.when(natureza == nome).then(peso)
    return expr.otherwise(0.0).cast(pl.Float64)


def _classificacao_expr() -> pl.Expr:
    total = pl.col("total")
    limite, rotulo = _FAIXAS_CLASSIFICACAO[0]
    expr = pl.when(total >= limite).then(pl.lit(rotulo))
    for limite, rotulo in _FAIXAS_CLASSIFICACAO[1:]:
        expr = expr.when(total >= limite).then(pl.lit(rotulo))
    return expr.otherwise(pl.lit(_CLASSIFICACAO_PISO))


def _naive_utc(instante: datetime) -> datetime:
    if instante.tzinfo is None:
        return instante
    return instante.astimezone(UTC).replace(tzinfo=None)
