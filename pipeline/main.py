# pipeline/main.py
#
# Batch report orchestrator: reads the roster tables, validates them, scores
# every student and builds the fatos reports.
#
# Design decisions:
#   - run_relatorio is the single entry point. It accepts a PipelineConfig and
#     the reference instant "agora"; the __main__ block is the only place that
#     reads the clock.
#   - Steps run in a fixed order: read -> validate -> score -> reports. Each
#     step logs progress to stdout through pipeline.log.
#   - Nothing is written to disk. The caller receives the DataFrames and
#     decides what to do with them (print, export, hand to a dashboard).
#   - Errors propagate: a missing table or column aborts the run with the
#     offending name in the message.
from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

import polars as pl

from pipeline.config import PipelineConfig, load_config
from pipeline.log import log
from pipeline.sources.alunos.validate import validate_alunos
from pipeline.sources.fatos.validate import validate_fatos
from pipeline.staging.reader import read_tabela
from pipeline.transform.relatorios import distribuicao_categorias, mapa_calor, resumo_fatos
from pipeline.transform.score import calcular_scores_batch


@dataclass(frozen=True)
class RelatorioBatch:
    """Everything the batch computed in one run."""

    scores: pl.DataFrame
    resumo: pl.DataFrame
    categorias: pl.DataFrame
    mapa_calor: pl.DataFrame


def run_relatorio(config: PipelineConfig, agora: datetime) -> RelatorioBatch:
    """Execute the batch and return the computed frames.

    Args:
        config: Input location and format.
        agora:  Reference instant for the time bonus.

    Raises:
        pipeline.staging.reader.EntradaAusenteError: if an input table is missing.
        pipeline.sources._colunas.EntradaInvalidaError: if a required column is missing.
    """
    log(f"Reading {config.formato} tables from {config.data_dir}...")
    alunos_raw = read_tabela(config.alunos_path, config.formato)
    fatos_raw = read_tabela(config.fatos_path, config.formato)

    log("Validating...")
    alunos_df = validate_alunos(alunos_raw)
    fatos_df = validate_fatos(fatos_raw)
    log(f"  alunos: {len(alunos_df):,} of {len(alunos_raw):,} rows kept")
    log(f"  fatos: {len(fatos_df):,} of {len(fatos_raw):,} rows kept")

    log(f"Scoring with agora={agora.isoformat()}...")
    scores_df = calcular_scores_batch(alunos_df, fatos_df, agora)
    log(f"  Scores: {len(scores_df):,} rows")

    log("Building reports...")
    relatorio = RelatorioBatch(
        scores=scores_df,
        resumo=resumo_fatos(fatos_df),
        categorias=distribuicao_categorias(fatos_df, config.top_categorias),
        mapa_calor=mapa_calor(fatos_df),
    )
    log("Done.")
    return relatorio


if __name__ == "__main__":
    cfg = load_config()
    resultado = run_relatorio(cfg, datetime.now(tz=UTC))
    print(resultado.resumo)
    print(resultado.categorias)
    print(resultado.mapa_calor)
    print(resultado.scores.sort("total"))
