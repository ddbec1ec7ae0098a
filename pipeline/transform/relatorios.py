# pipeline/transform/relatorios.py
#
# Aggregate reports over the fatos observados table.
#
# Design decisions:
#   - Three independent reports, each a pure function over the validated
#     fatos DataFrame: an overall summary, the category distribution and the
#     weekday x time-slot heatmap.
#   - A fato counts as "resolvido" when its tratativa text is non-blank, not
#     when natureza leaves Pendente. Coordinators sometimes record the
#     treatment before the formal enquadramento.
#   - Category percentages are rounded to whole numbers and computed over all
#     fatos, so the top-N slice does not need to sum to 100.
#   - The heatmap uses the UTC hour of data_fato and only school days
#     (Mon-Fri) and the five 2-hour slots between 08:00 and 18:00. Facts
#     outside that window are not counted.
#
# Invariants:
#   - No IO. Empty input yields zero counts, never an exception.
from __future__ import annotations

import polars as pl

DIAS_LETIVOS: tuple[str, ...] = ("SEG", "TER", "QUA", "QUI", "SEX")  # weekday() 1..5
FAIXAS_HORARIO: tuple[int, ...] = (8, 10, 12, 14, 16)


def resumo_fatos(fatos_df: pl.DataFrame) -> pl.DataFrame:
    """One-row summary: totals by tipo, resolved count and resolution rate.

    Returns:
        DataFrame with total_negativos, total_positivos, resolvidos (int) and
        taxa_resolucao (int, percent, 0 when there are no fatos).
    """
    total = len(fatos_df)
    resolvidos = fatos_df.filter(pl.col("tratativa").str.strip_chars() != "").height
    taxa = round(resolvidos / total * 100) if total else 0
    return pl.DataFrame(
        {
            "total_negativos": [fatos_df.filter(pl.col("tipo") == "FO-").height],
            "total_positivos": [fatos_df.filter(pl.col("tipo") == "FO+").height],
            "resolvidos": [resolvidos],
            "taxa_resolucao": [taxa],
        }
    )


def distribuicao_categorias(fatos_df: pl.DataFrame, top: int = 4) -> pl.DataFrame:
    """Top categories by share of all fatos.

    Returns:
        DataFrame with categoria (str), quantidade (int), percentual (int),
        sorted by percentual desc then categoria asc, at most ``top`` rows.
    """
    total = len(fatos_df)
    if total == 0:
        return pl.DataFrame(
            schema={"categoria": pl.String, "quantidade": pl.UInt32, "percentual": pl.Int64}
        )
    return (
        fatos_df.group_by("categoria")
        .agg(pl.len().alias("quantidade"))
        .with_columns(
            (pl.col("quantidade") / total * 100).round(0).cast(pl.Int64).alias("percentual")
        )
        .sort(["percentual", "categoria"], descending=[True, False])
        .head(top)
    )


def mapa_calor(fatos_df: pl.DataFrame) -> pl.DataFrame:
    """Counts per school day and 2-hour slot.

    Returns:
        DataFrame with one row per day in DIAS_LETIVOS order and columns
        dia, h08, h10, h12, h14, h16 (all zero-filled).
    """
    faixa = pl.col("data_fato").dt.hour() // 2 * 2
    contagens = (
        fatos_df.with_columns(
            pl.col("data_fato").dt.weekday().alias("dia_semana"),
            faixa.alias("faixa"),
        )
        .filter(pl.col("dia_semana").is_between(1, 5) & pl.col("faixa").is_in(list(FAIXAS_HORARIO)))
        .group_by(["dia_semana", "faixa"])
        .agg(pl.len().alias("quantidade"))
    )

    linhas: list[dict[str, object]] = []
    for numero, dia in enumerate(DIAS_LETIVOS, start=1):
        do_dia = contagens.filter(pl.col("dia_semana") == numero)
        por_faixa = dict(zip(do_dia["faixa"].to_list(), do_dia["quantidade"].to_list(), strict=True))
        linha: dict[str, object] = {"dia": dia}
        for hora in FAIXAS_HORARIO:
            linha[f"h{hora:02d}"] = int(por_faixa.get(hora, 0))
        linhas.append(linha)
    return pl.DataFrame(linhas)
