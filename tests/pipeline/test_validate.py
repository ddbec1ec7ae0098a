# tests/pipeline/test_validate.py
#
# Tests for the alunos/fatos input validators.
from __future__ import annotations

from datetime import date, datetime

import polars as pl
import pytest

from pipeline.sources._colunas import EntradaInvalidaError
from pipeline.sources.alunos.validate import validate_alunos
from pipeline.sources.fatos.validate import validate_fatos


# ---------------------------------------------------------------------------
# validate_alunos
# ---------------------------------------------------------------------------


def test_alunos_sem_coluna_obrigatoria() -> None:
    df = pl.DataFrame({"rm": ["1"]})
    with pytest.raises(EntradaInvalidaError, match="data_matricula"):
        validate_alunos(df)


def test_alunos_cria_colunas_opcionais() -> None:
    df = pl.DataFrame({"rm": ["1"], "data_matricula": [datetime(2025, 2, 3)]})
    result = validate_alunos(df)

    for coluna in ("nota_1", "nota_2", "nota_3", "nota_4"):
        assert result.schema[coluna] == pl.Float64
        assert result[coluna].to_list() == [None]
    assert result["nome"].to_list() == [""]


def test_alunos_descarta_sem_rm_e_deduplica() -> None:
    df = pl.DataFrame({
        "rm": [" 1 ", "1", "", None, "2"],
        "data_matricula": [datetime(2025, 2, 3)] * 4 + [None],
        "nome": ["Ana", "Ana (dup)", "Sem RM", "Nulo", "Sem data"],
    })
    result = validate_alunos(df)

    assert result["rm"].to_list() == ["1"]
    assert result["nome"].to_list() == ["Ana"]


def test_alunos_normaliza_datas() -> None:
    df = pl.DataFrame({
        "rm": ["1", "2"],
        "data_matricula": ["2025-02-03 10:00:00", "2025-02-04 00:00:00"],
    })
    result = validate_alunos(df)

    assert result.schema["data_matricula"] == pl.Datetime("us")
    assert result["data_matricula"].to_list() == [
        datetime(2025, 2, 3, 10, 0),
        datetime(2025, 2, 4, 0, 0),
    ]


def test_alunos_data_sem_hora_vira_meia_noite() -> None:
    df = pl.DataFrame({"rm": ["1"], "data_matricula": [date(2025, 2, 3)]})
    result = validate_alunos(df)
    assert result["data_matricula"].to_list() == [datetime(2025, 2, 3)]


def test_alunos_datetime_com_fuso_vira_utc() -> None:
    df = pl.DataFrame({"rm": ["1"], "data_matricula": [datetime(2025, 2, 3, 9, 0)]}).with_columns(
        pl.col("data_matricula").dt.replace_time_zone("America/Sao_Paulo")
    )
    result = validate_alunos(df)
    assert result["data_matricula"].to_list() == [datetime(2025, 2, 3, 12, 0)]


# ---------------------------------------------------------------------------
# validate_fatos
# ---------------------------------------------------------------------------


def test_fatos_sem_colunas_obrigatorias_nomeia_todas() -> None:
    df = pl.DataFrame({"rm": ["1"]})
    with pytest.raises(EntradaInvalidaError, match="tipo, data_fato"):
        validate_fatos(df)


def test_fatos_cria_colunas_opcionais() -> None:
    df = pl.DataFrame({"rm": ["1"], "tipo": ["FO-"], "data_fato": [datetime(2026, 3, 2)]})
    result = validate_fatos(df).row(0, named=True)

    assert result["natureza"] == "Pendente"
    assert result["categoria"] == ""
    assert result["tratativa"] == ""
    assert result["dias_suspensao"] is None


def test_fatos_descarta_tipo_desconhecido_e_sem_data() -> None:
    df = pl.DataFrame({
        "rm": ["1", "2", "3", "4"],
        "tipo": ["FO-", "FO?", "FO+", "FO-"],
        "natureza": ["Advertência Oral", None, "Elogio Individual", "Suspensão"],
        "data_fato": [datetime(2026, 3, 2), datetime(2026, 3, 2), datetime(2026, 3, 2), None],
    })
    result = validate_fatos(df)

    assert result["rm"].to_list() == ["1", "3"]


def test_fatos_natureza_nula_vira_pendente() -> None:
    df = pl.DataFrame({
        "rm": ["1"],
        "tipo": ["FO-"],
        "natureza": pl.Series([None], dtype=pl.String),
        "data_fato": [datetime(2026, 3, 2)],
    })
    assert validate_fatos(df)["natureza"].to_list() == ["Pendente"]


def test_fatos_natureza_desconhecida_e_mantida() -> None:
    df = pl.DataFrame({
        "rm": ["1"],
        "tipo": ["FO-"],
        "natureza": ["Algo Novo"],
        "data_fato": [datetime(2026, 3, 2)],
    })
    assert validate_fatos(df)["natureza"].to_list() == ["Algo Novo"]
