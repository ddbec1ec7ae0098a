# api/application/services/score_service.py
"""Calculo do grau de comportamento. Funcao pura — zero IO.

ADR: "agora" e parametro explicito. O motor nunca le o relogio; quem chama
(imperative shell) decide o instante. Duas chamadas em dias diferentes com o
mesmo historico dao resultados diferentes, e isso e intencional.

ADR: Score e roteamento sao dimensoes INDEPENDENTES.
Este modulo NUNCA deve importar o servico de roteamento.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta
from decimal import Decimal

from api.domain.aluno.entities import Aluno
from api.domain.comportamento.score import (
    BONUS_POR_DIA,
    BONUS_POR_NOTA_MERITO,
    CARENCIA_DIAS,
    NOTA_MINIMA_MERITO,
    ScoreComportamento,
    delta_enquadramento,
)
from api.domain.fato_observado.entities import FatoObservado

_UM_DIA = timedelta(days=1)


def calcular_score_comportamento(
    aluno: Aluno,
    fatos: Sequence[FatoObservado],
    agora: datetime,
) -> ScoreComportamento:
    """Funcao pura. Mesma entrada (incluindo agora) = mesma saida. Zero IO."""
    qtd_merito = contar_notas_merito(aluno.notas)
    referencia = instante_referencia(aluno, fatos)
    dias = dias_entre(agora, referencia)

    return ScoreComportamento(
        bonus_merito=qtd_merito * BONUS_POR_NOTA_MERITO,
        bonus_tempo=calcular_bonus_tempo(dias),
        ajustes=somar_ajustes(fatos),
        dias_sem_faltas=dias,
        qtd_notas_merito=qtd_merito,
    )


def contar_notas_merito(notas: Iterable[float | None]) -> int:
    """Slots None e notas abaixo de 8.0 nao contam."""
    return sum(1 for n in notas if n is not None and n >= NOTA_MINIMA_MERITO)


def instante_referencia(aluno: Aluno, fatos: Iterable[FatoObservado]) -> datetime:
    """Ultimo FO- por ocorrido_em; sem FO-, a data de matricula."""
    negativos = [f.ocorrido_em for f in fatos if f.negativo]
    if not negativos:
        return aluno.data_matricula
    return max(negativos)


def dias_entre(agora: datetime, referencia: datetime) -> int:
    """Diferenca absoluta arredondada para cima. Referencia no futuro (erro
    de dado) tambem da contagem positiva."""
    return math.ceil(abs(agora - referencia) / _UM_DIA)


def calcular_bonus_tempo(dias_sem_faltas: int) -> Decimal:
    if dias_sem_faltas <= CARENCIA_DIAS:
        return Decimal("0.00")
    return (dias_sem_faltas - CARENCIA_DIAS) * BONUS_POR_DIA


def somar_ajustes(fatos: Iterable[FatoObservado]) -> Decimal:
    """Soma comutativa dos deltas. Apenas o enquadramento pesa; tipo e metadado."""
    return sum(
        (delta_enquadramento(f.enquadramento, f.dias_suspensao) for f in fatos),
        Decimal("0"),
    )
