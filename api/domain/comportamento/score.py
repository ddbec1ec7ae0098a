# api/domain/comportamento/score.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from api.domain.fato_observado.enums import Enquadramento

from .enums import ClassificacaoComportamento

BASE = Decimal("8.00")
SCORE_MINIMO = Decimal("0.00")
SCORE_MAXIMO = Decimal("10.00")

# Merito intelectual: cada bimestre com nota >= 8.0 vale +0.50.
NOTA_MINIMA_MERITO = 8.0
BONUS_POR_NOTA_MERITO = Decimal("0.50")

# Bonus exemplar: +0.20 por dia sem FO- alem da carencia de 60 dias. Sem teto.
CARENCIA_DIAS = 60
BONUS_POR_DIA = Decimal("0.20")

# ADR: Pesos como constante de modulo, nao espalhados em condicionais.
# Suspensao e o unico peso multiplicado (por dia de suspensao).
PESOS_ENQUADRAMENTO: dict[Enquadramento, Decimal] = {
    Enquadramento.ADVERTENCIA_ORAL: Decimal("-0.10"),
    Enquadramento.ADVERTENCIA_ESCRITA: Decimal("-0.30"),
    Enquadramento.SUSPENSAO: Decimal("-0.50"),
    Enquadramento.ELOGIO_INDIVIDUAL: Decimal("0.50"),
    Enquadramento.ELOGIO_COLETIVO: Decimal("0.30"),
}

# (limite inferior, rotulo), do maior para o menor.
FAIXAS_CLASSIFICACAO: tuple[tuple[Decimal, ClassificacaoComportamento], ...] = (
    (Decimal("10"), ClassificacaoComportamento.EXCEPCIONAL),
    (Decimal("9"), ClassificacaoComportamento.OTIMO),
    (Decimal("7"), ClassificacaoComportamento.BOM),
    (Decimal("5"), ClassificacaoComportamento.REGULAR),
    (Decimal("2"), ClassificacaoComportamento.INSUFICIENTE),
)


def delta_enquadramento(enquadramento: str, dias_suspensao: int | None = None) -> Decimal:
    """Impacto de um unico enquadramento. Fora da tabela (Pendente, Acoes
    Educativas, texto desconhecido) -> 0."""
    peso = PESOS_ENQUADRAMENTO.get(enquadramento)  # type: ignore[call-overload]
    if peso is None:
        return Decimal("0")
    if enquadramento == Enquadramento.SUSPENSAO:
        dias = 1 if dias_suspensao is None else dias_suspensao
        return peso * dias
    return peso


def classificar(total: Decimal) -> ClassificacaoComportamento:
    for limite, rotulo in FAIXAS_CLASSIFICACAO:
        if total >= limite:
            return rotulo
    return ClassificacaoComportamento.INCOMPATIVEL


@dataclass(frozen=True)
class ScoreComportamento:
    """Decomposicao do grau de comportamento. Termos intermediarios sem clamp,
    apenas total fica em [0, 10]."""

    bonus_merito: Decimal
    bonus_tempo: Decimal
    ajustes: Decimal
    dias_sem_faltas: int
    qtd_notas_merito: int
    base: Decimal = BASE

    @property
    def bruto(self) -> Decimal:
        return self.base + self.bonus_merito + self.bonus_tempo + self.ajustes

    @property
    def total(self) -> Decimal:
        return min(SCORE_MAXIMO, max(SCORE_MINIMO, self.bruto))

    @property
    def classificacao(self) -> ClassificacaoComportamento:
        return classificar(self.total)
