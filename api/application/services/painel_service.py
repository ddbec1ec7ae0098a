# api/application/services/painel_service.py
"""Resumo do painel de acompanhamento. Funcao pura — zero IO.

Recebe alunos ja pontuados (o score vem de score_service, calculado pelo
chamador) e agrega media, lista de atencao e exemplares.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from api.domain.aluno.entities import Aluno

LIMIAR_RISCO = Decimal("7.0")
LIMIAR_EXEMPLAR = Decimal("9.5")
_DUAS_CASAS = Decimal("0.01")


@dataclass(frozen=True)
class AlunoPontuado:
    rm: str
    score: Decimal
    nome: str = ""
    serie: str = ""
    turma: str = ""

    @classmethod
    def de_aluno(cls, aluno: Aluno, score: Decimal) -> AlunoPontuado:
        return cls(rm=aluno.rm, score=score, nome=aluno.nome, serie=aluno.serie, turma=aluno.turma)


@dataclass(frozen=True)
class ResumoPainel:
    total_alunos: int
    media: Decimal
    alunos_em_risco: tuple[AlunoPontuado, ...]
    qtd_exemplares: int
    media_por_serie: dict[str, Decimal]


def resumir_painel(
    pontuados: Sequence[AlunoPontuado],
    serie: str | None = None,
    turma: str | None = None,
) -> ResumoPainel:
    filtrados = [
        p for p in pontuados
        if (serie is None or p.serie == serie)
        and (turma is None or p.turma == turma)
    ]
    em_risco = sorted(
        (p for p in filtrados if p.score < LIMIAR_RISCO),
        key=lambda p: p.score,
    )
    return ResumoPainel(
        total_alunos=len(filtrados),
        media=_media([p.score for p in filtrados]),
        alunos_em_risco=tuple(em_risco),
        qtd_exemplares=sum(1 for p in filtrados if p.score >= LIMIAR_EXEMPLAR),
        media_por_serie=_media_por_serie(filtrados),
    )


def _media(valores: Sequence[Decimal]) -> Decimal:
    if not valores:
        return Decimal("0.00")
    media = sum(valores, Decimal("0")) / len(valores)
    return media.quantize(_DUAS_CASAS, rounding=ROUND_HALF_UP)


def _media_por_serie(pontuados: Sequence[AlunoPontuado]) -> dict[str, Decimal]:
    """Serie em branco e series com media zero ficam fora do grafico."""
    grupos: dict[str, list[Decimal]] = defaultdict(list)
    for p in pontuados:
        if p.serie.strip():
            grupos[p.serie].append(p.score)
    medias = {s: _media(v) for s, v in sorted(grupos.items())}
    return {s: m for s, m in medias.items() if m > 0}
