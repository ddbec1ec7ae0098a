# api/application/dtos/painel_dto.py
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from api.application.services.painel_service import AlunoPontuado, ResumoPainel

from ._conversao import duas_casas


class AlunoPontuadoDTO(BaseModel):
    rm: str
    nome: str = ""
    serie: str = ""
    turma: str = ""
    score: float = Field(..., ge=0, le=10)

    def to_domain(self) -> AlunoPontuado:
        return AlunoPontuado(
            rm=self.rm,
            score=Decimal(str(self.score)),
            nome=self.nome,
            serie=self.serie,
            turma=self.turma,
        )

    @classmethod
    def from_domain(cls, pontuado: AlunoPontuado) -> AlunoPontuadoDTO:
        return cls(
            rm=pontuado.rm,
            nome=pontuado.nome,
            serie=pontuado.serie,
            turma=pontuado.turma,
            score=duas_casas(pontuado.score),
        )


class PainelRequestDTO(BaseModel):
    alunos: list[AlunoPontuadoDTO]
    serie: str | None = None
    turma: str | None = None


class PainelDTO(BaseModel):
    total_alunos: int
    media: float
    alunos_em_risco: list[AlunoPontuadoDTO]
    qtd_exemplares: int
    media_por_serie: dict[str, float]

    @classmethod
    def from_domain(cls, resumo: ResumoPainel) -> PainelDTO:
        return cls(
            total_alunos=resumo.total_alunos,
            media=duas_casas(resumo.media),
            alunos_em_risco=[AlunoPontuadoDTO.from_domain(p) for p in resumo.alunos_em_risco],
            qtd_exemplares=resumo.qtd_exemplares,
            media_por_serie={s: duas_casas(m) for s, m in resumo.media_por_serie.items()},
        )
