# api/application/dtos/score_dto.py
from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field

from api.domain.aluno.entities import Aluno
from api.domain.aluno.value_objects import QTD_BIMESTRES, StatusAluno
from api.domain.comportamento.score import ScoreComportamento
from api.domain.fato_observado.entities import FatoObservado
from api.domain.fato_observado.enums import Enquadramento, TipoFO

from ._conversao import como_utc, duas_casas

Nota = Annotated[float, Field(ge=0, le=10)]


class AlunoEntradaDTO(BaseModel):
    data_matricula: datetime
    notas: list[Nota | None] = Field(
        default_factory=lambda: [None] * QTD_BIMESTRES,
        min_length=QTD_BIMESTRES,
        max_length=QTD_BIMESTRES,
    )
    rm: str = ""
    nome: str = ""
    serie: str = ""
    turma: str = ""
    status: StatusAluno = StatusAluno.ATIVO

    def to_domain(self) -> Aluno:
        return Aluno(
            data_matricula=como_utc(self.data_matricula),
            notas=tuple(self.notas),
            rm=self.rm,
            nome=self.nome,
            serie=self.serie,
            turma=self.turma,
            status=self.status,
        )


class FatoEntradaDTO(BaseModel):
    tipo: TipoFO
    ocorrido_em: datetime
    categoria: str = ""
    enquadramento: str = Enquadramento.PENDENTE.value
    dias_suspensao: int | None = Field(default=None, ge=1)

    def to_domain(self) -> FatoObservado:
        return FatoObservado(
            tipo=self.tipo,
            categoria=self.categoria,
            ocorrido_em=como_utc(self.ocorrido_em),
            enquadramento=self.enquadramento,
            dias_suspensao=self.dias_suspensao,
        )


class ScoreRequestDTO(BaseModel):
    aluno: AlunoEntradaDTO
    fatos: list[FatoEntradaDTO] = Field(default_factory=list)
    agora: datetime | None = None  # ausente = instante do servidor


class ScoreDTO(BaseModel):
    base: float
    bonus_merito: float
    bonus_tempo: float
    ajustes: float
    total: float
    dias_sem_faltas: int
    qtd_notas_merito: int
    classificacao: str

    @classmethod
    def from_domain(cls, score: ScoreComportamento) -> ScoreDTO:
        return cls(
            base=duas_casas(score.base),
            bonus_merito=duas_casas(score.bonus_merito),
            bonus_tempo=duas_casas(score.bonus_tempo),
            ajustes=duas_casas(score.ajustes),
            total=duas_casas(score.total),
            dias_sem_faltas=score.dias_sem_faltas,
            qtd_notas_merito=score.qtd_notas_merito,
            classificacao=score.classificacao.value,
        )


class ImpactoRequestDTO(BaseModel):
    enquadramento: str
    dias_suspensao: int | None = Field(default=None, ge=1)


class ImpactoDTO(BaseModel):
    enquadramento: str
    impacto: float
