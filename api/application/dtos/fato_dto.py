# api/application/dtos/fato_dto.py
from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from api.domain.fato_observado.enums import Equipe, Gravidade, TipoFO


class RoteamentoRequestDTO(BaseModel):
    categoria: str
    tipo: TipoFO
    equipe_atual: Equipe | None = None


class RoteamentoDTO(BaseModel):
    equipe: str | None
    enquadramento: str
    aguardando_analise: bool = True


class OpcoesFatoDTO(BaseModel):
    tipo: str
    categorias: list[str]
    enquadramentos: list[str]
    gravidades: list[str]


class AssuntoRequestDTO(BaseModel):
    descricao: str


class AssuntoDTO(BaseModel):
    assunto: str
    descricao: str


class RegistroFatoRequestDTO(BaseModel):
    tipo: TipoFO
    categoria: str = Field(..., min_length=1)
    aluno_rm: str = Field(..., min_length=1)
    aluno_nome: str = ""
    assunto: str = ""
    descricao: str = ""
    professor: str = ""
    monitor: str = ""
    tratativa: str = ""
    equipe: Equipe | None = None
    ocorrido_em: datetime | None = None  # ausente = agora


class FatoRegistroDTO(BaseModel):
    """Formato de linha persistido pela aplicacao (fatos_observados)."""

    id: str | None = None
    aluno_rm: str = ""
    tipo: TipoFO
    categoria: str
    natureza: str
    gravidade: Gravidade | None = None
    equipe_responsavel: Equipe | None = None
    descricao: str
    professor_solicitante: str = ""
    monitor_responsavel: str = ""
    tratativa: str = ""
    data_fato: str
    dias_suspensao: int | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> FatoRegistroDTO:
        return cls(**row)


class TratativaRequestDTO(BaseModel):
    registro: FatoRegistroDTO
    tratativa: str = Field(..., min_length=1)
    enquadramento: str | None = None  # ausente = enquadramento padrao do tipo
    gravidade: Gravidade | None = None
    dias_suspensao: int | None = Field(default=None, ge=1)


class TratativaDTO(BaseModel):
    registro: FatoRegistroDTO
    impacto: float
