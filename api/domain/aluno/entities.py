# api/domain/aluno/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .value_objects import StatusAluno


@dataclass(frozen=True)
class Aluno:
    """Visao somente-leitura do aluno consumida pelo motor de score.

    notas: 4 slots por bimestre, None = sem nota lancada. O dominio nao
    valida faixa nem quantidade; isso e responsabilidade de quem chama.
    """

    data_matricula: datetime
    notas: tuple[float | None, ...] = (None, None, None, None)
    rm: str = ""
    nome: str = ""
    serie: str = ""
    turma: str = ""
    status: StatusAluno = StatusAluno.ATIVO
