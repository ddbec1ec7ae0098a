# api/domain/fato_observado/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .enums import Enquadramento, Equipe, Gravidade, TipoFO


@dataclass(frozen=True)
class FatoObservado:
    """Registro historico imutavel. Tratativas geram um novo registro,
    nunca alteram o existente.

    enquadramento e str livre: valores fora de Enquadramento sao tolerados
    e simplesmente nao pontuam.
    """

    tipo: TipoFO
    categoria: str
    ocorrido_em: datetime  # momento do fato, nao do registro
    enquadramento: str = Enquadramento.PENDENTE
    dias_suspensao: int | None = None  # so faz sentido em Suspensao
    equipe: Equipe | None = None
    assunto: str = "Geral"
    descricao: str = ""
    professor: str = ""
    monitor: str = ""
    tratativa: str = ""
    gravidade: Gravidade | None = None
    aluno_rm: str = ""
    aluno_nome: str = ""
    id: str | None = None

    @property
    def pendente(self) -> bool:
        return self.enquadramento == Enquadramento.PENDENTE

    @property
    def negativo(self) -> bool:
        return self.tipo == TipoFO.NEGATIVO
