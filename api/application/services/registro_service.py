# api/application/services/registro_service.py
"""Lancamento e tratativa de FOs. Funcoes puras — zero IO.

FatoObservado e imutavel: a tratativa devolve um novo registro. Persistir e
responsabilidade da aplicacao ao redor (ver infrastructure/registro_mapper.py).
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from api.domain.fato_observado.entities import FatoObservado
from api.domain.fato_observado.enums import Enquadramento, Equipe, Gravidade, TipoFO
from api.domain.fato_observado.value_objects import ASSUNTO_PADRAO

from .roteamento_service import EQUIPE_INICIAL, rotear_equipe


def registrar_fato(
    tipo: TipoFO,
    categoria: str,
    ocorrido_em: datetime,
    *,
    aluno_rm: str = "",
    aluno_nome: str = "",
    assunto: str = ASSUNTO_PADRAO,
    descricao: str = "",
    professor: str = "",
    monitor: str = "",
    tratativa: str = "",
    equipe: Equipe | None = None,
) -> FatoObservado:
    """Novo FO sempre nasce Pendente. Equipe parte da escolha do formulario
    (ou do estado inicial) e e sobrescrita pelo roteador quando a regra casa."""
    equipe_final = rotear_equipe(categoria, tipo, equipe or EQUIPE_INICIAL)
    return FatoObservado(
        tipo=tipo,
        categoria=categoria,
        ocorrido_em=ocorrido_em,
        enquadramento=Enquadramento.PENDENTE,
        dias_suspensao=None,
        equipe=equipe_final,
        assunto=assunto.strip() or ASSUNTO_PADRAO,
        descricao=descricao,
        professor=professor,
        monitor=monitor,
        tratativa=tratativa,
        aluno_rm=aluno_rm,
        aluno_nome=aluno_nome,
    )


def aplicar_tratativa(
    fato: FatoObservado,
    tratativa: str,
    enquadramento: str,
    gravidade: Gravidade | None = None,
    dias_suspensao: int | None = None,
) -> FatoObservado:
    """Decisao humana sobre o FO. dias_suspensao so sobrevive em Suspensao
    (default 1 dia); qualquer outro enquadramento limpa o campo."""
    if enquadramento == Enquadramento.SUSPENSAO:
        dias = dias_suspensao if dias_suspensao is not None else 1
    else:
        dias = None
    return replace(
        fato,
        tratativa=tratativa,
        enquadramento=enquadramento,
        gravidade=gravidade if gravidade is not None else fato.gravidade,
        dias_suspensao=dias,
    )
