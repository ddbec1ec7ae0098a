# api/infrastructure/registro_mapper.py
"""Conversao entre FatoObservado e o formato de linha persistido pela
aplicacao (tabela fatos_observados). Nenhum IO acontece aqui."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from api.domain.fato_observado.entities import FatoObservado
from api.domain.fato_observado.enums import Enquadramento, Equipe, Gravidade, TipoFO
from api.domain.fato_observado.value_objects import DescricaoComAssunto


def para_registro(fato: FatoObservado) -> dict[str, Any]:
    """Linha pronta para gravar. descricao leva o assunto codificado."""
    return {
        "id": fato.id,
        "aluno_rm": fato.aluno_rm,
        "tipo": fato.tipo.value,
        "categoria": fato.categoria,
        "natureza": str(fato.enquadramento),
        "gravidade": fato.gravidade.value if fato.gravidade else None,
        "equipe_responsavel": fato.equipe.value if fato.equipe else None,
        "descricao": DescricaoComAssunto(fato.assunto, fato.descricao).codificada,
        "professor_solicitante": fato.professor,
        "monitor_responsavel": fato.monitor,
        "tratativa": fato.tratativa,
        "data_fato": fato.ocorrido_em.isoformat(),
        "dias_suspensao": fato.dias_suspensao,
    }


def de_registro(row: dict[str, Any]) -> FatoObservado:
    """Hidrata uma linha. data_fato invalida propaga ValueError para quem chama."""
    descricao = DescricaoComAssunto.decodificar(str(row.get("descricao") or ""))
    equipe = row.get("equipe_responsavel")
    gravidade = row.get("gravidade")
    return FatoObservado(
        id=row.get("id"),
        aluno_rm=str(row.get("aluno_rm") or ""),
        aluno_nome=str(row.get("aluno_nome") or ""),
        tipo=TipoFO(str(row["tipo"])),
        categoria=str(row.get("categoria") or ""),
        enquadramento=str(row.get("natureza") or Enquadramento.PENDENTE),
        gravidade=Gravidade(gravidade) if gravidade else None,
        equipe=Equipe(equipe) if equipe else None,
        assunto=descricao.assunto,
        descricao=descricao.texto,
        professor=str(row.get("professor_solicitante") or ""),
        monitor=str(row.get("monitor_responsavel") or ""),
        tratativa=str(row.get("tratativa") or ""),
        ocorrido_em=_instante(row["data_fato"]),
        dias_suspensao=row.get("dias_suspensao"),
    )


def _instante(valor: datetime | str) -> datetime:
    """ISO sem fuso e tratado como UTC."""
    instante = valor if isinstance(valor, datetime) else datetime.fromisoformat(valor)
    if instante.tzinfo is None:
        instante = instante.replace(tzinfo=UTC)
    return instante
