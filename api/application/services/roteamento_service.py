# api/application/services/roteamento_service.py
"""Roteamento de FOs para a equipe responsavel. Funcao pura — zero IO.

ADR: Tabelas de categorias sao dados revisaveis, nao condicionais espalhadas.
Categoria fora das duas tabelas NAO reseta a equipe: o roteador so sobrescreve
quando uma regra casa positivamente. O formulario chama rotear_equipe a cada
mudanca de categoria ou tipo.

ADR: Score e roteamento sao dimensoes INDEPENDENTES.
Este modulo NUNCA deve importar o servico de score.
"""

from __future__ import annotations

from api.domain.fato_observado.entities import FatoObservado
from api.domain.fato_observado.enums import Enquadramento, Equipe, Gravidade, TipoFO
from api.domain.fato_observado.value_objects import DescricaoComAssunto

CATEGORIAS_PSICOSSOCIAL: frozenset[str] = frozenset({
    "Preconceito",
    "Bullying",
    "Escuta Ativa",
    "Racismo",
    "Elogio",
    "Outros (Psi)",
})

CATEGORIAS_CIVICO_MILITAR: frozenset[str] = frozenset({
    "Agressão",
    "Desrespeito",
    "Uso Celular/Ap. Eletrônico",
    "Dano ao Patrimônio",
    "Brinco",
    "Atraso",
    "Uniforme",
    "Pod/Vap",
    "Outros (Mil)",
})

# Ordem de exibicao no formulario de lancamento.
CATEGORIAS_POR_TIPO: dict[TipoFO, tuple[str, ...]] = {
    TipoFO.POSITIVO: (
        "Elogio",
        "Participação",
        "Liderança",
        "Proatividade",
        "Outros (Psi)",
    ),
    TipoFO.NEGATIVO: (
        "Atraso",
        "Uniforme",
        "Brinco",
        "Pod/Vap",
        "Uso Celular/Ap. Eletrônico",
        "Desrespeito",
        "Agressão",
        "Bullying",
        "Preconceito",
        "Racismo",
        "Escuta Ativa",
        "Dano ao Patrimônio",
        "Outros (Mil)",
        "Outros (Psi)",
    ),
}

ENQUADRAMENTOS_POR_TIPO: dict[TipoFO, tuple[Enquadramento, ...]] = {
    TipoFO.POSITIVO: (
        Enquadramento.ELOGIO_INDIVIDUAL,
        Enquadramento.ELOGIO_COLETIVO,
    ),
    TipoFO.NEGATIVO: (
        Enquadramento.ADVERTENCIA_ORAL,
        Enquadramento.ADVERTENCIA_ESCRITA,
        Enquadramento.SUSPENSAO,
        Enquadramento.ACOES_EDUCATIVAS,
        Enquadramento.TRANSFERENCIA_EDUCATIVA,
    ),
}

GRAVIDADES_POR_TIPO: dict[TipoFO, tuple[Gravidade, ...]] = {
    TipoFO.POSITIVO: (Gravidade.NAO_SE_APLICA,),
    TipoFO.NEGATIVO: (Gravidade.LEVE, Gravidade.MEDIA, Gravidade.GRAVE),
}

# Estado inicial do formulario antes de qualquer categoria ser escolhida.
EQUIPE_INICIAL = Equipe.CIVICO_MILITAR


def rotear_equipe(
    categoria: str,
    tipo: TipoFO,
    equipe_atual: Equipe | None = None,
) -> Equipe | None:
    """FO+ ou categoria psicossocial -> Psicossocial; categoria civico-militar
    -> Civico-Militar; qualquer outra -> equipe_atual sem alteracao."""
    if tipo == TipoFO.POSITIVO or categoria in CATEGORIAS_PSICOSSOCIAL:
        return Equipe.PSICOSSOCIAL
    if categoria in CATEGORIAS_CIVICO_MILITAR:
        return Equipe.CIVICO_MILITAR
    return equipe_atual


def categorias_por_tipo(tipo: TipoFO) -> tuple[str, ...]:
    return CATEGORIAS_POR_TIPO[tipo]


def enquadramentos_por_tipo(tipo: TipoFO) -> tuple[Enquadramento, ...]:
    return ENQUADRAMENTOS_POR_TIPO[tipo]


def gravidades_por_tipo(tipo: TipoFO) -> tuple[Gravidade, ...]:
    return GRAVIDADES_POR_TIPO[tipo]


def enquadramento_padrao(fato: FatoObservado) -> str:
    """Valor pre-selecionado na analise: o atual, ou o mais brando do tipo."""
    if not fato.pendente:
        return fato.enquadramento
    return enquadramentos_por_tipo(fato.tipo)[0]


def gravidade_padrao(fato: FatoObservado) -> Gravidade:
    if fato.gravidade is not None:
        return fato.gravidade
    return gravidades_por_tipo(fato.tipo)[0]


def extrair_assunto(descricao_bruta: str) -> DescricaoComAssunto:
    """"[Matematica] Chegou atrasado" -> (Matematica, Chegou atrasado)."""
    return DescricaoComAssunto.decodificar(descricao_bruta)


def codificar_assunto(assunto: str, descricao: str) -> str:
    return DescricaoComAssunto(assunto=assunto, texto=descricao).codificada
