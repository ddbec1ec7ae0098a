# api/interfaces/api/routes/fato_routes.py
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from api.application.dtos._conversao import como_utc, duas_casas
from api.application.dtos.fato_dto import (
    AssuntoDTO,
    AssuntoRequestDTO,
    FatoRegistroDTO,
    OpcoesFatoDTO,
    RegistroFatoRequestDTO,
    RoteamentoDTO,
    RoteamentoRequestDTO,
    TratativaDTO,
    TratativaRequestDTO,
)
from api.application.services.registro_service import aplicar_tratativa, registrar_fato
from api.application.services.roteamento_service import (
    categorias_por_tipo,
    enquadramento_padrao,
    enquadramentos_por_tipo,
    extrair_assunto,
    gravidade_padrao,
    gravidades_por_tipo,
    rotear_equipe,
)
from api.domain.comportamento.score import delta_enquadramento
from api.domain.fato_observado.enums import Enquadramento, TipoFO
from api.infrastructure.registro_mapper import de_registro, para_registro
from api.interfaces.api.dependencies import get_agora

router = APIRouter()


@router.post("/fatos/roteamento", response_model=RoteamentoDTO)
def post_roteamento(payload: RoteamentoRequestDTO) -> RoteamentoDTO:
    equipe = rotear_equipe(payload.categoria, payload.tipo, payload.equipe_atual)
    return RoteamentoDTO(
        equipe=equipe.value if equipe else None,
        enquadramento=Enquadramento.PENDENTE.value,
    )


@router.get("/fatos/opcoes", response_model=OpcoesFatoDTO)
def get_opcoes(tipo: TipoFO = Query(...)) -> OpcoesFatoDTO:  # noqa: B008
    return OpcoesFatoDTO(
        tipo=tipo.value,
        categorias=list(categorias_por_tipo(tipo)),
        enquadramentos=[e.value for e in enquadramentos_por_tipo(tipo)],
        gravidades=[g.value for g in gravidades_por_tipo(tipo)],
    )


@router.post("/fatos/assunto", response_model=AssuntoDTO)
def post_assunto(payload: AssuntoRequestDTO) -> AssuntoDTO:
    descricao = extrair_assunto(payload.descricao)
    return AssuntoDTO(assunto=descricao.assunto, descricao=descricao.texto)


@router.post("/fatos", response_model=FatoRegistroDTO, status_code=201)
def post_fato(
    payload: RegistroFatoRequestDTO,
    agora: datetime = Depends(get_agora),  # noqa: B008
) -> FatoRegistroDTO:
    ocorrido_em = como_utc(payload.ocorrido_em) if payload.ocorrido_em is not None else agora
    fato = registrar_fato(
        payload.tipo,
        payload.categoria,
        ocorrido_em,
        aluno_rm=payload.aluno_rm,
        aluno_nome=payload.aluno_nome,
        assunto=payload.assunto,
        descricao=payload.descricao,
        professor=payload.professor,
        monitor=payload.monitor,
        tratativa=payload.tratativa,
        equipe=payload.equipe,
    )
    return FatoRegistroDTO.from_row(para_registro(fato))


@router.post("/fatos/tratativa", response_model=TratativaDTO)
def post_tratativa(payload: TratativaRequestDTO) -> TratativaDTO:
    try:
        fato = de_registro(payload.registro.model_dump(mode="json"))
    except ValueError as err:
        raise HTTPException(status_code=422, detail="data_fato invalida") from err

    enquadramento = payload.enquadramento or enquadramento_padrao(fato)
    if enquadramento not in enquadramentos_por_tipo(fato.tipo):
        raise HTTPException(
            status_code=422,
            detail=f"enquadramento invalido para {fato.tipo.value}: {enquadramento}",
        )

    tratado = aplicar_tratativa(
        fato,
        payload.tratativa,
        enquadramento,
        gravidade=payload.gravidade or gravidade_padrao(fato),
        dias_suspensao=payload.dias_suspensao,
    )
    return TratativaDTO(
        registro=FatoRegistroDTO.from_row(para_registro(tratado)),
        impacto=duas_casas(delta_enquadramento(tratado.enquadramento, tratado.dias_suspensao)),
    )
