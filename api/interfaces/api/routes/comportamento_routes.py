# api/interfaces/api/routes/comportamento_routes.py
from datetime import datetime

from fastapi import APIRouter, Depends

from api.application.dtos._conversao import como_utc, duas_casas
from api.application.dtos.score_dto import ImpactoDTO, ImpactoRequestDTO, ScoreDTO, ScoreRequestDTO
from api.application.services.score_service import calcular_score_comportamento
from api.domain.comportamento.score import delta_enquadramento
from api.interfaces.api.dependencies import get_agora

router = APIRouter()


@router.post("/comportamento/score", response_model=ScoreDTO)
def post_score(
    payload: ScoreRequestDTO,
    agora_servidor: datetime = Depends(get_agora),  # noqa: B008
) -> ScoreDTO:
    agora = como_utc(payload.agora) if payload.agora is not None else agora_servidor
    score = calcular_score_comportamento(
        payload.aluno.to_domain(),
        [f.to_domain() for f in payload.fatos],
        agora,
    )
    return ScoreDTO.from_domain(score)


@router.post("/comportamento/impacto", response_model=ImpactoDTO)
def post_impacto(payload: ImpactoRequestDTO) -> ImpactoDTO:
    impacto = delta_enquadramento(payload.enquadramento, payload.dias_suspensao)
    return ImpactoDTO(enquadramento=payload.enquadramento, impacto=duas_casas(impacto))
