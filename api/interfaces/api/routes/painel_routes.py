# api/interfaces/api/routes/painel_routes.py
from fastapi import APIRouter

from api.application.dtos.painel_dto import PainelDTO, PainelRequestDTO
from api.application.services.painel_service import resumir_painel

router = APIRouter()


@router.post("/painel", response_model=PainelDTO)
def post_painel(payload: PainelRequestDTO) -> PainelDTO:
    resumo = resumir_painel(
        [a.to_domain() for a in payload.alunos],
        serie=payload.serie,
        turma=payload.turma,
    )
    return PainelDTO.from_domain(resumo)
