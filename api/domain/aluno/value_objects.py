# api/domain/aluno/value_objects.py
from enum import StrEnum

QTD_BIMESTRES = 4


class StatusAluno(StrEnum):
    ATIVO = "Ativo"
    INATIVO = "Inativo"
    TRANSFERIDO = "Transferido"
    SUSPENSO = "Suspenso"
