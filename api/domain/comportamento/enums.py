# api/domain/comportamento/enums.py
from enum import StrEnum


class ClassificacaoComportamento(StrEnum):
    EXCEPCIONAL = "Excepcional"
    OTIMO = "Ótimo"
    BOM = "Bom"
    REGULAR = "Regular"
    INSUFICIENTE = "Insuficiente"
    INCOMPATIVEL = "Incompatível"
