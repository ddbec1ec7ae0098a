# api/domain/fato_observado/enums.py
from enum import StrEnum


class TipoFO(StrEnum):
    POSITIVO = "FO+"  # trilha de elogio
    NEGATIVO = "FO-"  # trilha de infracao


class Enquadramento(StrEnum):
    ELOGIO_INDIVIDUAL = "Elogio Individual"
    ELOGIO_COLETIVO = "Elogio Coletivo"
    ADVERTENCIA_ORAL = "Advertência Oral"
    ADVERTENCIA_ESCRITA = "Advertência Escrita"
    SUSPENSAO = "Suspensão"
    ACOES_EDUCATIVAS = "Ações Educativas"
    TRANSFERENCIA_EDUCATIVA = "Transferência Educativa"
    PENDENTE = "Pendente"  # aguardando analise humana


class Equipe(StrEnum):
    PSICOSSOCIAL = "Psicossocial"
    CIVICO_MILITAR = "Cívico-Militar"


class Gravidade(StrEnum):
    LEVE = "Falta Leve"
    MEDIA = "Falta Média"
    GRAVE = "Falta Grave"
    NAO_SE_APLICA = "N/A"
