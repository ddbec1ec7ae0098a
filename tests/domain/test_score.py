# tests/domain/test_score.py
import random
from datetime import UTC, datetime, timedelta
from decimal import Decimal

from api.application.services.score_service import (
    calcular_bonus_tempo,
    calcular_score_comportamento,
    contar_notas_merito,
    dias_entre,
    somar_ajustes,
)
from api.domain.aluno.entities import Aluno
from api.domain.comportamento.enums import ClassificacaoComportamento
from api.domain.comportamento.score import classificar, delta_enquadramento
from api.domain.fato_observado.entities import FatoObservado
from api.domain.fato_observado.enums import Enquadramento, TipoFO

AGORA = datetime(2026, 3, 2, 12, 0, tzinfo=UTC)


def _aluno(
    dias_matricula: int = 0,
    notas: tuple[float | None, ...] = (None, None, None, None),
) -> Aluno:
    return Aluno(data_matricula=AGORA - timedelta(days=dias_matricula), notas=notas)


def _fato(
    enquadramento: str = Enquadramento.PENDENTE,
    tipo: TipoFO = TipoFO.NEGATIVO,
    dias_atras: int = 0,
    dias_suspensao: int | None = None,
) -> FatoObservado:
    return FatoObservado(
        tipo=tipo,
        categoria="Atraso",
        ocorrido_em=AGORA - timedelta(days=dias_atras),
        enquadramento=enquadramento,
        dias_suspensao=dias_suspensao,
    )


# ---------- Merito intelectual ----------


def test_sem_nota_acima_de_8_nao_da_merito():
    score = calcular_score_comportamento(_aluno(notas=(7.9, 5.0, None, 0.0)), [], AGORA)
    assert score.bonus_merito == 0
    assert score.qtd_notas_merito == 0


def test_quatro_notas_acima_de_8_dao_dois_pontos():
    score = calcular_score_comportamento(_aluno(notas=(8.0, 9.5, 10.0, 8.1)), [], AGORA)
    assert score.bonus_merito == Decimal("2.00")
    assert score.qtd_notas_merito == 4


def test_nota_none_nao_conta():
    assert contar_notas_merito([None, 8.0, None, None]) == 1


# ---------- Bonus exemplar (dias sem faltas) ----------


def test_sem_fo_negativo_conta_desde_matricula():
    score = calcular_score_comportamento(_aluno(dias_matricula=45), [], AGORA)
    assert score.dias_sem_faltas == 45


def test_com_fo_negativo_conta_desde_o_mais_recente():
    fatos = [
        _fato(dias_atras=30),
        _fato(dias_atras=10),
        _fato(dias_atras=90),
    ]
    score = calcular_score_comportamento(_aluno(dias_matricula=400), fatos, AGORA)
    assert score.dias_sem_faltas == 10


def test_fo_positivo_nao_reinicia_contagem():
    fatos = [_fato(Enquadramento.ELOGIO_INDIVIDUAL, tipo=TipoFO.POSITIVO, dias_atras=1)]
    score = calcular_score_comportamento(_aluno(dias_matricula=70), fatos, AGORA)
    assert score.dias_sem_faltas == 70


def test_fracao_de_dia_arredonda_para_cima():
    assert dias_entre(AGORA, AGORA - timedelta(days=3, hours=1)) == 4


def test_referencia_no_futuro_conta_distancia_absoluta():
    assert dias_entre(AGORA, AGORA + timedelta(days=5)) == 5


def test_bonus_tempo_zero_ate_60_dias():
    assert calcular_bonus_tempo(0) == 0
    assert calcular_bonus_tempo(60) == 0


def test_bonus_tempo_cresce_020_por_dia_apos_60():
    assert calcular_bonus_tempo(61) == Decimal("0.20")
    assert calcular_bonus_tempo(75) == Decimal("3.00")


def test_bonus_tempo_nao_tem_teto():
    """Apenas o total e limitado; o termo intermediario cresce sem limite."""
    score = calcular_score_comportamento(_aluno(dias_matricula=3 * 365), [], AGORA)
    assert score.bonus_tempo == (3 * 365 - 60) * Decimal("0.20")
    assert score.total == Decimal("10.00")


# ---------- Ajustes por enquadramento ----------


def test_tabela_de_ajustes():
    assert delta_enquadramento(Enquadramento.ADVERTENCIA_ORAL) == Decimal("-0.10")
    assert delta_enquadramento(Enquadramento.ADVERTENCIA_ESCRITA) == Decimal("-0.30")
    assert delta_enquadramento(Enquadramento.ELOGIO_INDIVIDUAL) == Decimal("0.50")
    assert delta_enquadramento(Enquadramento.ELOGIO_COLETIVO) == Decimal("0.30")
    assert delta_enquadramento(Enquadramento.SUSPENSAO, 3) == Decimal("-1.50")


def test_suspensao_sem_dias_vale_um_dia():
    assert delta_enquadramento(Enquadramento.SUSPENSAO) == Decimal("-0.50")


def test_suspensao_com_zero_dias_nao_pesa():
    assert delta_enquadramento(Enquadramento.SUSPENSAO, 0) == 0


def test_enquadramentos_sem_peso():
    for enquadramento in (
        Enquadramento.PENDENTE,
        Enquadramento.ACOES_EDUCATIVAS,
        Enquadramento.TRANSFERENCIA_EDUCATIVA,
        "Texto qualquer",
    ):
        assert delta_enquadramento(enquadramento) == 0


def test_enquadramento_como_texto_cru_pesa_igual():
    assert delta_enquadramento("Advertência Escrita") == Decimal("-0.30")


def test_dias_suspensao_ignorado_fora_de_suspensao():
    assert delta_enquadramento(Enquadramento.ADVERTENCIA_ORAL, 5) == Decimal("-0.10")


def test_tipo_nao_influencia_ajuste():
    """Elogio registrado num FO- ainda soma: so o enquadramento pesa."""
    fatos = [_fato(Enquadramento.ELOGIO_COLETIVO, tipo=TipoFO.NEGATIVO)]
    assert somar_ajustes(fatos) == Decimal("0.30")


def test_ajustes_independem_da_ordem():
    fatos = [
        _fato(Enquadramento.ADVERTENCIA_ORAL, dias_atras=5),
        _fato(Enquadramento.SUSPENSAO, dias_atras=20, dias_suspensao=2),
        _fato(Enquadramento.ELOGIO_INDIVIDUAL, tipo=TipoFO.POSITIVO, dias_atras=1),
        _fato(Enquadramento.ADVERTENCIA_ESCRITA, dias_atras=40),
        _fato(Enquadramento.PENDENTE, dias_atras=2),
    ]
    esperado = somar_ajustes(fatos)
    embaralhados = list(fatos)
    for semente in range(5):
        random.Random(semente).shuffle(embaralhados)
        assert somar_ajustes(embaralhados) == esperado
    assert esperado == Decimal("-0.90")


# ---------- Total e clamp ----------


def test_sem_fatos_e_sem_merito_total_e_base_mais_tempo():
    score = calcular_score_comportamento(_aluno(dias_matricula=65), [], AGORA)
    assert score.total == Decimal("8.00") + Decimal("1.00")


def test_total_nunca_abaixo_de_zero():
    fatos = [_fato(Enquadramento.SUSPENSAO, dias_suspensao=30) for _ in range(1000)]
    score = calcular_score_comportamento(_aluno(), fatos, AGORA)
    assert score.total == Decimal("0.00")
    assert score.ajustes == Decimal("-15000.00")


def test_total_nunca_acima_de_dez():
    fatos = [_fato(Enquadramento.ELOGIO_INDIVIDUAL, tipo=TipoFO.POSITIVO) for _ in range(50)]
    score = calcular_score_comportamento(_aluno(notas=(10.0, 10.0, 10.0, 10.0)), fatos, AGORA)
    assert score.total == Decimal("10.00")
    assert score.bruto > Decimal("10")


def test_cenario_matricula_100_dias_uma_nota_9():
    score = calcular_score_comportamento(_aluno(dias_matricula=100, notas=(9.0, None, None, None)), [], AGORA)
    assert score.base == Decimal("8.00")
    assert score.bonus_merito == Decimal("0.50")
    assert score.dias_sem_faltas == 100
    assert score.bonus_tempo == Decimal("8.00")
    assert score.ajustes == 0
    assert score.total == Decimal("10.00")


def test_cenario_suspensao_de_4_dias_matriculado_hoje():
    fatos = [_fato(Enquadramento.SUSPENSAO, dias_suspensao=4)]
    score = calcular_score_comportamento(_aluno(dias_matricula=0), fatos, AGORA)
    assert score.ajustes == Decimal("-2.00")
    assert score.bonus_tempo == 0
    assert score.bonus_merito == 0
    assert score.total == Decimal("6.00")


def test_mesma_entrada_mesmo_resultado_e_agora_muda_resultado():
    aluno = _aluno(dias_matricula=90)
    assert calcular_score_comportamento(aluno, [], AGORA) == calcular_score_comportamento(aluno, [], AGORA)
    depois = calcular_score_comportamento(aluno, [], AGORA + timedelta(days=1))
    assert depois.bonus_tempo == calcular_score_comportamento(aluno, [], AGORA).bonus_tempo + Decimal("0.20")


def test_fatos_nao_sao_mutados():
    fatos = [_fato(Enquadramento.SUSPENSAO, dias_suspensao=None)]
    calcular_score_comportamento(_aluno(), fatos, AGORA)
    assert fatos[0].dias_suspensao is None


# ---------- Classificacao ----------


def test_faixas_de_classificacao():
    assert classificar(Decimal("10.00")) == ClassificacaoComportamento.EXCEPCIONAL
    assert classificar(Decimal("9.00")) == ClassificacaoComportamento.OTIMO
    assert classificar(Decimal("8.99")) == ClassificacaoComportamento.BOM
    assert classificar(Decimal("7.00")) == ClassificacaoComportamento.BOM
    assert classificar(Decimal("5.00")) == ClassificacaoComportamento.REGULAR
    assert classificar(Decimal("2.00")) == ClassificacaoComportamento.INSUFICIENTE
    assert classificar(Decimal("1.99")) == ClassificacaoComportamento.INCOMPATIVEL


def test_classificacao_usa_total_limitado():
    fatos = [_fato(Enquadramento.SUSPENSAO, dias_suspensao=4)]
    score = calcular_score_comportamento(_aluno(), fatos, AGORA)
    assert score.classificacao == ClassificacaoComportamento.REGULAR
