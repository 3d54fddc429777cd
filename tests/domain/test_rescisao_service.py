# tests/domain/test_rescisao_service.py
from datetime import date
from decimal import Decimal

from rescisao.application.services.rescisao_service import calcular_rescisao, dias_aviso_proporcional
from rescisao.domain.calculo.entities import DadosRescisao, ResultadoRescisao
from rescisao.domain.calculo.enums import (
    GrupoVerba,
    TipoAviso,
    TipoLancamento,
    TipoRescisao,
)


def _dados(
    tipo_rescisao: TipoRescisao = TipoRescisao.SEM_JUSTA_CAUSA,
    tipo_aviso: TipoAviso = TipoAviso.INDENIZADO,
    **kwargs: object,
) -> DadosRescisao:
    campos: dict[str, object] = {
        "salario": Decimal("3000"),
        "data_admissao": date(2020, 1, 15),
        "data_demissao": date(2024, 1, 15),
        "saldo_fgts": Decimal("15000"),
    }
    campos.update(kwargs)
    return DadosRescisao(tipo_rescisao=tipo_rescisao, tipo_aviso=tipo_aviso, **campos)  # type: ignore[arg-type]


def _item(resultado: ResultadoRescisao, descricao: str):
    encontrados = [i for i in resultado.itens if i.descricao == descricao]
    assert len(encontrados) == 1, f"esperado 1 item '{descricao}', encontrado {len(encontrados)}"
    return encontrados[0]


def _descricoes(resultado: ResultadoRescisao) -> list[str]:
    return [i.descricao for i in resultado.itens]


# ---------- Cenario de referencia ----------


def test_cenario_sem_justa_causa_indenizado():
    """3000, 15/01/2020 a 15/01/2024: 42 dias de aviso, ferias, 13o, FGTS e multa 40%."""
    resultado = calcular_rescisao(_dados())

    assert resultado.dias_aviso == 42
    assert resultado.data_projetada == date(2024, 2, 26)
    assert _descricoes(resultado) == [
        "Aviso Prévio Indenizado",
        "Saldo de Salário",
        "Férias Proporcionais",
        "1/3 Férias Proporcionais",
        "13º Salário Proporcional",
        "FGTS sobre Rescisão",
        "Multa 40% FGTS",
    ]
    assert resultado.liquido > 0


def test_cenario_valores_linha_a_linha():
    """Valores auditaveis: base 3000 -> R$100/dia, R$250/avo."""
    resultado = calcular_rescisao(_dados())

    assert _item(resultado, "Aviso Prévio Indenizado").valor == Decimal("4200")
    assert _item(resultado, "Aviso Prévio Indenizado").referencia == "42 dias"
    assert _item(resultado, "Saldo de Salário").valor == Decimal("1500")
    assert _item(resultado, "Férias Proporcionais").valor == Decimal("250")
    assert _item(resultado, "Férias Proporcionais").referencia == "1/12 avos"
    assert _item(resultado, "13º Salário Proporcional").valor == Decimal("500")
    assert _item(resultado, "13º Salário Proporcional").referencia == "2/12 avos"
    # FGTS: 8% sobre aviso + saldo + 13o (ferias fora da base)
    fgts = _item(resultado, "FGTS sobre Rescisão")
    assert fgts.base_calculo == Decimal("6200")
    assert fgts.valor == Decimal("6200") * Decimal("0.08")
    multa = _item(resultado, "Multa 40% FGTS")
    assert multa.base_calculo == Decimal("15000") + fgts.valor
    assert multa.grupo == GrupoVerba.MULTAS


# ---------- Propriedades ----------


def test_totais_sao_soma_exata_dos_itens():
    """Aditividade: totais derivados dos itens, sem arredondamento independente."""
    for tipo in TipoRescisao:
        for aviso in (TipoAviso.INDENIZADO, TipoAviso.DISPENSADO_NAO_CUMPRIDO):
            resultado = calcular_rescisao(
                _dados(tipo, aviso, periculosidade=True, adicional_noturno=True,
                       media_horas_extras=Decimal("437.19"), ferias_vencidas=1,
                       multa_467=True, multa_477=True)
            )
            proventos = sum(
                (i.valor for i in resultado.itens if i.tipo == TipoLancamento.PROVENTO), Decimal("0")
            )
            descontos = sum(
                (i.valor for i in resultado.itens if i.tipo == TipoLancamento.DESCONTO), Decimal("0")
            )
            assert resultado.total_proventos == proventos
            assert resultado.total_descontos == descontos
            assert resultado.liquido == proventos - descontos


def test_nenhum_item_com_valor_negativo():
    resultado = calcular_rescisao(_dados(TipoRescisao.PEDIDO_DEMISSAO, TipoAviso.DISPENSADO_NAO_CUMPRIDO))
    assert all(i.valor >= 0 for i in resultado.itens)


def test_determinismo():
    """Mesma entrada = mesma saida."""
    dados = _dados(periculosidade=True, multa_467=True)
    assert calcular_rescisao(dados) == calcular_rescisao(dados)


def test_aviso_limitado_a_90_dias():
    """30+ anos de contrato -> teto de 90 dias."""
    resultado = calcular_rescisao(_dados(data_admissao=date(1990, 1, 1), data_demissao=date(2024, 1, 1)))
    assert resultado.dias_aviso == 90
    assert _item(resultado, "Aviso Prévio Indenizado").referencia == "90 dias"


def test_aviso_proporcional_menos_de_um_ano():
    assert dias_aviso_proporcional(date(2023, 6, 1), date(2024, 1, 15)) == 30


# ---------- Adicionais ----------


def test_adicionais_emitidos_antes_das_verbas_e_na_ordem():
    resultado = calcular_rescisao(
        _dados(periculosidade=True, adicional_noturno=True, media_horas_extras=Decimal("600"))
    )
    assert _descricoes(resultado)[:6] == [
        "Adicional de Periculosidade (30%)",
        "Adicional Noturno (20%)",
        "DSR s/ Adicional Noturno",
        "Média Horas Extras",
        "DSR s/ Horas Extras",
        "Aviso Prévio Indenizado",
    ]
    assert all(i.grupo == GrupoVerba.OUTROS for i in resultado.itens[:5])


def test_adicionais_compoem_base_de_remuneracao():
    """3000 + 900 + 600 + 100 + 600 + 100 = 5300."""
    resultado = calcular_rescisao(
        _dados(periculosidade=True, adicional_noturno=True, media_horas_extras=Decimal("600"))
    )
    assert _item(resultado, "Adicional de Periculosidade (30%)").valor == Decimal("900")
    assert _item(resultado, "DSR s/ Adicional Noturno").valor == Decimal("100")
    assert _item(resultado, "DSR s/ Horas Extras").valor == Decimal("100")
    saldo = _item(resultado, "Saldo de Salário")
    assert saldo.base_calculo == Decimal("5300")


def test_sem_adicionais_nenhum_item_outros():
    resultado = calcular_rescisao(_dados())
    assert resultado.por_grupo(GrupoVerba.OUTROS) == ()


# ---------- Justa causa ----------


def test_justa_causa_apenas_saldo_de_salario():
    """Justa causa: um unico item rescisorio, sem ferias, 13o ou FGTS."""
    resultado = calcular_rescisao(_dados(TipoRescisao.JUSTA_CAUSA, ferias_vencidas=2))

    rescisorias = [i for i in resultado.itens if i.grupo == GrupoVerba.RESCISORIAS and i.is_provento]
    assert [i.descricao for i in rescisorias] == ["Saldo de Salário"]
    assert resultado.por_grupo(GrupoVerba.FERIAS) == ()
    assert resultado.por_grupo(GrupoVerba.DECIMO_TERCEIRO) == ()
    assert resultado.por_grupo(GrupoVerba.FGTS) == ()
    assert resultado.dias_aviso == 0
    assert resultado.data_projetada == date(2024, 1, 15)


# ---------- Aviso trabalhado ----------


def test_aviso_trabalhado_gera_fgts_de_8_por_cento():
    resultado = calcular_rescisao(
        _dados(tipo_aviso=TipoAviso.TRABALHADO, inicio_aviso=date(2023, 12, 17), fim_aviso=date(2024, 1, 15))
    )
    aviso = _item(resultado, "Saldo de Salário (Aviso Trabalhado)")
    fgts = _item(resultado, "FGTS s/ Aviso Trabalhado")

    assert aviso.referencia == "30 dias"
    assert aviso.valor == Decimal("3000")
    assert fgts.valor == aviso.valor * Decimal("0.08")
    assert fgts.grupo == GrupoVerba.FGTS


def test_aviso_trabalhado_substitui_saldo_de_salario():
    resultado = calcular_rescisao(
        _dados(tipo_aviso=TipoAviso.TRABALHADO, inicio_aviso=date(2023, 12, 17), fim_aviso=date(2024, 1, 15))
    )
    assert "Saldo de Salário" not in _descricoes(resultado)


def test_aviso_trabalhado_fora_da_base_do_fgts_rescisao_mas_dentro_da_multa():
    resultado = calcular_rescisao(
        _dados(tipo_aviso=TipoAviso.TRABALHADO, inicio_aviso=date(2023, 12, 17), fim_aviso=date(2024, 1, 15))
    )
    fgts_aviso = _item(resultado, "FGTS s/ Aviso Trabalhado")
    fgts_rescisao = _item(resultado, "FGTS sobre Rescisão")
    decimo = _item(resultado, "13º Salário Proporcional")

    assert fgts_rescisao.base_calculo == decimo.valor
    multa = _item(resultado, "Multa 40% FGTS")
    assert multa.base_calculo == Decimal("15000") + fgts_aviso.valor + fgts_rescisao.valor


def test_aviso_trabalhado_projeta_fim_do_aviso():
    resultado = calcular_rescisao(
        _dados(tipo_aviso=TipoAviso.TRABALHADO, inicio_aviso=date(2024, 1, 16), fim_aviso=date(2024, 2, 26))
    )
    assert resultado.data_projetada == date(2024, 2, 26)
    assert resultado.dias_aviso == 42


def test_pedido_demissao_aviso_trabalhado_sem_fgts():
    resultado = calcular_rescisao(
        _dados(
            TipoRescisao.PEDIDO_DEMISSAO,
            TipoAviso.TRABALHADO,
            inicio_aviso=date(2023, 12, 17),
            fim_aviso=date(2024, 1, 15),
        )
    )
    assert "Saldo de Salário (Aviso Trabalhado)" in _descricoes(resultado)
    assert resultado.por_grupo(GrupoVerba.FGTS) == ()
    assert resultado.dias_aviso == 0


# ---------- Pedido de demissao ----------


def test_pedido_demissao_aviso_nao_cumprido_desconta_salario_base():
    resultado = calcular_rescisao(
        _dados(TipoRescisao.PEDIDO_DEMISSAO, TipoAviso.DISPENSADO_NAO_CUMPRIDO, periculosidade=True)
    )
    descontos = [i for i in resultado.itens if i.tipo == TipoLancamento.DESCONTO]
    assert len(descontos) == 1
    assert descontos[0].descricao == "Desconto Aviso Prévio"
    assert descontos[0].valor == Decimal("3000")
    assert resultado.total_descontos == Decimal("3000")


def test_pedido_demissao_sem_multa_fgts():
    resultado = calcular_rescisao(_dados(TipoRescisao.PEDIDO_DEMISSAO))
    assert "Multa 40% FGTS" not in _descricoes(resultado)
    assert "FGTS sobre Rescisão" not in _descricoes(resultado)


# ---------- Culpa reciproca / acordo ----------


def test_culpa_reciproca_tem_fgts_mas_sem_multa_40():
    resultado = calcular_rescisao(_dados(TipoRescisao.CULPA_RECIPROCA))
    assert resultado.dias_aviso == 42
    assert "FGTS sobre Rescisão" in _descricoes(resultado)
    assert "Multa 40% FGTS" not in _descricoes(resultado)


def test_acordo_comum_sem_item_de_aviso():
    resultado = calcular_rescisao(_dados(TipoRescisao.ACORDO_COMUM))
    assert resultado.dias_aviso == 0
    assert "Aviso Prévio Indenizado" not in _descricoes(resultado)
    assert resultado.data_projetada == date(2024, 1, 15)


# ---------- Ferias ----------


def test_ferias_vencidas_com_terco():
    resultado = calcular_rescisao(_dados(ferias_vencidas=2))
    vencidas = _item(resultado, "Férias Vencidas")
    assert vencidas.valor == Decimal("6000")
    assert vencidas.referencia == "2 período(s)"
    assert _item(resultado, "1/3 Férias Vencidas").valor == Decimal("6000") / 3
    assert "Férias Proporcionais" in _descricoes(resultado)


def test_ferias_fora_da_base_do_fgts():
    sem = calcular_rescisao(_dados())
    com = calcular_rescisao(_dados(ferias_vencidas=1))
    assert _item(sem, "FGTS sobre Rescisão").valor == _item(com, "FGTS sobre Rescisão").valor


# ---------- Multas ----------


def test_multa_467_metade_das_rescisorias_anteriores():
    resultado = calcular_rescisao(_dados(multa_467=True, periculosidade=True))
    posicao = _descricoes(resultado).index("Multa Art. 467 CLT")
    anteriores = resultado.itens[:posicao]
    rescisorias = sum(
        (i.valor for i in anteriores if i.grupo == GrupoVerba.RESCISORIAS and i.is_provento), Decimal("0")
    )
    assert resultado.itens[posicao].valor == rescisorias * Decimal("0.5")


def test_multa_477_somente_sem_justa_causa():
    com = calcular_rescisao(_dados(multa_477=True))
    assert _item(com, "Multa Art. 477 CLT").valor == Decimal("3000")

    culpa = calcular_rescisao(_dados(TipoRescisao.CULPA_RECIPROCA, multa_477=True))
    assert "Multa Art. 477 CLT" not in _descricoes(culpa)


def test_multa_467_aplicada_mesmo_em_justa_causa():
    resultado = calcular_rescisao(_dados(TipoRescisao.JUSTA_CAUSA, multa_467=True))
    multa = _item(resultado, "Multa Art. 467 CLT")
    assert multa.valor == _item(resultado, "Saldo de Salário").valor / 2
