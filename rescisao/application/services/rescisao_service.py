# rescisao/application/services/rescisao_service.py
"""Calculo das verbas rescisorias (CLT). Funcao pura — zero IO.

As etapas rodam sempre na mesma ordem e anexam itens a uma unica lista.
Etapas posteriores (FGTS, multas) somam os itens ja lancados, entao a ordem
de execucao e parte do resultado.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from decimal import Decimal

from rescisao.domain.calculo.calendario import (
    anos_completos,
    avos_decimo_terceiro,
    avos_ferias,
    dias_inclusivos,
    somar_dias,
)
from rescisao.domain.calculo.entities import DadosRescisao, ItemRescisao, ResultadoRescisao
from rescisao.domain.calculo.enums import (
    GrupoVerba,
    NaturezaVerba,
    TipoAviso,
    TipoLancamento,
    TipoRescisao,
)
from rescisao.domain.calculo.value_objects import Remuneracao

_ZERO = Decimal("0")

# Adicionais sobre o salario base.
_PERCENTUAL_PERICULOSIDADE = Decimal("0.30")
_PERCENTUAL_NOTURNO = Decimal("0.20")
# Reflexo em DSR aproximado por 1/6.
_DIVISOR_DSR = 6

# Aviso previo proporcional (Lei 12.506/2011).
_AVISO_DIAS_BASE = 30
_AVISO_DIAS_POR_ANO = 3
_AVISO_DIAS_MAXIMO = 90

_ALIQUOTA_FGTS = Decimal("0.08")
_MULTA_FGTS = Decimal("0.4")
_MULTA_467 = Decimal("0.5")

_COM_AVISO_PROPORCIONAL = {TipoRescisao.SEM_JUSTA_CAUSA, TipoRescisao.CULPA_RECIPROCA}
_SEM_FGTS = {TipoRescisao.PEDIDO_DEMISSAO, TipoRescisao.JUSTA_CAUSA}


def calcular_rescisao(dados: DadosRescisao) -> ResultadoRescisao:
    """Funcao pura. Mesma entrada = mesma saida."""
    itens: list[ItemRescisao] = []

    remuneracao = _compor_remuneracao(dados)
    _lancar_adicionais(remuneracao, itens)

    dias_aviso, data_projetada = _lancar_aviso_previo(dados, remuneracao, itens)

    _lancar_saldo_salario(dados, remuneracao, itens)

    if dados.tipo_rescisao != TipoRescisao.JUSTA_CAUSA:
        _lancar_ferias(dados, remuneracao, data_projetada, itens)
        _lancar_decimo_terceiro(dados, remuneracao, data_projetada, itens)

    if dados.tipo_rescisao not in _SEM_FGTS:
        _lancar_fgts(dados, itens)

    _lancar_multas(dados, itens)

    return ResultadoRescisao(
        itens=tuple(itens),
        data_projetada=data_projetada,
        dias_aviso=dias_aviso,
    )


def dias_aviso_proporcional(admissao: date, demissao: date) -> int:
    """30 dias + 3 por ano completo, teto de 90."""
    dias = _AVISO_DIAS_BASE + _AVISO_DIAS_POR_ANO * anos_completos(admissao, demissao)
    return min(dias, _AVISO_DIAS_MAXIMO)


def _somar(itens: list[ItemRescisao], criterio: Callable[[ItemRescisao], bool]) -> Decimal:
    return sum((i.valor for i in itens if criterio(i)), _ZERO)


def _provento(
    descricao: str,
    referencia: str,
    valor: Decimal,
    base_calculo: Decimal,
    grupo: GrupoVerba,
    natureza: NaturezaVerba,
) -> ItemRescisao:
    return ItemRescisao(
        descricao=descricao,
        referencia=referencia,
        valor=valor,
        base_calculo=base_calculo,
        tipo=TipoLancamento.PROVENTO,
        grupo=grupo,
        natureza=natureza,
    )


# ---------- Etapa 1: remuneracao ----------


def _compor_remuneracao(dados: DadosRescisao) -> Remuneracao:
    salario = dados.salario
    periculosidade = salario * _PERCENTUAL_PERICULOSIDADE if dados.periculosidade else _ZERO
    noturno = salario * _PERCENTUAL_NOTURNO if dados.adicional_noturno else _ZERO
    dsr_noturno = noturno / _DIVISOR_DSR if dados.adicional_noturno else _ZERO
    horas_extras = dados.media_horas_extras
    dsr_horas_extras = horas_extras / _DIVISOR_DSR if horas_extras > _ZERO else _ZERO
    return Remuneracao(
        salario=salario,
        periculosidade=periculosidade,
        adicional_noturno=noturno,
        dsr_adicional_noturno=dsr_noturno,
        media_horas_extras=horas_extras,
        dsr_horas_extras=dsr_horas_extras,
    )


def _lancar_adicionais(remuneracao: Remuneracao, itens: list[ItemRescisao]) -> None:
    """Integracoes a remuneracao, antes de qualquer verba rescisoria."""
    salario = remuneracao.salario
    if remuneracao.periculosidade > _ZERO:
        itens.append(_provento(
            "Adicional de Periculosidade (30%)", "Base Mensal",
            remuneracao.periculosidade, salario,
            GrupoVerba.OUTROS, NaturezaVerba.PERICULOSIDADE,
        ))

    if remuneracao.adicional_noturno > _ZERO:
        itens.append(_provento(
            "Adicional Noturno (20%)", "Média Estimada",
            remuneracao.adicional_noturno, salario,
            GrupoVerba.OUTROS, NaturezaVerba.ADICIONAL_NOTURNO,
        ))
        itens.append(_provento(
            "DSR s/ Adicional Noturno", "Reflexo (1/6)",
            remuneracao.dsr_adicional_noturno, remuneracao.adicional_noturno,
            GrupoVerba.OUTROS, NaturezaVerba.DSR_ADICIONAL_NOTURNO,
        ))

    if remuneracao.media_horas_extras > _ZERO:
        itens.append(_provento(
            "Média Horas Extras", "Média Valor",
            remuneracao.media_horas_extras, remuneracao.media_horas_extras,
            GrupoVerba.OUTROS, NaturezaVerba.MEDIA_HORAS_EXTRAS,
        ))
        itens.append(_provento(
            "DSR s/ Horas Extras", "Reflexo (1/6)",
            remuneracao.dsr_horas_extras, remuneracao.media_horas_extras,
            GrupoVerba.OUTROS, NaturezaVerba.DSR_HORAS_EXTRAS,
        ))


# ---------- Etapa 2: aviso previo ----------


def _lancar_aviso_previo(
    dados: DadosRescisao,
    remuneracao: Remuneracao,
    itens: list[ItemRescisao],
) -> tuple[int, date]:
    """Retorna (dias de aviso, data projetada do fim do contrato)."""
    if dados.tipo_rescisao in _COM_AVISO_PROPORCIONAL:
        dias_aviso = dias_aviso_proporcional(dados.data_admissao, dados.data_demissao)

        if dados.tipo_aviso == TipoAviso.INDENIZADO:
            itens.append(_provento(
                "Aviso Prévio Indenizado", f"{dias_aviso} dias",
                remuneracao.valor_dia * dias_aviso, remuneracao.base,
                GrupoVerba.RESCISORIAS, NaturezaVerba.AVISO_INDENIZADO,
            ))
            return dias_aviso, somar_dias(dados.data_demissao, dias_aviso)

        periodo = dados.periodo_aviso
        if dados.tipo_aviso == TipoAviso.TRABALHADO and periodo is not None:
            valor = _lancar_aviso_trabalhado(periodo, remuneracao, itens)
            itens.append(_provento(
                "FGTS s/ Aviso Trabalhado", "8%",
                valor * _ALIQUOTA_FGTS, valor,
                GrupoVerba.FGTS, NaturezaVerba.FGTS_AVISO_TRABALHADO,
            ))
            return dias_aviso, max(periodo[1], dados.data_demissao)

        return dias_aviso, dados.data_demissao

    if dados.tipo_rescisao == TipoRescisao.PEDIDO_DEMISSAO:
        if dados.tipo_aviso == TipoAviso.DISPENSADO_NAO_CUMPRIDO:
            itens.append(ItemRescisao(
                descricao="Desconto Aviso Prévio",
                referencia="30 dias",
                valor=dados.salario,  # salario base, sem adicionais
                base_calculo=dados.salario,
                tipo=TipoLancamento.DESCONTO,
                grupo=GrupoVerba.RESCISORIAS,
                natureza=NaturezaVerba.DESCONTO_AVISO,
            ))
        elif dados.tipo_aviso == TipoAviso.TRABALHADO and dados.periodo_aviso is not None:
            _lancar_aviso_trabalhado(dados.periodo_aviso, remuneracao, itens)

    # JUSTA_CAUSA e ACORDO_COMUM: nenhum item de aviso.
    return 0, dados.data_demissao


def _lancar_aviso_trabalhado(
    periodo: tuple[date, date],
    remuneracao: Remuneracao,
    itens: list[ItemRescisao],
) -> Decimal:
    dias = dias_inclusivos(*periodo)
    valor = remuneracao.valor_dia * dias
    itens.append(_provento(
        "Saldo de Salário (Aviso Trabalhado)", f"{dias} dias",
        valor, remuneracao.base,
        GrupoVerba.RESCISORIAS, NaturezaVerba.AVISO_TRABALHADO,
    ))
    return valor


# ---------- Etapa 3: saldo de salario ----------


def _lancar_saldo_salario(
    dados: DadosRescisao,
    remuneracao: Remuneracao,
    itens: list[ItemRescisao],
) -> None:
    """Dias trabalhados no mes da saida. Devido em toda modalidade, inclusive justa causa."""
    if dados.tipo_aviso == TipoAviso.TRABALHADO:
        return  # ja coberto pelo saldo do aviso trabalhado
    dias = dados.data_demissao.day
    itens.append(_provento(
        "Saldo de Salário", f"{dias} dias",
        remuneracao.valor_dia * dias, remuneracao.base,
        GrupoVerba.RESCISORIAS, NaturezaVerba.SALDO_SALARIO,
    ))


# ---------- Etapa 4: ferias ----------


def _lancar_ferias(
    dados: DadosRescisao,
    remuneracao: Remuneracao,
    data_projetada: date,
    itens: list[ItemRescisao],
) -> None:
    if dados.ferias_vencidas > 0:
        vencidas = remuneracao.base * dados.ferias_vencidas
        itens.append(_provento(
            "Férias Vencidas", f"{dados.ferias_vencidas} período(s)",
            vencidas, remuneracao.base,
            GrupoVerba.FERIAS, NaturezaVerba.FERIAS_VENCIDAS,
        ))
        itens.append(_provento(
            "1/3 Férias Vencidas", "1/3 Constitucional",
            vencidas / 3, vencidas,
            GrupoVerba.FERIAS, NaturezaVerba.TERCO_FERIAS_VENCIDAS,
        ))

    avos = avos_ferias(dados.data_admissao, data_projetada)
    proporcionais = remuneracao.valor_avo * avos
    itens.append(_provento(
        "Férias Proporcionais", f"{avos}/12 avos",
        proporcionais, remuneracao.base,
        GrupoVerba.FERIAS, NaturezaVerba.FERIAS_PROPORCIONAIS,
    ))
    itens.append(_provento(
        "1/3 Férias Proporcionais", "1/3 Constitucional",
        proporcionais / 3, proporcionais,
        GrupoVerba.FERIAS, NaturezaVerba.TERCO_FERIAS_PROPORCIONAIS,
    ))


# ---------- Etapa 5: 13o salario ----------


def _lancar_decimo_terceiro(
    dados: DadosRescisao,
    remuneracao: Remuneracao,
    data_projetada: date,
    itens: list[ItemRescisao],
) -> None:
    avos = avos_decimo_terceiro(dados.data_admissao, data_projetada)
    itens.append(_provento(
        "13º Salário Proporcional", f"{avos}/12 avos",
        remuneracao.valor_avo * avos, remuneracao.base,
        GrupoVerba.DECIMO_TERCEIRO, NaturezaVerba.DECIMO_TERCEIRO_PROPORCIONAL,
    ))


# ---------- Etapa 6: FGTS ----------


def _incide_fgts_rescisao(item: ItemRescisao) -> bool:
    """Ferias indenizadas nao tem FGTS; aviso trabalhado ja tem FGTS proprio."""
    return (
        item.is_provento
        and item.grupo not in (GrupoVerba.FGTS, GrupoVerba.FERIAS)
        and item.natureza != NaturezaVerba.AVISO_TRABALHADO
    )


def _lancar_fgts(dados: DadosRescisao, itens: list[ItemRescisao]) -> None:
    base = _somar(itens, _incide_fgts_rescisao)
    fgts = base * _ALIQUOTA_FGTS
    if fgts > _ZERO:
        itens.append(_provento(
            "FGTS sobre Rescisão", "8%",
            fgts, base,
            GrupoVerba.FGTS, NaturezaVerba.FGTS_RESCISAO,
        ))

    if dados.tipo_rescisao == TipoRescisao.SEM_JUSTA_CAUSA:
        base_multa = dados.saldo_fgts + _somar(itens, lambda i: i.grupo == GrupoVerba.FGTS)
        itens.append(_provento(
            "Multa 40% FGTS", "40% do saldo total",
            base_multa * _MULTA_FGTS, base_multa,
            GrupoVerba.MULTAS, NaturezaVerba.MULTA_FGTS,
        ))


# ---------- Etapa 7: multas ----------


def _lancar_multas(dados: DadosRescisao, itens: list[ItemRescisao]) -> None:
    if dados.multa_477 and dados.tipo_rescisao == TipoRescisao.SEM_JUSTA_CAUSA:
        itens.append(_provento(
            "Multa Art. 477 CLT", "1 Salário Base",
            dados.salario, dados.salario,
            GrupoVerba.MULTAS, NaturezaVerba.MULTA_477,
        ))

    if dados.multa_467:
        incontroversas = _somar(itens, lambda i: i.is_provento and i.grupo == GrupoVerba.RESCISORIAS)
        itens.append(_provento(
            "Multa Art. 467 CLT", "50% Verbas Incontroversas",
            incontroversas * _MULTA_467, incontroversas,
            GrupoVerba.MULTAS, NaturezaVerba.MULTA_467,
        ))
