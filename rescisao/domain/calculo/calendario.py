# rescisao/domain/calculo/calendario.py
"""Aritmetica de datas do calculo rescisorio. Funcoes puras, sem date.today()."""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from decimal import Decimal

# Ano medio usado para contar anos completos de contrato.
_DIAS_ANO = Decimal("365.25")
_DIAS_MES_COMERCIAL = 30
# Fracao igual ou superior a 15 dias conta como mes inteiro (1/12 avo).
_DIAS_FRACAO_MES = 15
_MAX_AVOS = 12


def somar_dias(data: date, dias: int) -> date:
    return data + timedelta(days=dias)


def dias_inclusivos(inicio: date, fim: date) -> int:
    """Conta o primeiro e o ultimo dia. Ordem das datas indiferente."""
    return abs((fim - inicio).days) + 1


def anos_completos(inicio: date, fim: date) -> int:
    """Anos de contrato: dias corridos / 365,25, arredondado para baixo."""
    dias = (fim - inicio).days
    return int(Decimal(dias) / _DIAS_ANO)


def ultimo_dia_do_mes(data: date) -> date:
    return data.replace(day=calendar.monthrange(data.year, data.month)[1])


def _no_ano(data: date, ano: int) -> date:
    """Mesmo dia/mes em outro ano. 29/02 vira 01/03 em ano nao bissexto."""
    try:
        return data.replace(year=ano)
    except ValueError:
        return date(ano, 3, 1)


def ultimo_aniversario(admissao: date, referencia: date) -> date:
    """Inicio do periodo aquisitivo corrente: aniversario de admissao mais recente <= referencia."""
    aniversario = _no_ano(admissao, referencia.year)
    if aniversario > referencia:
        aniversario = _no_ano(aniversario, referencia.year - 1)
    return aniversario


def avos_ferias(admissao: date, referencia: date) -> int:
    """Avos de ferias proporcionais desde o ultimo aniversario do contrato.

    Meses comerciais de 30 dias; sobra >= 15 dias vale mais um avo. Teto de 12.
    """
    dias = abs((referencia - ultimo_aniversario(admissao, referencia)).days)
    meses, sobra = divmod(dias, _DIAS_MES_COMERCIAL)
    if sobra >= _DIAS_FRACAO_MES:
        meses += 1
    return min(meses, _MAX_AVOS)


def avos_decimo_terceiro(admissao: date, referencia: date) -> int:
    """Avos de 13o no ano de `referencia`.

    Percorre mes a mes a partir de max(admissao, 01/01). Cada mes conta se o
    trecho ativo dentro dele tiver 15 dias ou mais. Teto de 12.
    """
    cursor = max(admissao, date(referencia.year, 1, 1))
    avos = 0
    while cursor <= referencia:
        fim_ativo = min(ultimo_dia_do_mes(cursor), referencia)
        if fim_ativo.day - cursor.day + 1 >= _DIAS_FRACAO_MES:
            avos += 1
        cursor = somar_dias(ultimo_dia_do_mes(cursor), 1)
    return min(avos, _MAX_AVOS)
