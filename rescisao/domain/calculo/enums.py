# rescisao/domain/calculo/enums.py
from enum import StrEnum


class TipoRescisao(StrEnum):
    SEM_JUSTA_CAUSA = "SemJustaCausa"
    PEDIDO_DEMISSAO = "PedidoDemissao"
    JUSTA_CAUSA = "JustaCausa"
    CULPA_RECIPROCA = "CulpaReciproca"
    ACORDO_COMUM = "AcordoComum"  # Art. 484-A CLT


class TipoAviso(StrEnum):
    INDENIZADO = "Indenizado"
    TRABALHADO = "Trabalhado"
    DISPENSADO_NAO_CUMPRIDO = "DispensadoNaoCumprido"


class TipoLancamento(StrEnum):
    PROVENTO = "earning"
    DESCONTO = "deduction"


class GrupoVerba(StrEnum):
    RESCISORIAS = "Rescisórias"
    FERIAS = "Férias"
    DECIMO_TERCEIRO = "13º Salário"
    FGTS = "FGTS"
    MULTAS = "Multas"
    OUTROS = "Outros"


class NaturezaVerba(StrEnum):
    """Origem estruturada de cada linha do demonstrativo.

    Usada pelas somas intermediarias (base do FGTS, base da multa 467) no lugar
    de comparar trechos da descricao.
    """

    PERICULOSIDADE = "PERICULOSIDADE"
    ADICIONAL_NOTURNO = "ADICIONAL_NOTURNO"
    DSR_ADICIONAL_NOTURNO = "DSR_ADICIONAL_NOTURNO"
    MEDIA_HORAS_EXTRAS = "MEDIA_HORAS_EXTRAS"
    DSR_HORAS_EXTRAS = "DSR_HORAS_EXTRAS"
    AVISO_INDENIZADO = "AVISO_INDENIZADO"
    AVISO_TRABALHADO = "AVISO_TRABALHADO"
    FGTS_AVISO_TRABALHADO = "FGTS_AVISO_TRABALHADO"
    DESCONTO_AVISO = "DESCONTO_AVISO"
    SALDO_SALARIO = "SALDO_SALARIO"
    FERIAS_VENCIDAS = "FERIAS_VENCIDAS"
    TERCO_FERIAS_VENCIDAS = "TERCO_FERIAS_VENCIDAS"
    FERIAS_PROPORCIONAIS = "FERIAS_PROPORCIONAIS"
    TERCO_FERIAS_PROPORCIONAIS = "TERCO_FERIAS_PROPORCIONAIS"
    DECIMO_TERCEIRO_PROPORCIONAL = "DECIMO_TERCEIRO_PROPORCIONAL"
    FGTS_RESCISAO = "FGTS_RESCISAO"
    MULTA_FGTS = "MULTA_FGTS"
    MULTA_477 = "MULTA_477"
    MULTA_467 = "MULTA_467"
