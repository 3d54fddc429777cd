# rescisao/domain/calculo/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .enums import GrupoVerba, NaturezaVerba, TipoAviso, TipoLancamento, TipoRescisao
from .exceptions import EntradaInvalidaError

_ZERO = Decimal("0")

# Data projetada (demissao + ate 90 dias de aviso) e a contagem mes a mes do 13o
# precisam caber em datetime.date.
DATA_MAXIMA = date(9999, 1, 1)


@dataclass(frozen=True)
class DadosRescisao:
    """Fatos do contrato informados pelo formulario. Valida a si mesmo na construcao.

    Uma instancia construida com sucesso e sempre calculavel: o motor nunca levanta
    excecao para ela.
    """

    salario: Decimal
    data_admissao: date
    data_demissao: date
    tipo_rescisao: TipoRescisao
    tipo_aviso: TipoAviso
    nome_empregado: str = ""
    inicio_aviso: date | None = None
    fim_aviso: date | None = None
    ferias_vencidas: int = 0
    dependentes: int = 0  # informativo, nao entra no calculo
    media_horas_extras: Decimal = _ZERO  # valor medio em R$, nao quantidade de horas
    periculosidade: bool = False
    adicional_noturno: bool = False
    saldo_fgts: Decimal = _ZERO
    multa_467: bool = False
    multa_477: bool = False

    def __post_init__(self) -> None:
        if self.salario <= _ZERO:
            raise EntradaInvalidaError("salario", "deve ser maior que zero")
        if self.data_demissao <= self.data_admissao:
            raise EntradaInvalidaError("data_demissao", "deve ser posterior a data de admissao")
        if self.data_demissao > DATA_MAXIMA:
            raise EntradaInvalidaError("data_demissao", f"nao pode ser posterior a {DATA_MAXIMA.isoformat()}")
        if self.tipo_aviso == TipoAviso.TRABALHADO:
            if self.inicio_aviso is None:
                raise EntradaInvalidaError("inicio_aviso", "obrigatorio para aviso trabalhado")
            if self.fim_aviso is None:
                raise EntradaInvalidaError("fim_aviso", "obrigatorio para aviso trabalhado")
            if self.fim_aviso <= self.inicio_aviso:
                raise EntradaInvalidaError("fim_aviso", "deve ser posterior ao inicio do aviso")
            if self.fim_aviso > DATA_MAXIMA:
                raise EntradaInvalidaError("fim_aviso", f"nao pode ser posterior a {DATA_MAXIMA.isoformat()}")
        if self.ferias_vencidas < 0:
            raise EntradaInvalidaError("ferias_vencidas", "nao pode ser negativo")
        if self.dependentes < 0:
            raise EntradaInvalidaError("dependentes", "nao pode ser negativo")
        if self.media_horas_extras < _ZERO:
            raise EntradaInvalidaError("media_horas_extras", "nao pode ser negativo")
        if self.saldo_fgts < _ZERO:
            raise EntradaInvalidaError("saldo_fgts", "nao pode ser negativo")

    @property
    def periodo_aviso(self) -> tuple[date, date] | None:
        """(inicio, fim) do aviso cumprido, quando informado."""
        if self.inicio_aviso is None or self.fim_aviso is None:
            return None
        return self.inicio_aviso, self.fim_aviso


@dataclass(frozen=True)
class ItemRescisao:
    """Uma linha do demonstrativo. O sinal vem de `tipo`, nunca do valor."""

    descricao: str
    referencia: str
    valor: Decimal
    tipo: TipoLancamento
    grupo: GrupoVerba
    natureza: NaturezaVerba
    base_calculo: Decimal | None = None

    def __post_init__(self) -> None:
        if self.valor < _ZERO:
            raise ValueError("Valor de item nao pode ser negativo")

    @property
    def is_provento(self) -> bool:
        return self.tipo == TipoLancamento.PROVENTO


@dataclass(frozen=True)
class ResultadoRescisao:
    """Demonstrativo final. Totais sao sempre derivados de `itens`, na ordem de calculo."""

    itens: tuple[ItemRescisao, ...]
    data_projetada: date
    dias_aviso: int

    @property
    def total_proventos(self) -> Decimal:
        return sum((i.valor for i in self.itens if i.tipo == TipoLancamento.PROVENTO), _ZERO)

    @property
    def total_descontos(self) -> Decimal:
        return sum((i.valor for i in self.itens if i.tipo == TipoLancamento.DESCONTO), _ZERO)

    @property
    def liquido(self) -> Decimal:
        return self.total_proventos - self.total_descontos

    def por_grupo(self, grupo: GrupoVerba) -> tuple[ItemRescisao, ...]:
        return tuple(i for i in self.itens if i.grupo == grupo)
