# rescisao/domain/calculo/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

_ZERO = Decimal("0")


@dataclass(frozen=True)
class Remuneracao:
    """Composicao da remuneracao mensal usada como base das verbas. Decimal, nunca float."""

    salario: Decimal
    periculosidade: Decimal = _ZERO
    adicional_noturno: Decimal = _ZERO
    dsr_adicional_noturno: Decimal = _ZERO
    media_horas_extras: Decimal = _ZERO
    dsr_horas_extras: Decimal = _ZERO

    def __post_init__(self) -> None:
        if self.salario <= _ZERO:
            raise ValueError("Salario deve ser positivo")

    @property
    def base(self) -> Decimal:
        """Salario + adicionais habituais + reflexos em DSR."""
        return (
            self.salario
            + self.periculosidade
            + self.adicional_noturno
            + self.dsr_adicional_noturno
            + self.media_horas_extras
            + self.dsr_horas_extras
        )

    @property
    def valor_dia(self) -> Decimal:
        """Mes comercial de 30 dias."""
        return self.base / 30

    @property
    def valor_avo(self) -> Decimal:
        return self.base / 12
