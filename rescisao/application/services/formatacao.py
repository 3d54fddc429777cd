# rescisao/application/services/formatacao.py
"""Formatacao pt-BR para o demonstrativo (R$ e DD/MM/AAAA)."""

from __future__ import annotations

import re
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENTAVOS = Decimal("0.01")


def formatar_moeda(valor: Decimal) -> str:
    """Decimal('1234.5') -> 'R$ 1.234,50'. Arredonda para centavos so na exibicao."""
    arredondado = valor.quantize(_CENTAVOS, rounding=ROUND_HALF_UP)
    texto = f"{abs(arredondado):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sinal = "-" if arredondado < 0 else ""
    return f"{sinal}R$ {texto}"


def parsear_moeda(texto: str) -> Decimal:
    """'R$ 3.000,50' -> Decimal('3000.50'). Pontos sao separadores de milhar."""
    limpo = re.sub(r"[^0-9,-]", "", texto).replace(",", ".", 1)
    try:
        return Decimal(limpo)
    except InvalidOperation as err:
        raise ValueError(f"Valor monetario invalido: {texto!r}") from err


def formatar_data(data: date | str | None) -> str:
    """date(2024, 1, 15) ou '2024-01-15' -> '15/01/2024'. Vazio -> '-'."""
    if not data:
        return "-"
    if isinstance(data, str):
        data = date.fromisoformat(data)
    return data.strftime("%d/%m/%Y")
