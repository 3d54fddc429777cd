# rescisao/domain/calculo/exceptions.py
from __future__ import annotations


class EntradaInvalidaError(ValueError):
    """Dados de entrada rejeitados na fronteira do calculo. Carrega o campo e o motivo."""

    def __init__(self, campo: str, motivo: str) -> None:
        super().__init__(f"{campo}: {motivo}")
        self.campo = campo
        self.motivo = motivo
