# rescisao/application/services/calculadora_service.py
from __future__ import annotations

from rescisao.domain.calculo.entities import DadosRescisao, ResultadoRescisao
from rescisao.infrastructure.log import log

from .rescisao_service import calcular_rescisao


class CalculadoraService:
    """Imperative Shell: registra o calculo e chama o Pure Core (calcular_rescisao)."""

    def calcular(self, dados: DadosRescisao) -> ResultadoRescisao:
        resultado = calcular_rescisao(dados)
        log(
            f"calculo {dados.tipo_rescisao.value}/{dados.tipo_aviso.value}: "
            f"{len(resultado.itens)} itens, aviso={resultado.dias_aviso} dias, "
            f"liquido={resultado.liquido:.2f}"
        )
        return resultado
