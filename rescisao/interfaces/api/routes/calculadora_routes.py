# rescisao/interfaces/api/routes/calculadora_routes.py
from typing import Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from rescisao.application.dtos.rescisao_dto import (
    DadosRescisaoDTO,
    RespostaCalculoDTO,
    ResultadoRescisaoDTO,
)
from rescisao.application.services.calculadora_service import CalculadoraService
from rescisao.application.services.export_service import ExportService
from rescisao.interfaces.api.dependencies import get_calculadora_service, get_export_service

router = APIRouter(prefix="/calculadora")


# EntradaInvalidaError levantada por to_domain() vira 400 no handler registrado em main.py.
@router.post("/calcular", response_model=RespostaCalculoDTO)
def calcular(
    payload: DadosRescisaoDTO,
    service: CalculadoraService = Depends(get_calculadora_service),  # noqa: B008
) -> RespostaCalculoDTO:
    resultado = service.calcular(payload.to_domain())
    return RespostaCalculoDTO(data=ResultadoRescisaoDTO.from_domain(resultado))


@router.post("/exportar")
def exportar(
    payload: DadosRescisaoDTO,
    formato: Literal["csv", "json"] = Query(...),
    service: CalculadoraService = Depends(get_calculadora_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    dados = payload.to_domain()
    resultado = service.calcular(dados)

    if formato == "json":
        return Response(
            content=export_service.exportar_json(resultado),
            media_type="application/json",
        )
    return Response(
        content=export_service.exportar_csv(dados, resultado),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=rescisao.csv"},
    )
