# rescisao/interfaces/api/dependencies.py
from rescisao.application.services.calculadora_service import CalculadoraService
from rescisao.application.services.export_service import ExportService


def get_calculadora_service() -> CalculadoraService:
    return CalculadoraService()


def get_export_service() -> ExportService:
    return ExportService()
