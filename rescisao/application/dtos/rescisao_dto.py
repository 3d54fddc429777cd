# rescisao/application/dtos/rescisao_dto.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from rescisao.domain.calculo.entities import DadosRescisao, ItemRescisao, ResultadoRescisao
from rescisao.domain.calculo.enums import TipoAviso, TipoLancamento, TipoRescisao

from ..services.formatacao import parsear_moeda

# Campo do dominio -> nome do campo no JSON de entrada.
_CAMPOS_JSON: dict[str, str] = {
    "nome_empregado": "employeeName",
    "salario": "salary",
    "data_admissao": "startDate",
    "data_demissao": "endDate",
    "tipo_rescisao": "terminationType",
    "tipo_aviso": "noticeType",
    "inicio_aviso": "noticeStartDate",
    "fim_aviso": "noticeEndDate",
    "ferias_vencidas": "vacationOverdue",
    "dependentes": "dependents",
    "media_horas_extras": "additionalHours",
    "periculosidade": "additionalDanger",
    "adicional_noturno": "additionalNight",
    "saldo_fgts": "fgtsBalance",
    "multa_467": "applyFine467",
    "multa_477": "applyFine477",
}


def campo_json(campo: str) -> str:
    return _CAMPOS_JSON.get(campo, campo)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DadosRescisaoDTO(_CamelModel):
    """Entrada do formulario da calculadora (camelCase; snake_case tambem aceito)."""

    employee_name: str = ""
    salary: Decimal
    start_date: date
    end_date: date
    termination_type: TipoRescisao
    notice_type: TipoAviso
    notice_start_date: date | None = None
    notice_end_date: date | None = None
    vacation_overdue: int = 0
    dependents: int = 0
    additional_hours: Decimal = Decimal("0")
    additional_danger: bool = False
    additional_night: bool = False
    fgts_balance: Decimal = Decimal("0")
    apply_fine467: bool = False
    apply_fine477: bool = False

    @field_validator("salary", "additional_hours", "fgts_balance", mode="before")
    @classmethod
    def _aceitar_moeda_formatada(cls, valor: object) -> object:
        """Aceita 'R$ 3.000,00' vindo direto do campo mascarado do formulario."""
        if isinstance(valor, str) and ("R$" in valor or "," in valor):
            return parsear_moeda(valor)
        return valor

    def to_domain(self) -> DadosRescisao:
        """Levanta EntradaInvalidaError se os fatos do contrato forem inconsistentes."""
        return DadosRescisao(
            nome_empregado=self.employee_name,
            salario=self.salary,
            data_admissao=self.start_date,
            data_demissao=self.end_date,
            tipo_rescisao=self.termination_type,
            tipo_aviso=self.notice_type,
            inicio_aviso=self.notice_start_date,
            fim_aviso=self.notice_end_date,
            ferias_vencidas=self.vacation_overdue,
            dependentes=self.dependents,
            media_horas_extras=self.additional_hours,
            periculosidade=self.additional_danger,
            adicional_noturno=self.additional_night,
            saldo_fgts=self.fgts_balance,
            multa_467=self.apply_fine467,
            multa_477=self.apply_fine477,
        )


class ItemRescisaoDTO(_CamelModel):
    description: str
    reference: str
    value: float
    calculation_basis: float | None
    type: str
    group: str

    @classmethod
    def from_domain(cls, item: ItemRescisao) -> ItemRescisaoDTO:
        return cls(
            description=item.descricao,
            reference=item.referencia,
            value=float(item.valor),
            calculation_basis=float(item.base_calculo) if item.base_calculo is not None else None,
            type=item.tipo.value,
            group=item.grupo.value,
        )


class ResultadoRescisaoDTO(_CamelModel):
    items: list[ItemRescisaoDTO]
    total_earnings: float
    total_deductions: float
    net_total: float
    projected_end_date: str
    notice_days: int

    @classmethod
    def from_domain(cls, resultado: ResultadoRescisao) -> ResultadoRescisaoDTO:
        """Totais somados a partir dos valores float ja serializados, na ordem dos itens,
        para que quem soma o JSON chegue exatamente ao mesmo numero."""
        items = [ItemRescisaoDTO.from_domain(i) for i in resultado.itens]
        total_earnings = sum((i.value for i in items if i.type == TipoLancamento.PROVENTO), 0.0)
        total_deductions = sum((i.value for i in items if i.type == TipoLancamento.DESCONTO), 0.0)
        return cls(
            items=items,
            total_earnings=total_earnings,
            total_deductions=total_deductions,
            net_total=total_earnings - total_deductions,
            projected_end_date=resultado.data_projetada.isoformat(),
            notice_days=resultado.dias_aviso,
        )


class RespostaCalculoDTO(BaseModel):
    success: bool = True
    data: ResultadoRescisaoDTO
