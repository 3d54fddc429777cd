# rescisao/application/services/export_service.py
from __future__ import annotations

import csv
import io

from rescisao.domain.calculo.entities import DadosRescisao, ResultadoRescisao
from rescisao.domain.calculo.enums import TipoLancamento

from ..dtos.rescisao_dto import ResultadoRescisaoDTO
from .formatacao import formatar_data, formatar_moeda


class ExportService:
    def exportar_json(self, resultado: ResultadoRescisao) -> str:
        return ResultadoRescisaoDTO.from_domain(resultado).model_dump_json(indent=2, by_alias=True)

    def exportar_csv(self, dados: DadosRescisao, resultado: ResultadoRescisao) -> str:
        output = io.StringIO()
        writer = csv.writer(output)

        # Cabecalho do demonstrativo
        output.write("# DADOS DO CONTRATO\n")
        writer.writerow(["Campo", "Valor"])
        writer.writerow(["Empregado", dados.nome_empregado or "-"])
        writer.writerow(["Modalidade", dados.tipo_rescisao.value])
        writer.writerow(["Aviso Previo", dados.tipo_aviso.value])
        writer.writerow(["Admissao", formatar_data(dados.data_admissao)])
        writer.writerow(["Demissao", formatar_data(dados.data_demissao)])
        writer.writerow(["Data Projetada", formatar_data(resultado.data_projetada)])
        writer.writerow(["Dias de Aviso", resultado.dias_aviso])
        output.write("\n")

        # Verbas, na ordem de calculo
        output.write("# VERBAS\n")
        writer.writerow(["Grupo", "Descricao", "Referencia", "Base", "Provento", "Desconto"])
        for item in resultado.itens:
            valor = formatar_moeda(item.valor)
            base = formatar_moeda(item.base_calculo) if item.base_calculo is not None else ""
            if item.tipo == TipoLancamento.PROVENTO:
                writer.writerow([item.grupo.value, item.descricao, item.referencia, base, valor, ""])
            else:
                writer.writerow([item.grupo.value, item.descricao, item.referencia, base, "", valor])
        output.write("\n")

        # Totais
        output.write("# TOTAIS\n")
        writer.writerow(["Total Proventos", formatar_moeda(resultado.total_proventos)])
        writer.writerow(["Total Descontos", formatar_moeda(resultado.total_descontos)])
        writer.writerow(["Liquido", formatar_moeda(resultado.liquido)])

        return output.getvalue()
