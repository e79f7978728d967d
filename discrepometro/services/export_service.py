"""
Exportação da análise de discrepâncias
Formatos: Excel (.xlsx) e CSV (UTF-8 com BOM para abrir no Excel)
"""
import csv
from io import BytesIO, StringIO
from datetime import datetime
from typing import List, Dict, Any

import openpyxl
from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.utils import get_column_letter


ANALISE_COLUMNS = [
    {'field': 'produto', 'header': 'Produto', 'width': 30},
    {'field': 'codigo_produto', 'header': 'Código', 'width': 14},
    {'field': 'empresa', 'header': 'Empresa', 'width': 28},
    {'field': 'estoque_inicial_2021', 'header': 'Estoque Inicial 2021', 'width': 18},
    {'field': 'total_entradas', 'header': 'Total Entradas', 'width': 15},
    {'field': 'total_saidas', 'header': 'Total Saídas', 'width': 15},
    {'field': 'estoque_final_calculado', 'header': 'Estoque Calculado', 'width': 18},
    {'field': 'estoque_final_2021', 'header': 'Estoque Final 2021', 'width': 18},
    {'field': 'discrepancia', 'header': 'Discrepância', 'width': 13},
    {'field': 'tipo_discrepancia', 'header': 'Tipo', 'width': 18},
    {'field': 'fonte', 'header': 'Fonte', 'width': 22},
    {'field': 'created_at', 'header': 'Criado em', 'width': 18},
]


def _cell_value(value):
    if isinstance(value, datetime):
        return value.strftime('%Y-%m-%d %H:%M:%S')
    if value is None:
        return ''
    return value


class ExportService:
    """Serviço de exportação"""

    @staticmethod
    def analise_rows(analises) -> List[Dict[str, Any]]:
        """Linhas de exportação, já com o estoque calculado e a marca de discrepância"""
        return [{
            'produto': a.produto,
            'codigo_produto': a.codigo_produto,
            'empresa': a.empresa.nome if a.empresa else '',
            'estoque_inicial_2021': a.estoque_inicial_2021,
            'total_entradas': a.total_entradas,
            'total_saidas': a.total_saidas,
            'estoque_final_calculado': a.estoque_final_calculado,
            'estoque_final_2021': a.estoque_final_2021,
            'discrepancia': 'Sim' if a.tem_discrepancia else 'Não',
            'tipo_discrepancia': a.tipo_discrepancia or 'Não classificado',
            'fonte': a.fonte or 'N/A',
            'created_at': a.created_at,
        } for a in analises]

    @staticmethod
    def export_to_excel(
        data: List[Dict[str, Any]],
        columns: List[Dict[str, Any]],
        sheet_name: str = "Dados",
        title: str = "Exportação"
    ) -> BytesIO:
        """
        Gera uma planilha com título, data de exportação, cabeçalho e dados

        Args:
            data: lista de linhas [{"campo": valor}, ...]
            columns: definição das colunas [{"field": ..., "header": ..., "width": ...}]
        """
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = sheet_name

        header_font = Font(bold=True, color='FFFFFF')
        header_fill = PatternFill(start_color='2563EB', end_color='2563EB', fill_type='solid')

        # Título e data (células mescladas)
        ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=len(columns))
        title_cell = ws.cell(row=1, column=1, value=title)
        title_cell.font = Font(size=14, bold=True)
        title_cell.alignment = Alignment(horizontal='center')

        ws.merge_cells(start_row=2, start_column=1, end_row=2, end_column=len(columns))
        ws.cell(row=2, column=1, value=f"Exportado em: {datetime.now().strftime('%d/%m/%Y %H:%M')}")

        for col_idx, col_def in enumerate(columns, start=1):
            cell = ws.cell(row=3, column=col_idx, value=col_def['header'])
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal='center')
            ws.column_dimensions[get_column_letter(col_idx)].width = col_def.get('width', 15)

        for row_idx, row_data in enumerate(data, start=4):
            for col_idx, col_def in enumerate(columns, start=1):
                value = _cell_value(row_data.get(col_def['field']))
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                if isinstance(value, (int, float)):
                    cell.alignment = Alignment(horizontal='right')

        # Congela título + data + cabeçalho
        ws.freeze_panes = 'A4'

        output = BytesIO()
        wb.save(output)
        output.seek(0)
        return output

    @staticmethod
    def export_to_csv(
        data: List[Dict[str, Any]],
        columns: List[Dict[str, Any]]
    ) -> BytesIO:
        """Gera CSV com cabeçalhos legíveis"""
        text_output = StringIO()
        writer = csv.DictWriter(
            text_output,
            fieldnames=[col['field'] for col in columns],
            extrasaction='ignore'
        )
        writer.writerow({col['field']: col['header'] for col in columns})
        for row in data:
            writer.writerow({col['field']: _cell_value(row.get(col['field'])) for col in columns})

        output = BytesIO()
        output.write('\ufeff'.encode('utf-8'))
        output.write(text_output.getvalue().encode('utf-8'))
        output.seek(0)
        return output


# Instância global
export_service = ExportService()
