"""Serviço de importação de CSV"""
import csv
from datetime import datetime
from io import StringIO
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.utils import secure_filename
from discrepometro.exceptions import DiscrepometroException, ImportFailed
from discrepometro.services.record_service import (
    empresa_service, transacao_service, estoque_service, analise_service
)


class ImportService:
    """Importação em lote de CSV por entidade"""

    ALLOWED_EXTENSIONS = {'csv'}

    DATE_FORMATS = ('%Y-%m-%d', '%d/%m/%Y')

    # Definição de cada importação:
    #   aliases: cabeçalho do CSV -> campo do modelo
    #   numeric_fields: convertidos para float, ausentes/vazios viram 0
    #   date_fields: YYYY-MM-DD ou DD/MM/YYYY
    TEMPLATES = {
        'empresas': {
            'name': 'Empresas',
            'aliases': {
                'nome': 'nome', 'name': 'nome',
                'cnpj': 'cnpj', 'tax-id': 'cnpj', 'tax_id': 'cnpj',
            },
            'numeric_fields': [],
            'date_fields': [],
            'sample_data': [
                {'nome': 'Empresa Exemplo LTDA', 'cnpj': '12345678000199'}
            ]
        },
        'transacoes': {
            'name': 'Transações',
            'aliases': {
                'produto': 'produto', 'product': 'produto',
                'codigo_produto': 'codigo_produto', 'codigo': 'codigo_produto',
                'product-code': 'codigo_produto',
                'nome_produto': 'nome_produto',
                'quantidade': 'quantidade', 'quantity': 'quantidade',
                'valor': 'valor', 'value': 'valor',
                'data': 'data', 'date': 'data',
                'tipo': 'tipo', 'direction': 'tipo',
                'cfop': 'cfop', 'tax-code': 'cfop',
                'empresa_id': 'empresa_id', 'company-ref': 'empresa_id',
                'estoque_inicial_2021': 'estoque_inicial_2021',
                'estoque_final_2021': 'estoque_final_2021',
                'total_entradas': 'total_entradas',
                'total_saidas': 'total_saidas',
            },
            'numeric_fields': ['quantidade', 'valor', 'estoque_inicial_2021',
                               'estoque_final_2021', 'total_entradas', 'total_saidas'],
            'date_fields': ['data'],
            'sample_data': [
                {'produto': 'Parafuso 10mm', 'valor': '150.00', 'data': '2021-03-15',
                 'quantidade': '100', 'tipo': 'entrada', 'cfop': '1102', 'empresa_id': ''}
            ]
        },
        'estoque': {
            'name': 'Estoque',
            'aliases': {
                'produto': 'produto', 'product': 'produto',
                'quantidade_final': 'quantidade_final', 'quantity': 'quantidade_final',
                'data_base': 'data_base', 'date': 'data_base',
                'empresa_id': 'empresa_id', 'company-ref': 'empresa_id',
                'estoque_inicial_2021': 'estoque_inicial_2021',
                'estoque_final_2021': 'estoque_final_2021',
            },
            'numeric_fields': ['quantidade_final', 'estoque_inicial_2021', 'estoque_final_2021'],
            'date_fields': ['data_base'],
            'sample_data': [
                {'produto': 'Parafuso 10mm', 'quantidade_final': '250',
                 'data_base': '2021-12-31', 'empresa_id': ''}
            ]
        },
        'analise': {
            'name': 'Análise de Discrepâncias',
            'aliases': {
                'produto': 'produto', 'product': 'produto',
                'codigo_produto': 'codigo_produto', 'codigo': 'codigo_produto',
                'estoque_inicial_2021': 'estoque_inicial_2021',
                'estoque_final_2021': 'estoque_final_2021',
                'total_entradas': 'total_entradas',
                'total_saidas': 'total_saidas',
                'tipo_discrepancia': 'tipo_discrepancia',
                'fonte': 'fonte',
                'empresa_id': 'empresa_id', 'company-ref': 'empresa_id',
            },
            'numeric_fields': ['estoque_inicial_2021', 'estoque_final_2021',
                               'total_entradas', 'total_saidas'],
            'date_fields': [],
            'sample_data': [
                {'produto': 'Parafuso 10mm', 'codigo_produto': 'P-10',
                 'estoque_inicial_2021': '100', 'estoque_final_2021': '120',
                 'total_entradas': '50', 'total_saidas': '30',
                 'tipo_discrepancia': 'Sem Discrepância', 'fonte': 'EFD', 'empresa_id': ''}
            ]
        },
    }

    # Valores aceitos para a direção da transação
    TIPO_VALUES = {
        'entrada': 'entrada', 'inflow': 'entrada',
        'saida': 'saida', 'saída': 'saida', 'outflow': 'saida',
    }

    SERVICES = {
        'empresas': empresa_service,
        'transacoes': transacao_service,
        'estoque': estoque_service,
        'analise': analise_service,
    }

    @staticmethod
    def allowed_file(filename):
        """Verifica a extensão do arquivo"""
        return '.' in filename and \
               filename.rsplit('.', 1)[1].lower() in ImportService.ALLOWED_EXTENSIONS

    @staticmethod
    def parse_csv(file_content, encodings=('utf-8-sig', 'latin-1')):
        """
        Lê o CSV e devolve a lista de linhas (dicionários)
        Cabeçalhos são normalizados (sem espaços, minúsculos) e linhas em branco são descartadas.
        """
        content = None
        for encoding in encodings:
            try:
                content = file_content.decode(encoding)
                break
            except UnicodeDecodeError:
                continue
        if content is None:
            raise ImportFailed('Não foi possível decodificar o arquivo')

        reader = csv.DictReader(StringIO(content))
        rows = []
        try:
            for raw in reader:
                row = {
                    key.strip().lower(): (value or '').strip()
                    for key, value in raw.items()
                    if key is not None
                }
                if any(row.values()):  # pula linhas vazias
                    rows.append(row)
        except csv.Error as e:
            raise ImportFailed(f'CSV malformado (linha {reader.line_num})') from e
        return rows

    @staticmethod
    def parse_number(value):
        """Converte texto em float; vazio vira 0"""
        if value is None or value == '':
            return 0.0
        if ',' in value and '.' not in value:
            value = value.replace(',', '.')
        return float(value)

    @staticmethod
    def parse_date(value):
        if not value:
            return None
        for fmt in ImportService.DATE_FORMATS:
            try:
                return datetime.strptime(value, fmt).date()
            except ValueError:
                continue
        raise ValueError(f'data inválida: {value}')

    @staticmethod
    def map_rows(entity, rows):
        """
        Aplica o mapeamento da entidade às linhas do CSV

        Returns:
            lista de dicionários prontos para o modelo
        """
        template = ImportService.TEMPLATES.get(entity)
        if not template:
            raise ImportFailed(f'Tipo de importação desconhecido: {entity}')

        aliases = template['aliases']
        numeric_fields = template['numeric_fields']
        date_fields = template['date_fields']
        records = []

        for line, row in enumerate(rows, start=2):  # linha 1 é o cabeçalho
            record = {}
            for header, value in row.items():
                field = aliases.get(header)
                if field is None:
                    continue
                record[field] = value or None

            try:
                for field in numeric_fields:
                    record[field] = ImportService.parse_number(record.get(field))
                for field in date_fields:
                    record[field] = ImportService.parse_date(record.get(field))
            except ValueError as e:
                raise ImportFailed(f'Linha {line}: {e}', payload={'row': line}) from e

            if entity == 'transacoes' and record.get('tipo'):
                tipo = record['tipo'].lower()
                record['tipo'] = ImportService.TIPO_VALUES.get(tipo, tipo)

            records.append(record)

        return records

    @staticmethod
    def import_csv(entity, file):
        """
        Processa o arquivo enviado e grava tudo num único lote

        Returns:
            quantidade de registros inseridos
        """
        filename = secure_filename(file.filename or '')
        if not ImportService.allowed_file(filename):
            raise ImportFailed(f'Tipo de arquivo não suportado: {filename}')

        service = ImportService.SERVICES.get(entity)
        if service is None:
            raise ImportFailed(f'Tipo de importação desconhecido: {entity}')

        encodings = current_app.config.get('CSV_ENCODINGS', ('utf-8-sig', 'latin-1'))
        rows = ImportService.parse_csv(file.read(), encodings)
        if not rows:
            raise ImportFailed('Arquivo vazio ou sem linhas de dados')

        records = ImportService.map_rows(entity, rows)
        try:
            inserted = service.bulk_insert(records)
        except (SQLAlchemyError, DiscrepometroException) as e:
            raise ImportFailed(f'Falha ao gravar o lote de {entity}') from e

        current_app.logger.info(f'Importação de {entity}: {len(inserted)} registros ({filename})')
        return len(inserted)

    @staticmethod
    def template_csv(entity):
        """Gera o CSV modelo (cabeçalho + linha de exemplo)"""
        template = ImportService.TEMPLATES.get(entity)
        if not template:
            return None

        fieldnames = list(template['sample_data'][0].keys())
        output = StringIO()
        writer = csv.DictWriter(output, fieldnames=fieldnames)
        writer.writeheader()
        for sample in template['sample_data']:
            writer.writerow(sample)
        return output.getvalue()
