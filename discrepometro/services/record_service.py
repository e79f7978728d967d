"""
Camada de acesso a dados

Cada operação é repassada diretamente ao banco: sem cache, sem nova
tentativa e sem controle de concorrência otimista. Erros do banco sobem
inalterados para quem chamou (após o rollback da sessão).
"""
from sqlalchemy.exc import SQLAlchemyError
from discrepometro.extensions import db
from discrepometro.exceptions import RecordNotFound, ValidationError
from discrepometro.models import Empresa, Transacao, Estoque, AnaliseDiscrepancia


class RecordService:
    """CRUD genérico de um modelo: list / get / create / update / delete"""

    def __init__(self, model):
        self.model = model

    def list(self):
        """Todos os registros, mais recentes primeiro"""
        return self.model.query.order_by(self.model.created_at.desc()).all()

    def filter(self, **filters):
        """Consulta filtrada por igualdade de coluna (filtros vazios são ignorados)"""
        query = self.model.query
        for field, value in filters.items():
            if value is None or value == '':
                continue
            query = query.filter(self._column(field) == value)
        return query

    def paginate(self, page=1, per_page=20, **filters):
        return self.filter(**filters).order_by(self.model.created_at.desc()).paginate(
            page=page, per_page=per_page, error_out=False
        )

    def count(self):
        return self.model.query.count()

    def get(self, record_id):
        record = db.session.get(self.model, record_id)
        if record is None:
            raise RecordNotFound(f'{self.model.__name__} {record_id} não encontrado')
        return record

    def create(self, fields):
        record = self.model(**self._clean(fields))
        db.session.add(record)
        self._commit()
        return record

    def update(self, record_id, fields):
        """Atualização parcial: apenas os campos informados são alterados"""
        record = self.get(record_id)
        for name, value in self._clean(fields).items():
            setattr(record, name, value)
        self._commit()
        return record

    def delete(self, record_id):
        record = self.get(record_id)
        db.session.delete(record)
        self._commit()

    def bulk_insert(self, rows):
        """
        Inserção em lote numa única transação
        Se qualquer linha falhar, nenhuma é gravada.
        :return: registros inseridos
        """
        records = [self.model(**self._clean(row)) for row in rows]
        db.session.add_all(records)
        self._commit()
        return records

    def _column(self, field):
        if field not in self.model.__table__.columns:
            raise ValidationError(f'Campo desconhecido: {field}')
        return getattr(self.model, field)

    def _clean(self, fields):
        allowed = set(self.model.field_names())
        unknown = set(fields) - allowed
        if unknown:
            raise ValidationError(
                f'Campos desconhecidos para {self.model.__name__}: {", ".join(sorted(unknown))}'
            )
        return dict(fields)

    @staticmethod
    def _commit():
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise


# Instâncias por entidade
empresa_service = RecordService(Empresa)
transacao_service = RecordService(Transacao)
estoque_service = RecordService(Estoque)
analise_service = RecordService(AnaliseDiscrepancia)
