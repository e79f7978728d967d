import uuid
from datetime import date, datetime
from discrepometro.extensions import db


def generate_id():
    return str(uuid.uuid4())


class BaseModel(db.Model):
    """
    Classe base dos modelos do Discrepômetro
    Inclui: ID (UUID), datas de criação e atualização e serialização
    """
    __abstract__ = True

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def save(self):
        """Grava no banco"""
        db.session.add(self)
        db.session.commit()

    @classmethod
    def field_names(cls):
        """Colunas editáveis pelo usuário (exclui id e carimbos de tempo)"""
        return [c.name for c in cls.__table__.columns
                if c.name not in ('id', 'created_at', 'updated_at')]

    def to_dict(self):
        """
        Serialização genérica: converte o modelo em dicionário.
        Datas viram strings ISO; colunas iniciadas por '_' são ignoradas.
        """
        data = {}
        for c in self.__table__.columns:
            if c.name.startswith('_'):
                continue
            val = getattr(self, c.name)
            if isinstance(val, (datetime, date)):
                data[c.name] = val.isoformat()
            else:
                data[c.name] = val
        return data
