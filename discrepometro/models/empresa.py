from discrepometro.extensions import db
from .base import BaseModel


class Empresa(BaseModel):
    """Empresa (entidade jurídica dona dos estoques e transações)"""
    __tablename__ = 'empresas'

    nome = db.Column(db.String(255), nullable=False, index=True)
    cnpj = db.Column(db.String(32), nullable=False)

    # Sem cascata no cliente: a integridade referencial fica a cargo do banco
    transacoes = db.relationship('Transacao', backref='empresa', lazy='dynamic', passive_deletes=True)
    estoques = db.relationship('Estoque', backref='empresa', lazy='dynamic', passive_deletes=True)
    analises = db.relationship('AnaliseDiscrepancia', backref='empresa', lazy='dynamic', passive_deletes=True)

    def __repr__(self):
        return f'<Empresa {self.nome}>'
