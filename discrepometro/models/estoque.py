from discrepometro.extensions import db
from .base import BaseModel


class Estoque(BaseModel):
    """Posição de estoque de um produto em uma data base"""
    __tablename__ = 'estoque'

    empresa_id = db.Column(db.String(36), db.ForeignKey('empresas.id'), index=True)
    produto = db.Column(db.String(255), nullable=False, index=True)
    quantidade_final = db.Column(db.Float, default=0.0)
    data_base = db.Column(db.Date)

    estoque_inicial_2021 = db.Column(db.Float)
    estoque_final_2021 = db.Column(db.Float)
