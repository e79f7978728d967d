from discrepometro.extensions import db
from .base import BaseModel


class Transacao(BaseModel):
    """
    Transação de estoque (uma movimentação de entrada ou saída de um produto)
    O CFOP é apenas registrado, sem interpretação de regra fiscal.
    """
    __tablename__ = 'transacoes'

    TIPO_ENTRADA = 'entrada'
    TIPO_SAIDA = 'saida'
    TIPOS = [TIPO_ENTRADA, TIPO_SAIDA]

    empresa_id = db.Column(db.String(36), db.ForeignKey('empresas.id'), index=True)
    produto = db.Column(db.String(255), nullable=False, index=True)
    codigo_produto = db.Column(db.String(64))
    nome_produto = db.Column(db.String(255))
    quantidade = db.Column(db.Float, default=0.0)
    valor = db.Column(db.Float, default=0.0)
    data = db.Column(db.Date)
    tipo = db.Column(db.String(16), index=True)  # entrada/saida
    cfop = db.Column(db.String(16))

    # Números de referência de 2021 (opcionais)
    estoque_inicial_2021 = db.Column(db.Float)
    estoque_final_2021 = db.Column(db.Float)
    total_entradas = db.Column(db.Float)
    total_saidas = db.Column(db.Float)
