from discrepometro.extensions import db
from discrepometro.services.discrepancy import compute_final_stock, has_discrepancy
from .base import BaseModel


class AnaliseDiscrepancia(BaseModel):
    """
    Análise de discrepância (registro de conciliação)
    Compara o estoque final registrado com o calculado:
    estoque_inicial_2021 + total_entradas - total_saidas
    """
    __tablename__ = 'analise_discrepancia'

    TIPO_COMPRA_SEM_NOTA = 'Compra sem Nota'
    TIPO_VENDA_SEM_NOTA = 'Venda sem Nota'
    TIPO_SEM_DISCREPANCIA = 'Sem Discrepância'
    TIPOS = [TIPO_COMPRA_SEM_NOTA, TIPO_VENDA_SEM_NOTA, TIPO_SEM_DISCREPANCIA]

    FONTES = [
        'EFD',
        'Planilha Emitente',
        'Planilha Destinatário',
        'Inventário Fev/21',
        'Inventário Fev/22',
    ]

    empresa_id = db.Column(db.String(36), db.ForeignKey('empresas.id'), index=True)
    produto = db.Column(db.String(255), nullable=False, index=True)
    codigo_produto = db.Column(db.String(64))

    estoque_inicial_2021 = db.Column(db.Float, nullable=False, default=0.0)
    estoque_final_2021 = db.Column(db.Float, nullable=False, default=0.0)
    total_entradas = db.Column(db.Float, nullable=False, default=0.0)
    total_saidas = db.Column(db.Float, nullable=False, default=0.0)

    tipo_discrepancia = db.Column(db.String(32), index=True)
    fonte = db.Column(db.String(32), index=True)

    @property
    def estoque_final_calculado(self):
        return compute_final_stock(
            self.estoque_inicial_2021 or 0.0,
            self.total_entradas or 0.0,
            self.total_saidas or 0.0,
        )

    @property
    def tem_discrepancia(self):
        return has_discrepancy(
            self.estoque_inicial_2021 or 0.0,
            self.total_entradas or 0.0,
            self.total_saidas or 0.0,
            self.estoque_final_2021 or 0.0,
        )
