from flask import render_template, current_app
from sqlalchemy.exc import SQLAlchemyError

from . import main_bp
from discrepometro.services.discrepancy import summarize
from discrepometro.services.record_service import (
    empresa_service, transacao_service, estoque_service, analise_service
)


@main_bp.route('/')
def index():
    """Painel inicial: totais por cadastro e situação das análises"""
    try:
        kpi = {
            'empresas': empresa_service.count(),
            'transacoes': transacao_service.count(),
            'estoque': estoque_service.count(),
        }
        resumo = summarize(analise_service.list())
    except SQLAlchemyError:
        current_app.logger.exception('Erro ao carregar o painel')
        return render_template('main/index.html', kpi=None, resumo=None, load_error=True)

    return render_template('main/index.html', kpi=kpi, resumo=resumo)
