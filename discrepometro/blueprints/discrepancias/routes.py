from datetime import datetime, time, timedelta
from flask import render_template, request, current_app
from sqlalchemy.exc import SQLAlchemyError

from . import discrepancias_bp
from .forms import DiscrepanciaFilterForm
from discrepometro.models import AnaliseDiscrepancia
from discrepometro.services.discrepancy import summarize


@discrepancias_bp.route('/')
def index():
    """
    Relatório de discrepâncias
    Apenas as análises cujo estoque final registrado difere do calculado.
    """
    form = DiscrepanciaFilterForm(request.args, meta={'csrf': False})
    form.validate()  # datas inválidas ficam None e não filtram

    query = AnaliseDiscrepancia.query
    if form.data_inicio.data:
        query = query.filter(AnaliseDiscrepancia.created_at >= datetime.combine(form.data_inicio.data, time.min))
    if form.data_fim.data:
        fim = datetime.combine(form.data_fim.data + timedelta(days=1), time.min)
        query = query.filter(AnaliseDiscrepancia.created_at < fim)
    if form.tipo.data:
        query = query.filter(AnaliseDiscrepancia.tipo_discrepancia == form.tipo.data)

    try:
        analises = query.order_by(AnaliseDiscrepancia.created_at.desc()).all()
    except SQLAlchemyError:
        current_app.logger.exception('Erro ao carregar discrepâncias')
        return render_template('discrepancias/index.html', form=form, discrepancias=[],
                               resumo=None, load_error=True)

    discrepancias = [a for a in analises if a.tem_discrepancia]
    return render_template('discrepancias/index.html', form=form,
                           discrepancias=discrepancias, resumo=summarize(analises))
