from flask_wtf import FlaskForm
from wtforms import DateField, SelectField
from wtforms.validators import Optional
from discrepometro.models import AnaliseDiscrepancia


class DiscrepanciaFilterForm(FlaskForm):
    """Filtro do relatório por período de registro e tipo"""
    data_inicio = DateField('Data início', validators=[Optional()])
    data_fim = DateField('Data fim', validators=[Optional()])
    tipo = SelectField('Tipo de discrepância',
                       choices=[('', 'Todos os tipos')] + [(t, t) for t in AnaliseDiscrepancia.TIPOS],
                       validators=[Optional()], default='')
