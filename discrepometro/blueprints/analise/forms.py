from flask_wtf import FlaskForm
from wtforms import StringField, FloatField, SelectField, SubmitField
from wtforms.validators import DataRequired, InputRequired, Length, Optional
from discrepometro.models import AnaliseDiscrepancia


TIPO_CHOICES = [(t, t) for t in AnaliseDiscrepancia.TIPOS]
FONTE_CHOICES = [(f, f) for f in AnaliseDiscrepancia.FONTES]


class AnaliseDiscrepanciaForm(FlaskForm):
    """Análise de discrepância"""
    FIELDS = (
        'produto', 'codigo_produto', 'estoque_inicial_2021', 'estoque_final_2021',
        'total_entradas', 'total_saidas', 'tipo_discrepancia', 'fonte', 'empresa_id'
    )

    produto = StringField('Produto', validators=[DataRequired(message='Produto é obrigatório'), Length(max=255)])
    codigo_produto = StringField('Código do produto', validators=[Optional(), Length(max=64)])

    # 0 é um valor válido, por isso InputRequired e não DataRequired
    estoque_inicial_2021 = FloatField('Estoque inicial 2021', default=0,
                                      validators=[InputRequired(message='Informe o estoque inicial')])
    estoque_final_2021 = FloatField('Estoque final 2021', default=0,
                                    validators=[InputRequired(message='Informe o estoque final')])
    total_entradas = FloatField('Total de entradas', default=0,
                                validators=[InputRequired(message='Informe o total de entradas')])
    total_saidas = FloatField('Total de saídas', default=0,
                              validators=[InputRequired(message='Informe o total de saídas')])

    tipo_discrepancia = SelectField('Tipo de discrepância', choices=[('', 'Não classificado')] + TIPO_CHOICES,
                                    validators=[Optional()], default='')
    fonte = SelectField('Fonte', choices=[('', 'N/A')] + FONTE_CHOICES,
                        validators=[Optional()], default='')
    empresa_id = SelectField('Empresa', choices=[], validators=[Optional()])
    submit = SubmitField('Salvar')


class AnaliseFilterForm(FlaskForm):
    """Filtros da listagem (GET)"""
    tipo = SelectField('Tipo de discrepância', choices=[('', 'Todos')] + TIPO_CHOICES, default='')
    fonte = SelectField('Fonte', choices=[('', 'Todas')] + FONTE_CHOICES, default='')
