from flask_wtf import FlaskForm
from wtforms import StringField, FloatField, DateField, SelectField, SubmitField
from wtforms.validators import DataRequired, InputRequired, NumberRange, Length, Optional
from discrepometro.utils.validators import validate_non_negative


class TransacaoForm(FlaskForm):
    """Cadastro de transação (entrada/saída)"""
    FIELDS = (
        'produto', 'codigo_produto', 'nome_produto', 'quantidade', 'valor', 'data',
        'tipo', 'cfop', 'empresa_id', 'estoque_inicial_2021', 'estoque_final_2021',
        'total_entradas', 'total_saidas'
    )

    produto = StringField('Produto', validators=[DataRequired(message='Produto é obrigatório'), Length(max=255)])
    codigo_produto = StringField('Código do produto', validators=[Optional(), Length(max=64)])
    nome_produto = StringField('Nome do produto', validators=[Optional(), Length(max=255)])
    quantidade = FloatField('Quantidade', validators=[
        InputRequired(message='Informe a quantidade'),
        NumberRange(min=0.01, message='A quantidade deve ser maior que zero')
    ])
    valor = FloatField('Valor (R$)', validators=[
        InputRequired(message='Informe o valor'),
        NumberRange(min=0.01, message='O valor deve ser maior que zero')
    ])
    data = DateField('Data', validators=[DataRequired(message='Data é obrigatória')])
    tipo = SelectField('Tipo', choices=[
        ('entrada', 'Entrada'),
        ('saida', 'Saída')
    ], validators=[DataRequired(message='Selecione o tipo de transação')])
    cfop = StringField('CFOP', validators=[DataRequired(message='CFOP é obrigatório'), Length(max=16)])
    empresa_id = SelectField('Empresa', choices=[], validators=[Optional()])

    # Referências de 2021 (opcionais)
    estoque_inicial_2021 = FloatField('Estoque inicial 2021', validators=[Optional(), validate_non_negative])
    estoque_final_2021 = FloatField('Estoque final 2021', validators=[Optional(), validate_non_negative])
    total_entradas = FloatField('Total de entradas', validators=[Optional(), validate_non_negative])
    total_saidas = FloatField('Total de saídas', validators=[Optional(), validate_non_negative])

    submit = SubmitField('Salvar')


class TransacaoFilterForm(FlaskForm):
    """Filtro da listagem (GET)"""
    tipo = SelectField('Tipo', choices=[
        ('', 'Todos'),
        ('entrada', 'Entrada'),
        ('saida', 'Saída')
    ], validators=[Optional()], default='')
