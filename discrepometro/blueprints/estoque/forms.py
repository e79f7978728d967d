from flask_wtf import FlaskForm
from wtforms import StringField, FloatField, DateField, SelectField, SubmitField
from wtforms.validators import DataRequired, InputRequired, NumberRange, Length, Optional
from discrepometro.utils.validators import validate_non_negative


class EstoqueForm(FlaskForm):
    """Posição de estoque"""
    FIELDS = (
        'produto', 'quantidade_final', 'data_base', 'empresa_id',
        'estoque_inicial_2021', 'estoque_final_2021'
    )

    produto = StringField('Produto', validators=[DataRequired(message='Produto é obrigatório'), Length(max=255)])
    quantidade_final = FloatField('Quantidade final', validators=[
        InputRequired(message='Informe a quantidade'),
        NumberRange(min=0, message='A quantidade não pode ser negativa')
    ])
    data_base = DateField('Data base', validators=[DataRequired(message='Data base é obrigatória')])
    empresa_id = SelectField('Empresa', choices=[], validators=[Optional()])
    estoque_inicial_2021 = FloatField('Estoque inicial 2021', validators=[Optional(), validate_non_negative])
    estoque_final_2021 = FloatField('Estoque final 2021', validators=[Optional(), validate_non_negative])
    submit = SubmitField('Salvar')
