from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, Length


class EmpresaForm(FlaskForm):
    """Cadastro de empresa"""
    FIELDS = ('nome', 'cnpj')

    nome = StringField('Nome', validators=[
        DataRequired(message='Nome é obrigatório'),
        Length(max=255)
    ])
    cnpj = StringField('CNPJ', validators=[
        DataRequired(message='CNPJ é obrigatório'),
        Length(min=14, max=32, message='CNPJ deve ter pelo menos 14 caracteres')
    ], render_kw={"placeholder": "00.000.000/0000-00"})
    submit = SubmitField('Salvar')
