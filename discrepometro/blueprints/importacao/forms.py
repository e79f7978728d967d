from flask_wtf import FlaskForm
from flask_wtf.file import FileField, FileRequired, FileAllowed
from wtforms import SelectField, SubmitField
from wtforms.validators import DataRequired
from discrepometro.services.import_service import ImportService


class ImportForm(FlaskForm):
    """Envio de CSV"""
    entidade = SelectField('Importar para', choices=[
        (key, template['name']) for key, template in ImportService.TEMPLATES.items()
    ], validators=[DataRequired()])
    arquivo = FileField('Arquivo CSV', validators=[
        FileRequired(message='Selecione um arquivo'),
        FileAllowed(['csv'], message='Apenas arquivos .csv')
    ])
    submit = SubmitField('Importar')
