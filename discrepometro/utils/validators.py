"""
Validadores de formulário
"""
from wtforms.validators import ValidationError


def validate_non_negative(form, field):
    """Valor não pode ser negativo"""
    if field.data is not None and field.data < 0:
        raise ValidationError('O valor não pode ser negativo')
