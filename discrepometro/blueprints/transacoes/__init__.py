from flask import Blueprint

# url_prefix é definido no registro (discrepometro/__init__.py)
transacoes_bp = Blueprint('transacoes', __name__)

from . import routes
