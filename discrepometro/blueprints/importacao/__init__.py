from flask import Blueprint

# url_prefix é definido no registro (discrepometro/__init__.py)
importacao_bp = Blueprint('importacao', __name__)

from . import routes
