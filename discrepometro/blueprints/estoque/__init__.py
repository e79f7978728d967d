from flask import Blueprint

# url_prefix é definido no registro (discrepometro/__init__.py)
estoque_bp = Blueprint('estoque', __name__)

from . import routes
