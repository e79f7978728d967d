from flask import Blueprint

# url_prefix é definido no registro (discrepometro/__init__.py)
discrepancias_bp = Blueprint('discrepancias', __name__)

from . import routes
