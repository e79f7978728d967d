from flask import Blueprint

# url_prefix é definido no registro (discrepometro/__init__.py)
analise_bp = Blueprint('analise', __name__)

from . import routes
