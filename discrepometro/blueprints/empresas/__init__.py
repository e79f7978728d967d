from flask import Blueprint

# url_prefix é definido no registro (discrepometro/__init__.py)
empresas_bp = Blueprint('empresas', __name__)

from . import routes
