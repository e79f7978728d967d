from flask import Blueprint

# url_prefix é definido no registro (discrepometro/__init__.py)
main_bp = Blueprint('main', __name__)

from . import routes
