from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_wtf.csrf import CSRFProtect

# Extensões inicializadas sem app (ligadas em create_app)
db = SQLAlchemy()
migrate = Migrate()
csrf = CSRFProtect()
