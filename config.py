import os
from dotenv import load_dotenv

# Carrega variáveis de ambiente do .env
load_dotenv()
basedir = os.path.abspath(os.path.dirname(__file__))


def _database_url(default):
    """Lê DATABASE_URL, corrigindo o esquema postgres:// usado pelos provedores hospedados."""
    url = os.environ.get('DATABASE_URL') or default
    if url and url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


class Config:
    """Configuração base"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'discrepometro-dev-key'

    # Banco de dados
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_RECORD_QUERIES = True

    # Upload de CSV
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # limite de 16MB por arquivo
    CSV_ENCODINGS = ('utf-8-sig', 'latin-1')

    # Listagens
    ITEMS_PER_PAGE = int(os.environ.get('ITEMS_PER_PAGE', 20))

    # Cria as tabelas ausentes na inicialização
    AUTO_CREATE_TABLES = os.environ.get('AUTO_CREATE_TABLES', 'false').lower() in ('1', 'true', 'yes')

    INSTANCE_FOLDER = os.path.join(basedir, 'instance')

    @staticmethod
    def init_app(app):
        # O SQLite local vive em instance/
        if not os.path.exists(Config.INSTANCE_FOLDER):
            os.makedirs(Config.INSTANCE_FOLDER)


class DevelopmentConfig(Config):
    """Ambiente de desenvolvimento"""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = _database_url(
        'sqlite:///' + os.path.join(basedir, 'instance', 'discrepometro.db'))
    AUTO_CREATE_TABLES = True


class ProductionConfig(Config):
    """Ambiente de produção (banco hospedado via DATABASE_URL)"""
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = _database_url(
        'sqlite:///' + os.path.join(basedir, 'instance', 'discrepometro_prod.db'))
    AUTO_CREATE_TABLES = True

    # Segurança de sessão
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    WTF_CSRF_ENABLED = False
    AUTO_CREATE_TABLES = False


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
