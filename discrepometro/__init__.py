import logging
import colorlog
from flask import Flask, render_template, flash, redirect, url_for
from config import config
from discrepometro.extensions import db, migrate, csrf

from discrepometro import commands


def create_app(config_name='default'):
    """Fábrica da aplicação Discrepômetro"""
    app = Flask(__name__)

    # 1. Configuração
    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    # 2. Extensões
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # 3. Logs
    configure_logging(app)

    # 4. Blueprints
    register_blueprints(app)

    # 5. Erros globais
    register_error_handlers(app)

    # 6. Filtros de template
    register_template_filters(app)

    # 7. Comandos CLI
    register_commands(app)

    # 8. Criação automática das tabelas
    auto_init_database(app)

    return app


def auto_init_database(app):
    """Cria as tabelas ausentes (banco recém-provisionado)"""
    if not app.config.get('AUTO_CREATE_TABLES'):
        return
    with app.app_context():
        from discrepometro import models  # noqa: F401  registra as tabelas
        from sqlalchemy import inspect
        from sqlalchemy.exc import SQLAlchemyError
        try:
            tables = inspect(db.engine).get_table_names()
            if 'empresas' not in tables:
                app.logger.info('Primeira inicialização, criando tabelas...')
                db.create_all()
                app.logger.info('Tabelas criadas.')
        except SQLAlchemyError:
            app.logger.exception('Erro ao inicializar o banco de dados')


def register_blueprints(app):
    """Registra os módulos da aplicação"""
    # Painel inicial
    from discrepometro.blueprints.main import main_bp
    app.register_blueprint(main_bp)

    # Empresas
    from discrepometro.blueprints.empresas import empresas_bp
    app.register_blueprint(empresas_bp, url_prefix='/empresas')

    # Transações
    from discrepometro.blueprints.transacoes import transacoes_bp
    app.register_blueprint(transacoes_bp, url_prefix='/transacoes')

    # Estoque
    from discrepometro.blueprints.estoque import estoque_bp
    app.register_blueprint(estoque_bp, url_prefix='/estoque')

    # Análise de discrepâncias
    from discrepometro.blueprints.analise import analise_bp
    app.register_blueprint(analise_bp, url_prefix='/analise')

    # Relatório de discrepâncias
    from discrepometro.blueprints.discrepancias import discrepancias_bp
    app.register_blueprint(discrepancias_bp, url_prefix='/discrepancias')

    # Importação de CSV
    from discrepometro.blueprints.importacao import importacao_bp
    app.register_blueprint(importacao_bp, url_prefix='/importar')


def register_error_handlers(app):
    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('errors/404.html'), 404

    @app.errorhandler(413)
    def request_entity_too_large(e):
        # Upload acima de MAX_CONTENT_LENGTH
        app.logger.warning(f"Upload recusado: acima de {app.config['MAX_CONTENT_LENGTH']} bytes")
        flash('Ocorreu um erro ao importar o arquivo', 'danger')
        return redirect(url_for('importacao.index'))

    @app.errorhandler(500)
    def internal_server_error(e):
        return render_template('errors/500.html'), 500


def register_template_filters(app):
    @app.template_filter('data_br')
    def data_br(value):
        """Data no formato dd/mm/aaaa"""
        if not value:
            return ''
        return value.strftime('%d/%m/%Y')

    @app.template_filter('numero')
    def numero(value):
        """Número sem casas decimais desnecessárias"""
        if value is None:
            return ''
        if float(value).is_integer():
            return f'{int(value)}'
        return str(value)


def register_commands(app):
    """Registra os comandos do Flask CLI"""
    app.cli.add_command(commands.status)
    app.cli.add_command(commands.seed)


def configure_logging(app):
    """Log colorido no console em modo debug"""
    if app.debug:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)

        formatter = colorlog.ColoredFormatter(
            "%(log_color)s[%(asctime)s] %(levelname)-8s%(reset)s %(blue)s%(message)s",
            datefmt="%H:%M:%S",
            reset=True,
            log_colors={
                'DEBUG':    'cyan',
                'INFO':     'green',
                'WARNING':  'yellow',
                'ERROR':    'red',
                'CRITICAL': 'red,bg_white',
            },
            style='%'
        )
        handler.setFormatter(formatter)
        app.logger.addHandler(handler)
        app.logger.setLevel(logging.INFO)
