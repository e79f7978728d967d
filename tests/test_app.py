"""Fábrica da aplicação, painel, páginas de erro e comandos."""

from discrepometro.models import AnaliseDiscrepancia, Empresa


def test_testing_config(app):
    assert app.config['TESTING'] is True
    assert app.config['WTF_CSRF_ENABLED'] is False


def test_dashboard(client, make_empresa, make_analise):
    make_empresa()
    make_analise(estoque_final_2021=130)
    resp = client.get('/')
    assert resp.status_code == 200
    assert 'Bem-vindo ao Discrepômetro' in resp.get_data(as_text=True)


def test_not_found(client):
    resp = client.get('/nao-existe')
    assert resp.status_code == 404
    assert 'Página não encontrada.' in resp.get_data(as_text=True)


def test_template_filters(app):
    numero = app.jinja_env.filters['numero']
    assert numero(120.0) == '120'
    assert numero(12.5) == '12.5'
    assert numero(None) == ''


def test_status_command(app, make_empresa):
    make_empresa()
    result = app.test_cli_runner().invoke(args=['status'])
    assert 'Empresas' in result.output
    assert '1' in result.output


def test_seed_command(app):
    result = app.test_cli_runner().invoke(args=['seed'])
    assert result.exit_code == 0
    assert Empresa.query.count() == 5
    assert AnaliseDiscrepancia.query.count() == 40
