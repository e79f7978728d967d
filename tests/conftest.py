"""Fixtures compartilhadas: app de teste, cliente e fábricas de registros."""

from datetime import date

import pytest

from discrepometro import create_app
from discrepometro.extensions import db
from discrepometro.models import AnaliseDiscrepancia, Empresa, Estoque, Transacao


@pytest.fixture
def app():
    """App com a configuração de teste (SQLite em memória, CSRF desligado)."""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_empresa(app):
    def _make(nome='Acme LTDA', cnpj='12345678000199'):
        empresa = Empresa(nome=nome, cnpj=cnpj)
        empresa.save()
        return empresa
    return _make


@pytest.fixture
def make_transacao(app):
    def _make(**fields):
        values = {
            'produto': 'Parafuso 10mm',
            'quantidade': 100,
            'valor': 150.0,
            'data': date(2021, 3, 15),
            'tipo': Transacao.TIPO_ENTRADA,
            'cfop': '1102',
        }
        values.update(fields)
        transacao = Transacao(**values)
        transacao.save()
        return transacao
    return _make


@pytest.fixture
def make_estoque(app):
    def _make(**fields):
        values = {'produto': 'Parafuso 10mm', 'quantidade_final': 250, 'data_base': date(2021, 12, 31)}
        values.update(fields)
        estoque = Estoque(**values)
        estoque.save()
        return estoque
    return _make


@pytest.fixture
def make_analise(app):
    def _make(**fields):
        values = {
            'produto': 'Parafuso 10mm',
            'estoque_inicial_2021': 100,
            'total_entradas': 50,
            'total_saidas': 30,
            'estoque_final_2021': 120,
        }
        values.update(fields)
        analise = AnaliseDiscrepancia(**values)
        analise.save()
        return analise
    return _make
