"""Camada de acesso a dados (RecordService)."""

import pytest
from sqlalchemy.exc import IntegrityError

from discrepometro.exceptions import RecordNotFound, ValidationError
from discrepometro.models import Empresa
from discrepometro.services.record_service import analise_service, empresa_service


class TestCrud:

    def test_create_assigns_uuid_and_timestamps(self, app):
        empresa = empresa_service.create({'nome': 'Acme', 'cnpj': '12345678000199'})
        assert len(empresa.id) == 36
        assert empresa.created_at is not None
        assert empresa_service.count() == 1

    def test_get(self, app, make_empresa):
        empresa = make_empresa()
        assert empresa_service.get(empresa.id).nome == 'Acme LTDA'

    def test_get_missing_raises(self, app):
        with pytest.raises(RecordNotFound):
            empresa_service.get('nao-existe')

    def test_update_is_partial(self, app, make_empresa):
        empresa = make_empresa()
        empresa_service.update(empresa.id, {'nome': 'Acme SA'})
        atualizada = empresa_service.get(empresa.id)
        assert atualizada.nome == 'Acme SA'
        assert atualizada.cnpj == '12345678000199'

    def test_delete(self, app, make_empresa):
        empresa = make_empresa()
        empresa_service.delete(empresa.id)
        assert empresa_service.count() == 0

    def test_delete_missing_raises(self, app):
        with pytest.raises(RecordNotFound):
            empresa_service.delete('nao-existe')

    def test_list_newest_first(self, app, make_empresa):
        make_empresa(nome='Primeira')
        make_empresa(nome='Segunda')
        nomes = [e.nome for e in empresa_service.list()]
        assert set(nomes) == {'Primeira', 'Segunda'}
        assert len(nomes) == 2


class TestValidation:

    def test_unknown_field_on_create(self, app):
        with pytest.raises(ValidationError) as exc:
            empresa_service.create({'nome': 'Acme', 'cnpj': '1', 'razao': 'x'})
        assert 'razao' in exc.value.message
        assert exc.value.code == 400

    def test_unknown_filter_column(self, app):
        with pytest.raises(ValidationError):
            analise_service.filter(inexistente='x')

    def test_missing_required_field_rolls_back(self, app):
        with pytest.raises(IntegrityError):
            empresa_service.create({'nome': 'Sem CNPJ'})
        assert empresa_service.count() == 0


class TestFilter:

    def test_blank_filters_are_ignored(self, app, make_analise):
        make_analise(fonte='EFD')
        make_analise(fonte='Planilha Emitente')
        assert analise_service.filter(fonte='').count() == 2
        assert analise_service.filter(fonte='EFD').count() == 1

    def test_paginate(self, app, make_analise):
        for i in range(5):
            make_analise(produto=f'Produto {i}')
        page = analise_service.paginate(page=2, per_page=2)
        assert page.total == 5
        assert len(page.items) == 2


class TestBulkInsert:

    def test_inserts_all_rows(self, app):
        inserted = empresa_service.bulk_insert([
            {'nome': 'A', 'cnpj': '11111111000111'},
            {'nome': 'B', 'cnpj': '22222222000122'},
        ])
        assert len(inserted) == 2
        assert Empresa.query.count() == 2

    def test_one_bad_row_discards_the_batch(self, app):
        with pytest.raises(IntegrityError):
            empresa_service.bulk_insert([
                {'nome': 'A', 'cnpj': '11111111000111'},
                {'nome': None, 'cnpj': '22222222000122'},
            ])
        assert Empresa.query.count() == 0

    def test_unknown_field_discards_the_batch(self, app):
        with pytest.raises(ValidationError):
            empresa_service.bulk_insert([
                {'nome': 'A', 'cnpj': '11111111000111'},
                {'nome': 'B', 'cnpj': '2', 'extra': 'x'},
            ])
        assert Empresa.query.count() == 0
