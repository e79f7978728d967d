"""Telas de análise de discrepâncias e exportação."""

import io

import openpyxl

from discrepometro.extensions import db
from discrepometro.models import AnaliseDiscrepancia


def form_data(**overrides):
    data = {
        'produto': 'Parafuso 10mm',
        'codigo_produto': 'P-10',
        'estoque_inicial_2021': '100',
        'total_entradas': '50',
        'total_saidas': '30',
        'estoque_final_2021': '120',
        'tipo_discrepancia': '',
        'fonte': 'EFD',
        'empresa_id': '',
    }
    data.update(overrides)
    return data


def test_empty_state(client):
    html = client.get('/analise/').get_data(as_text=True)
    assert 'Nenhuma análise de discrepância cadastrada.' in html


def test_create(client):
    resp = client.post('/analise/novo', data=form_data(), follow_redirects=True)
    assert 'Nova análise cadastrada com sucesso' in resp.get_data(as_text=True)
    analise = AnaliseDiscrepancia.query.one()
    assert analise.tipo_discrepancia is None
    assert analise.fonte == 'EFD'
    assert analise.tem_discrepancia is False


def test_zero_is_accepted(client):
    client.post('/analise/novo', data=form_data(
        estoque_inicial_2021='0', total_entradas='0', total_saidas='0', estoque_final_2021='0'))
    assert AnaliseDiscrepancia.query.one().estoque_final_calculado == 0


def test_figures_are_required(client):
    resp = client.post('/analise/novo', data=form_data(total_entradas=''))
    assert 'Informe o total de entradas' in resp.get_data(as_text=True)
    assert AnaliseDiscrepancia.query.count() == 0


def test_rejects_unknown_tipo(client):
    client.post('/analise/novo', data=form_data(tipo_discrepancia='Roubo'))
    assert AnaliseDiscrepancia.query.count() == 0


def test_anomalous_row_is_highlighted(client, make_analise):
    make_analise(produto='Sobra', estoque_final_2021=130)
    html = client.get('/analise/').get_data(as_text=True)
    assert 'table-danger' in html


def test_filter_by_fonte(client, make_analise):
    make_analise(produto='Da EFD', fonte='EFD')
    make_analise(produto='Da planilha', fonte='Planilha Emitente')
    html = client.get('/analise/?fonte=EFD').get_data(as_text=True)
    assert 'Da EFD' in html
    assert 'Da planilha' not in html


def test_edit_recomputes(client, make_analise):
    analise = make_analise()
    client.post(f'/analise/{analise.id}/editar', data=form_data(
        estoque_final_2021='125', tipo_discrepancia='Compra sem Nota'))
    atualizada = db.session.get(AnaliseDiscrepancia, analise.id)
    assert atualizada.tem_discrepancia is True
    assert atualizada.tipo_discrepancia == 'Compra sem Nota'


def test_detail_shows_calculated_stock(client, make_analise):
    analise = make_analise(estoque_final_2021=100)
    html = client.get(f'/analise/{analise.id}').get_data(as_text=True)
    assert 'difere do calculado' in html


def test_delete(client, make_analise):
    analise = make_analise()
    resp = client.post(f'/analise/{analise.id}/excluir', follow_redirects=True)
    assert 'A análise de discrepância foi excluída com sucesso' in resp.get_data(as_text=True)
    assert AnaliseDiscrepancia.query.count() == 0


def test_delete_missing_flashes_error(client):
    resp = client.post('/analise/nao-existe/excluir', follow_redirects=True)
    assert 'Não foi possível excluir o registro' in resp.get_data(as_text=True)


class TestExport:

    def test_csv(self, client, make_analise):
        make_analise(produto='Parafuso', estoque_final_2021=130)
        resp = client.get('/analise/exportar/csv')
        assert resp.status_code == 200
        assert resp.mimetype == 'text/csv'
        body = resp.data.decode('utf-8')
        assert body.startswith('\ufeff')
        lines = body.lstrip('\ufeff').splitlines()
        assert lines[0].startswith('Produto,')
        assert 'Parafuso' in lines[1]
        assert 'Sim' in lines[1]

    def test_csv_respects_filters(self, client, make_analise):
        make_analise(produto='Da EFD', fonte='EFD')
        make_analise(produto='Da planilha', fonte='Planilha Emitente')
        body = client.get('/analise/exportar/csv?fonte=EFD').data.decode('utf-8')
        assert 'Da EFD' in body
        assert 'Da planilha' not in body

    def test_xlsx(self, client, make_analise):
        make_analise(produto='Parafuso')
        resp = client.get('/analise/exportar/xlsx')
        assert resp.status_code == 200
        ws = openpyxl.load_workbook(io.BytesIO(resp.data)).active
        assert ws.cell(row=3, column=1).value == 'Produto'
        assert ws.cell(row=4, column=1).value == 'Parafuso'

    def test_unsupported_format(self, client):
        resp = client.get('/analise/exportar/pdf', follow_redirects=True)
        assert 'Formato de exportação não suportado' in resp.get_data(as_text=True)


class TestListQueryString:

    def test_stray_fmt_argument(self, client, make_analise):
        make_analise(produto='Parafuso')
        resp = client.get('/analise/?fmt=csv')
        assert resp.status_code == 200
        assert 'Parafuso' in resp.get_data(as_text=True)

    def test_export_links_carry_filters(self, client):
        html = client.get('/analise/?fonte=EFD&fmt=pdf').get_data(as_text=True)
        assert '/analise/exportar/csv?fonte=EFD' in html
        assert '/analise/exportar/xlsx?fonte=EFD' in html

    def test_pagination_ignores_reserved_arguments(self, app, client, make_analise):
        app.config['ITEMS_PER_PAGE'] = 2
        for i in range(3):
            make_analise(produto=f'Produto {i}')
        resp = client.get('/analise/?endpoint=x&_external=1')
        assert resp.status_code == 200
        assert 'Próxima' in resp.get_data(as_text=True)
