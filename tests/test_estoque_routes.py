"""Telas de estoque."""

from discrepometro.models import Estoque


def test_empty_state(client):
    assert 'Nenhum registro de estoque cadastrado.' in client.get('/estoque/').get_data(as_text=True)


def test_create_accepts_zero(client):
    resp = client.post('/estoque/novo', data={
        'produto': 'Arruela', 'quantidade_final': '0', 'data_base': '2021-12-31', 'empresa_id': '',
    }, follow_redirects=True)
    assert 'Novo registro de estoque cadastrado com sucesso' in resp.get_data(as_text=True)
    assert Estoque.query.one().quantidade_final == 0


def test_negative_quantity_rejected(client):
    resp = client.post('/estoque/novo', data={
        'produto': 'Arruela', 'quantidade_final': '-5', 'data_base': '2021-12-31',
    })
    assert 'A quantidade não pode ser negativa' in resp.get_data(as_text=True)
    assert Estoque.query.count() == 0


def test_detail(client, make_estoque):
    estoque = make_estoque(produto='Chapa de Aço')
    html = client.get(f'/estoque/{estoque.id}').get_data(as_text=True)
    assert 'Chapa de Aço' in html
    assert '31/12/2021' in html


def test_delete(client, make_estoque):
    estoque = make_estoque()
    resp = client.post(f'/estoque/{estoque.id}/excluir', follow_redirects=True)
    assert 'O registro de estoque foi excluído com sucesso' in resp.get_data(as_text=True)
    assert Estoque.query.count() == 0


def test_delete_missing_flashes_error(client):
    resp = client.post('/estoque/nao-existe/excluir', follow_redirects=True)
    assert 'Não foi possível excluir o registro' in resp.get_data(as_text=True)
