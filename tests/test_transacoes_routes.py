"""Telas de transações."""

from datetime import date

from discrepometro.extensions import db
from discrepometro.models import Transacao


def form_data(**overrides):
    data = {
        'produto': 'Parafuso 10mm',
        'quantidade': '100',
        'valor': '150.00',
        'data': '2021-03-15',
        'tipo': 'entrada',
        'cfop': '1102',
        'empresa_id': '',
    }
    data.update(overrides)
    return data


def test_empty_state(client):
    assert 'Nenhuma transação cadastrada.' in client.get('/transacoes/').get_data(as_text=True)


def test_create(client):
    resp = client.post('/transacoes/novo', data=form_data(), follow_redirects=True)
    assert 'Nova transação registrada com sucesso' in resp.get_data(as_text=True)
    transacao = Transacao.query.one()
    assert transacao.data == date(2021, 3, 15)
    assert transacao.empresa_id is None
    assert transacao.estoque_inicial_2021 is None


def test_create_linked_to_empresa(client, make_empresa):
    empresa = make_empresa()
    client.post('/transacoes/novo', data=form_data(empresa_id=empresa.id))
    assert Transacao.query.one().empresa_id == empresa.id


def test_quantity_must_be_positive(client):
    resp = client.post('/transacoes/novo', data=form_data(quantidade='0'))
    assert 'A quantidade deve ser maior que zero' in resp.get_data(as_text=True)
    assert Transacao.query.count() == 0


def test_cfop_required(client):
    resp = client.post('/transacoes/novo', data=form_data(cfop=''))
    assert 'CFOP é obrigatório' in resp.get_data(as_text=True)


def test_negative_reference_rejected(client):
    resp = client.post('/transacoes/novo', data=form_data(total_saidas='-1'))
    assert 'O valor não pode ser negativo' in resp.get_data(as_text=True)
    assert Transacao.query.count() == 0


def test_filter_by_tipo(client, make_transacao):
    make_transacao(produto='Entrou')
    make_transacao(produto='Saiu', tipo='saida', cfop='5102')
    html = client.get('/transacoes/?tipo=saida').get_data(as_text=True)
    assert 'Saiu' in html
    assert 'Entrou' not in html


def test_edit(client, make_transacao):
    transacao = make_transacao()
    resp = client.post(f'/transacoes/{transacao.id}/editar',
                       data=form_data(produto='Parafuso 12mm'), follow_redirects=True)
    assert 'Dados da transação atualizados com sucesso' in resp.get_data(as_text=True)
    assert db.session.get(Transacao, transacao.id).produto == 'Parafuso 12mm'


def test_delete(client, make_transacao):
    transacao = make_transacao()
    client.post(f'/transacoes/{transacao.id}/excluir')
    assert Transacao.query.count() == 0


def test_delete_missing_flashes_error(client):
    resp = client.post('/transacoes/nao-existe/excluir', follow_redirects=True)
    assert 'Não foi possível excluir a transação' in resp.get_data(as_text=True)
