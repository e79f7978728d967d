"""Auxiliares compartilhados pelos formulários de cadastro"""
from discrepometro.models import Empresa


def form_data(form, fields):
    """
    Extrai os campos do formulário para o serviço de dados
    Strings vazias viram None (campos opcionais e selects sem escolha).
    """
    data = {}
    for name in fields:
        value = getattr(form, name).data
        if isinstance(value, str):
            value = value.strip() or None
        data[name] = value
    return data


def empresa_choices(blank_label='Nenhuma'):
    """Opções do select de empresa"""
    empresas = Empresa.query.order_by(Empresa.nome.asc()).all()
    return [('', blank_label)] + [(e.id, e.nome) for e in empresas]
