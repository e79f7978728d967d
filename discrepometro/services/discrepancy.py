"""
Cálculo de discrepância de estoque

estoque_final_calculado = estoque_inicial + total_entradas - total_saidas

A comparação com o estoque final registrado é exata (aritmética de ponto
flutuante nativa, sem tolerância).
"""
from collections import Counter


def compute_final_stock(initial, inflows, outflows):
    """Estoque final calculado: inicial + entradas - saídas"""
    return initial + inflows - outflows


def has_discrepancy(initial, inflows, outflows, recorded_final):
    """True se o estoque final registrado difere do calculado (igualdade exata)"""
    return compute_final_stock(initial, inflows, outflows) != recorded_final


def summarize(analyses):
    """
    Resumo para o painel e o relatório de discrepâncias

    :param analyses: iterável de AnaliseDiscrepancia
    :return: {'total': int, 'com_discrepancia': int, 'por_tipo': {tipo: int}}
    """
    total = 0
    anomalous = 0
    by_type = Counter()
    for analise in analyses:
        total += 1
        if analise.tem_discrepancia:
            anomalous += 1
        by_type[analise.tipo_discrepancia or 'Não classificado'] += 1
    return {
        'total': total,
        'com_discrepancia': anomalous,
        'por_tipo': dict(by_type),
    }
