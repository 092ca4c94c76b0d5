"""
Resumo das comissões a partir das vendas gravadas.

A comissão de cada venda já está em Venda.comissao_valor (comissoes.calculos);
aqui só se agrupa por representante e mês.
"""

from django.db.models import Count, Sum
from django.db.models.functions import TruncMonth

from vendas.services import filtrar_vendas


def vendas_comissionadas(user, representante_id=None, status='', data_inicio=None, data_fim=None):
    """ Vendas visíveis ao utilizador; sem filtro de status, as canceladas ficam de fora. """
    vendas = filtrar_vendas(
        user,
        status=status,
        representante_id=representante_id,
        data_inicio=data_inicio,
        data_fim=data_fim,
    )
    if not status:
        vendas = vendas.exclude(status='cancelada')
    return vendas


def resumo_comissoes(user, **filtros):
    vendas = vendas_comissionadas(user, **filtros)

    linhas = (
        vendas.order_by()
        .annotate(mes=TruncMonth('data_venda'))
        .values('representante_id', 'representante__username', 'mes')
        .annotate(
            quantidade_vendas=Count('id'),
            total_vendas=Sum('valor_total'),
            total_comissao=Sum('comissao_valor'),
        )
        .order_by('-mes', 'representante__username')
    )
    resultados = [
        {
            'representante_id': linha['representante_id'],
            'representante': linha['representante__username'],
            'periodo': linha['mes'].strftime('%Y-%m'),
            'quantidade_vendas': linha['quantidade_vendas'],
            'total_vendas': linha['total_vendas'],
            'total_comissao': linha['total_comissao'],
        }
        for linha in linhas
    ]

    totais = vendas.aggregate(
        quantidade_vendas=Count('id'),
        total_vendas=Sum('valor_total'),
        total_comissao=Sum('comissao_valor'),
    )
    totais['pendente'] = vendas.filter(status='pendente').aggregate(total=Sum('comissao_valor'))['total']
    for chave in ('total_vendas', 'total_comissao', 'pendente'):
        if totais[chave] is None:
            totais[chave] = 0
    return resultados, totais
