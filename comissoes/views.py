import csv

import openpyxl
from openpyxl.utils import get_column_letter

from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse

from common.api import api_view

from . import services


def _filtros(request):
    """ Filtros comuns ao resumo e às exportações (lidos do GET). """
    return {
        'representante_id': request.GET.get('representante') or None,
        'status': request.GET.get('status', ''),
        'data_inicio': request.GET.get('data_inicio') or None,
        'data_fim': request.GET.get('data_fim') or None,
    }


@api_view()
def comissoes(request):
    """ Comissões por representante e mês, com os totais do período filtrado. """
    resultados, totais = services.resumo_comissoes(request.user, **_filtros(request))
    return JsonResponse({'resultados': resultados, 'totais': totais})


# ---
# VIEWS DE EXPORTAÇÃO (RELATÓRIOS)
# ---

CABECALHO_COMISSOES = [
    'Representante',
    'Venda',
    'Data',
    'Cliente',
    'Empresa',
    'Valor da Venda',
    'Comissão (%)',
    'Comissão (R$)',
    'Status da Venda',
]


@login_required
def export_comissoes_csv(request):
    vendas = services.vendas_comissionadas(request.user, **_filtros(request))
    response = HttpResponse(content_type='text/csv')
    response['Content-Disposition'] = 'attachment; filename="relatorio_comissoes.csv"'
    writer = csv.writer(response, delimiter=';')
    writer.writerow(CABECALHO_COMISSOES)
    for venda in vendas:
        writer.writerow([
            venda.representante.username,
            venda.numero,
            venda.data_venda.strftime('%Y-%m-%d'),
            venda.cliente.nome_estabelecimento,
            venda.empresa.nome,
            venda.valor_total,
            venda.comissao_percentual if venda.comissao_percentual is not None else '',
            venda.comissao_valor,
            venda.get_status_display(),
        ])
    return response


@login_required
def export_comissoes_xlsx(request):
    vendas = services.vendas_comissionadas(request.user, **_filtros(request))
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Relatório de Comissões"
    ws.append(CABECALHO_COMISSOES)
    for venda in vendas:
        ws.append([
            venda.representante.username,
            venda.numero,
            venda.data_venda.replace(tzinfo=None),
            venda.cliente.nome_estabelecimento,
            venda.empresa.nome,
            float(venda.valor_total or 0),
            float(venda.comissao_percentual) if venda.comissao_percentual is not None else None,
            float(venda.comissao_valor or 0),
            venda.get_status_display(),
        ])
    for col_num in range(1, len(CABECALHO_COMISSOES) + 1):
        ws.column_dimensions[get_column_letter(col_num)].width = 20
    response = HttpResponse(content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet')
    response['Content-Disposition'] = 'attachment; filename="relatorio_comissoes.xlsx"'
    wb.save(response)
    return response
