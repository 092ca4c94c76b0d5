# Em: vendas/views.py

import csv

import openpyxl
from openpyxl.utils import get_column_letter

from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse

from common.api import api_view, ler_dados, resposta_lista, serializar

from . import services


def _serializar_orcamento(orcamento):
    return serializar(orcamento, itens=[serializar(item) for item in orcamento.itens.all()])


# ---
# SEÇÃO 1: ORÇAMENTOS
# ---

@api_view(metodos=('GET', 'POST'))
def orcamentos(request):
    if request.method == 'POST':
        orcamento = services.criar_orcamento(request.user, ler_dados(request))
        return JsonResponse(_serializar_orcamento(orcamento), status=201)

    registos = services.listar_orcamentos(
        request.user,
        search=request.GET.get('search', ''),
        status=request.GET.get('status', ''),
        limit=request.GET.get('limit'),
        offset=request.GET.get('offset'),
    )
    return resposta_lista(registos)


@api_view(metodos=('GET', 'POST'))
def orcamento_detalhe(request, orcamento_id):
    """ GET devolve o orçamento com os itens; POST atualiza (itens opcionais). """
    if request.method == 'POST':
        orcamento = services.atualizar_orcamento(request.user, orcamento_id, ler_dados(request))
    else:
        orcamento = services.obter_orcamento(request.user, orcamento_id)
    return JsonResponse(_serializar_orcamento(orcamento))


@api_view(metodos=('POST', 'DELETE'))
def orcamento_excluir(request, orcamento_id):
    services.excluir_orcamento(request.user, orcamento_id)
    return JsonResponse({'sucesso': True})


@api_view(metodos=('POST',))
def orcamento_enviar(request, orcamento_id):
    orcamento, enviado = services.enviar_orcamento(request.user, orcamento_id)
    return JsonResponse({'sucesso': enviado, 'status': orcamento.status})


@api_view(metodos=('POST',))
def testar_email(request):
    return JsonResponse({'sucesso': services.testar_email(request.user)})


# ---
# SEÇÃO 2: VENDAS
# ---

@api_view(metodos=('GET', 'POST'))
def vendas(request):
    if request.method == 'POST':
        venda = services.criar_venda(request.user, ler_dados(request))
        return JsonResponse(serializar(venda), status=201)

    registos = services.listar_vendas(
        request.user,
        search=request.GET.get('search', ''),
        status=request.GET.get('status', ''),
        limit=request.GET.get('limit'),
        offset=request.GET.get('offset'),
    )
    return resposta_lista(registos)


@api_view(metodos=('GET', 'POST'))
def venda_detalhe(request, venda_id):
    if request.method == 'POST':
        venda = services.atualizar_venda(request.user, venda_id, ler_dados(request))
    else:
        venda = services.obter_venda(request.user, venda_id)
    return JsonResponse(serializar(venda))


@api_view(metodos=('POST', 'DELETE'))
def venda_excluir(request, venda_id):
    services.excluir_venda(request.user, venda_id)
    return JsonResponse({'sucesso': True})


# ---
# SEÇÃO 3: VIEWS DE EXPORTAÇÃO (RELATÓRIOS)
# ---

CABECALHO_VENDAS = [
    'Número',
    'Data',
    'Representante',
    'Cliente',
    'CNPJ',
    'Empresa',
    'Orçamento',
    'Valor Total',
    'Comissão (%)',
    'Comissão (R$)',
    'Status',
    'Entrega Prevista',
    'Entrega Realizada',
]


def _get_vendas_filtradas(request):
    """ Lê os filtros do request (GET) e devolve as vendas visíveis ao utilizador. """
    return services.filtrar_vendas(
        request.user,
        search=request.GET.get('search', ''),
        status=request.GET.get('status', ''),
        representante_id=request.GET.get('representante') or None,
        data_inicio=request.GET.get('data_inicio') or None,
        data_fim=request.GET.get('data_fim') or None,
    ).select_related('orcamento')


@login_required
def export_vendas_csv(request):
    vendas = _get_vendas_filtradas(request)
    response = HttpResponse(content_type='text/csv')
    response['Content-Disposition'] = 'attachment; filename="relatorio_vendas.csv"'
    writer = csv.writer(response, delimiter=';')
    writer.writerow(CABECALHO_VENDAS)
    for venda in vendas:
        writer.writerow([
            venda.numero,
            venda.data_venda.strftime('%Y-%m-%d %H:%M'),
            venda.representante.username,
            venda.cliente.nome_estabelecimento,
            venda.cliente.cnpj or '',
            venda.empresa.nome,
            venda.orcamento.numero if venda.orcamento else '',
            venda.valor_total,
            venda.comissao_percentual if venda.comissao_percentual is not None else '',
            venda.comissao_valor,
            venda.get_status_display(),
            venda.data_entrega_prevista or '',
            venda.data_entrega_real or '',
        ])
    return response


@login_required
def export_vendas_xlsx(request):
    vendas = _get_vendas_filtradas(request)
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Relatório de Vendas"
    ws.append(CABECALHO_VENDAS)
    for venda in vendas:
        ws.append([
            venda.numero,
            venda.data_venda.replace(tzinfo=None),
            venda.representante.username,
            venda.cliente.nome_estabelecimento,
            venda.cliente.cnpj or '',
            venda.empresa.nome,
            venda.orcamento.numero if venda.orcamento else '',
            float(venda.valor_total or 0),
            float(venda.comissao_percentual) if venda.comissao_percentual is not None else None,
            float(venda.comissao_valor or 0),
            venda.get_status_display(),
            venda.data_entrega_prevista,
            venda.data_entrega_real,
        ])
    for col_num in range(1, len(CABECALHO_VENDAS) + 1):
        ws.column_dimensions[get_column_letter(col_num)].width = 20
    response = HttpResponse(content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet')
    response['Content-Disposition'] = 'attachment; filename="relatorio_vendas.xlsx"'
    wb.save(response)
    return response
