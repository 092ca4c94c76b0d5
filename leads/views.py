from django.http import JsonResponse

from common.api import api_view, ler_dados, resposta_lista, serializar

from . import services


@api_view(metodos=('GET', 'POST'))
def leads(request):
    """ GET: lista com busca/status/paginação. POST: cria o lead (status 'novo'). """
    if request.method == 'POST':
        lead = services.criar_lead(request.user, ler_dados(request))
        return JsonResponse(serializar(lead), status=201)

    registos = services.listar_leads(
        request.user,
        search=request.GET.get('search', ''),
        status=request.GET.get('status', ''),
        limit=request.GET.get('limit'),
        offset=request.GET.get('offset'),
    )
    return resposta_lista(registos)


@api_view(metodos=('GET', 'POST'))
def lead_detalhe(request, lead_id):
    if request.method == 'POST':
        lead = services.atualizar_lead(request.user, lead_id, ler_dados(request))
    else:
        lead = services.obter_lead(request.user, lead_id)
    return JsonResponse(serializar(lead))


@api_view(metodos=('POST', 'DELETE'))
def lead_excluir(request, lead_id):
    services.excluir_lead(request.user, lead_id)
    return JsonResponse({'sucesso': True})


@api_view()
def lead_historico(request, lead_id):
    return resposta_lista(services.historico_lead(request.user, lead_id))


@api_view(metodos=('POST',))
def lead_converter(request, lead_id):
    cliente = services.converter_lead(request.user, lead_id, ler_dados(request))
    return JsonResponse(serializar(cliente), status=201)
