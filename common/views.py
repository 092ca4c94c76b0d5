from django.core.exceptions import ValidationError
from django.http import JsonResponse

from .api import api_view, ler_dados, resposta_lista, serializar
from .cep import buscar_endereco_por_cep, validar_cep
from .forms import somente_digitos
from .importacao import importar
from .models import Cliente
from .permissoes import is_admin
from . import services


# ---
# CLIENTES
# ---

@api_view(metodos=('GET', 'POST'))
def clientes(request):
    if request.method == 'POST':
        cliente = services.criar_cliente(request.user, ler_dados(request))
        return JsonResponse(serializar(cliente), status=201)

    registos = services.listar_clientes(
        request.user,
        search=request.GET.get('search', ''),
        status=request.GET.get('status', ''),
        limit=request.GET.get('limit'),
        offset=request.GET.get('offset'),
    )
    return resposta_lista(registos)


@api_view(metodos=('GET', 'POST'))
def cliente_detalhe(request, cliente_id):
    if request.method == 'POST':
        cliente = services.atualizar_cliente(request.user, cliente_id, ler_dados(request))
    else:
        cliente = services.obter_cliente(request.user, cliente_id)
    return JsonResponse(serializar(cliente))


@api_view(metodos=('POST', 'DELETE'))
def cliente_excluir(request, cliente_id):
    services.excluir_cliente(request.user, cliente_id)
    return JsonResponse({'sucesso': True})


@api_view()
def check_cliente(request):
    """ API que verifica se um Cliente (por CNPJ) já existe """
    cnpj = somente_digitos(request.GET.get('cnpj'))
    if not cnpj:
        return JsonResponse({'erro': 'CNPJ não fornecido'}, status=400)

    cliente = Cliente.objects.filter(cnpj=cnpj).first()
    if cliente:
        # Só o dono (ou o admin) vê qual é o cliente
        if not (is_admin(request.user) or cliente.representante_id == request.user.id):
            return JsonResponse({'status': 'found'})
        return JsonResponse({'status': 'found', 'id': cliente.id,
                             'nome_estabelecimento': cliente.nome_estabelecimento})
    return JsonResponse({'status': 'not_found'})


# ---
# EMPRESAS REPRESENTADAS
# ---

@api_view(metodos=('GET', 'POST'))
def empresas(request):
    if request.method == 'POST':
        empresa = services.criar_empresa(request.user, ler_dados(request))
        return JsonResponse(serializar(empresa), status=201)

    registos = services.listar_empresas(
        request.user,
        search=request.GET.get('search', ''),
        limit=request.GET.get('limit'),
        offset=request.GET.get('offset'),
    )
    return resposta_lista(registos)


@api_view(metodos=('GET', 'POST'))
def empresa_detalhe(request, empresa_id):
    if request.method == 'POST':
        empresa = services.atualizar_empresa(request.user, empresa_id, ler_dados(request))
    else:
        empresa = services.obter_empresa(request.user, empresa_id)
    return JsonResponse(serializar(empresa))


@api_view(metodos=('POST', 'DELETE'))
def empresa_excluir(request, empresa_id):
    services.excluir_empresa(request.user, empresa_id)
    return JsonResponse({'sucesso': True})


# ---
# PRODUTOS
# ---

@api_view(metodos=('GET', 'POST'))
def produtos(request):
    if request.method == 'POST':
        produto = services.criar_produto(request.user, ler_dados(request))
        return JsonResponse(serializar(produto), status=201)

    registos = services.listar_produtos(
        request.user,
        empresa_id=request.GET.get('empresa') or None,
        search=request.GET.get('search', ''),
        limit=request.GET.get('limit'),
        offset=request.GET.get('offset'),
    )
    return resposta_lista(registos)


@api_view(metodos=('GET', 'POST'))
def produto_detalhe(request, produto_id):
    """ GET devolve os dados usados para montar o item do orçamento """
    if request.method == 'POST':
        produto = services.atualizar_produto(request.user, produto_id, ler_dados(request))
    else:
        produto = services.obter_produto(request.user, produto_id)
    return JsonResponse(serializar(produto))


@api_view(metodos=('POST', 'DELETE'))
def produto_excluir(request, produto_id):
    services.excluir_produto(request.user, produto_id)
    return JsonResponse({'sucesso': True})


# ---
# INTEGRAÇÕES
# ---

@api_view()
def busca_cep(request, cep):
    if not validar_cep(cep):
        return JsonResponse({'erro': 'CEP deve conter 8 dígitos'}, status=400)
    endereco = buscar_endereco_por_cep(cep)
    if endereco is None:
        return JsonResponse({'erro': 'CEP não encontrado'}, status=404)
    return JsonResponse(endereco.as_dict())


@api_view(metodos=('POST',))
def importacao(request, tipo):
    arquivo = request.FILES.get('arquivo')
    if arquivo is None:
        raise ValidationError({'arquivo': ["Nenhum arquivo enviado."]})
    registo = importar(request.user, tipo, arquivo)
    return JsonResponse(serializar(registo), status=201)
