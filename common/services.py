"""
Operações de Clientes, Empresas Representadas e Produtos.

Cada função recebe o utilizador já autenticado (o "ator") e devolve o
registo gravado ou um queryset paginado. Os erros saem como exceções do
Django (ValidationError / PermissionDenied / Http404).
"""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import ProtectedError, Q
from django.shortcuts import get_object_or_404
from django.utils import timezone

from .api import mesclar_com_instancia, paginar, validar_form
from .forms import ClienteForm, EmpresaForm, ProdutoForm
from .models import Cliente, EmpresaRepresentada, Produto
from .permissoes import exigir_admin, filtrar_por_representante, verificar_dono

logger = logging.getLogger(__name__)


def excluir_registo(obj):
    """ Apaga o registo, convertendo a proteção de FK num erro legível. """
    try:
        obj.delete()
    except ProtectedError:
        raise ValidationError(
            f"Não é possível excluir '{obj}': existem orçamentos, vendas ou produtos ligados a este registo."
        )


# ---
# CLIENTES
# ---

def listar_clientes(user, search='', status='', limit=None, offset=None):
    clientes = filtrar_por_representante(Cliente.objects.all(), user)
    if search:
        clientes = clientes.filter(
            Q(nome_pessoa__icontains=search) |
            Q(nome_estabelecimento__icontains=search) |
            Q(cnpj__icontains=search)
        )
    if status:
        clientes = clientes.filter(status=status)
    return paginar(clientes.order_by('-created_at', '-id'), limit, offset)


def obter_cliente(user, cliente_id):
    cliente = get_object_or_404(Cliente, id=cliente_id)
    verificar_dono(cliente, user)
    return cliente


@transaction.atomic
def criar_cliente(user, dados, lead=None, representante=None):
    form = validar_form(ClienteForm(dados))
    cliente = form.save(commit=False)
    cliente.representante = representante or user
    cliente.status = 'ativo'
    cliente.data_conversao = timezone.now()
    cliente.lead = lead
    cliente.save()
    logger.info("Cliente criado. cliente_id=%s, representante_id=%s", cliente.id, cliente.representante_id)
    return cliente


@transaction.atomic
def atualizar_cliente(user, cliente_id, dados):
    cliente = obter_cliente(user, cliente_id)
    form = validar_form(
        ClienteForm(mesclar_com_instancia(ClienteForm, cliente, dados), instance=cliente)
    )
    cliente = form.save()
    logger.info("Cliente atualizado. cliente_id=%s, user_id=%s", cliente.id, user.id)
    return cliente


@transaction.atomic
def excluir_cliente(user, cliente_id):
    exigir_admin(user)
    cliente = get_object_or_404(Cliente, id=cliente_id)
    excluir_registo(cliente)
    logger.info("Cliente excluído. cliente_id=%s, user_id=%s", cliente_id, user.id)


# ---
# EMPRESAS REPRESENTADAS
# ---

def listar_empresas(user, search='', limit=None, offset=None):
    empresas = EmpresaRepresentada.objects.all()
    if search:
        empresas = empresas.filter(Q(nome__icontains=search) | Q(cnpj__icontains=search))
    return paginar(empresas.order_by('-created_at', '-id'), limit, offset)


def obter_empresa(user, empresa_id):
    return get_object_or_404(EmpresaRepresentada, id=empresa_id)


@transaction.atomic
def criar_empresa(user, dados):
    exigir_admin(user)
    dados = dict(dados)
    dados.setdefault('ativo', True)
    form = validar_form(EmpresaForm(dados))
    empresa = form.save(commit=False)
    empresa.criado_por = user
    empresa.save()
    logger.info("Empresa criada. empresa_id=%s, user_id=%s", empresa.id, user.id)
    return empresa


@transaction.atomic
def atualizar_empresa(user, empresa_id, dados):
    exigir_admin(user)
    empresa = get_object_or_404(EmpresaRepresentada, id=empresa_id)
    form = validar_form(
        EmpresaForm(mesclar_com_instancia(EmpresaForm, empresa, dados), instance=empresa)
    )
    return form.save()


@transaction.atomic
def excluir_empresa(user, empresa_id):
    exigir_admin(user)
    empresa = get_object_or_404(EmpresaRepresentada, id=empresa_id)
    excluir_registo(empresa)
    logger.info("Empresa excluída. empresa_id=%s, user_id=%s", empresa_id, user.id)


# ---
# PRODUTOS
# ---

def listar_produtos(user, empresa_id=None, search='', limit=None, offset=None):
    produtos = Produto.objects.select_related('empresa')
    if empresa_id:
        produtos = produtos.filter(empresa_id=empresa_id)
    if search:
        produtos = produtos.filter(Q(nome__icontains=search) | Q(codigo_sku__icontains=search))
    return paginar(produtos.order_by('-created_at', '-id'), limit, offset)


def obter_produto(user, produto_id):
    return get_object_or_404(Produto, id=produto_id)


@transaction.atomic
def criar_produto(user, dados):
    exigir_admin(user)
    dados = dict(dados)
    dados.setdefault('ativo', True)
    produto = validar_form(ProdutoForm(dados)).save()
    logger.info("Produto criado. produto_id=%s, sku=%s", produto.id, produto.codigo_sku)
    return produto


@transaction.atomic
def atualizar_produto(user, produto_id, dados):
    exigir_admin(user)
    produto = get_object_or_404(Produto, id=produto_id)
    form = validar_form(
        ProdutoForm(mesclar_com_instancia(ProdutoForm, produto, dados), instance=produto)
    )
    return form.save()


@transaction.atomic
def excluir_produto(user, produto_id):
    exigir_admin(user)
    produto = get_object_or_404(Produto, id=produto_id)
    excluir_registo(produto)
    logger.info("Produto excluído. produto_id=%s, user_id=%s", produto_id, user.id)
