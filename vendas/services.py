"""
Operações de Orçamentos e Vendas.

Orçamento e itens são gravados sempre na mesma transação e os totais vêm de
vendas.calculos. A comissão da venda vem de comissoes.calculos e é
recalculada a cada gravação.
"""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q
from django.shortcuts import get_object_or_404
from django.utils import timezone
from django.utils.dateparse import parse_date

from common.api import mesclar_com_instancia, paginar, validar_form
from common.permissoes import exigir_admin, filtrar_por_representante, verificar_dono
from common.services import excluir_registo
from comissoes.calculos import calcular_comissao

from . import notificacoes
from .calculos import calcular_totais, total_item
from .forms import ItemOrcamentoForm, OrcamentoForm, VendaForm
from .models import Orcamento, Venda

logger = logging.getLogger(__name__)


def gerar_numero(model, prefixo):
    """ 'ORC-1718900000000': prefixo + epoch em milissegundos, sem repetir. """
    marca = int(timezone.now().timestamp() * 1000)
    numero = f"{prefixo}-{marca}"
    while model.objects.filter(numero=numero).exists():
        marca += 1
        numero = f"{prefixo}-{marca}"
    return numero


# ---
# ORÇAMENTOS
# ---

def _validar_itens(itens):
    """ Valida a lista de itens enviada e devolve os forms válidos, na ordem recebida. """
    if not isinstance(itens, list):
        raise ValidationError({'itens': ["Envie os itens numa lista."]})

    forms_itens = []
    erros = {}
    for posicao, item in enumerate(itens):
        if not isinstance(item, dict):
            erros[f'itens[{posicao}]'] = ["Item inválido."]
            continue
        form = ItemOrcamentoForm(item)
        if form.is_valid():
            forms_itens.append(form)
        else:
            for campo, mensagens in form.errors.items():
                erros[f'itens[{posicao}].{campo}'] = list(mensagens)
    if erros:
        raise ValidationError(erros)
    return forms_itens


def _verificar_produtos(orcamento, forms_itens):
    for posicao, form in enumerate(forms_itens):
        produto = form.cleaned_data.get('produto')
        if produto and produto.empresa_id != orcamento.empresa_id:
            raise ValidationError({
                f'itens[{posicao}].produto': ["O produto não pertence à empresa do orçamento."]
            })


def _aplicar_totais(orcamento, itens):
    """ itens: pares (quantidade, valor_unitario). """
    try:
        totais = calcular_totais(itens, orcamento.desconto_percentual, orcamento.desconto_valor)
    except ValueError as e:
        raise ValidationError(str(e))
    orcamento.valor_total = totais.subtotal
    orcamento.valor_liquido = totais.liquido


def _gravar_itens(orcamento, forms_itens):
    orcamento.itens.all().delete()
    for posicao, form in enumerate(forms_itens, 1):
        item = form.save(commit=False)
        item.orcamento = orcamento
        if item.ordem is None:
            item.ordem = posicao
        item.valor_total = total_item(item.quantidade, item.valor_unitario)
        item.save()


def listar_orcamentos(user, search='', status='', limit=None, offset=None):
    orcamentos = filtrar_por_representante(Orcamento.objects.all(), user)
    if search:
        orcamentos = orcamentos.filter(numero__icontains=search)
    if status:
        orcamentos = orcamentos.filter(status=status)
    return paginar(orcamentos.order_by('-created_at', '-id'), limit, offset)


def obter_orcamento(user, orcamento_id):
    orcamento = get_object_or_404(Orcamento, id=orcamento_id)
    verificar_dono(orcamento, user)
    return orcamento


@transaction.atomic
def criar_orcamento(user, dados):
    """
    Cria o orçamento (status 'rascunho') e os seus itens numa só transação.
    Os totais enviados pelo cliente são ignorados e recalculados.
    """
    form = validar_form(OrcamentoForm(dados))
    forms_itens = _validar_itens(dados.get('itens') or [])

    orcamento = form.save(commit=False)
    verificar_dono(orcamento.cliente, user)
    _verificar_produtos(orcamento, forms_itens)

    orcamento.numero = gerar_numero(Orcamento, 'ORC')
    orcamento.representante = user
    orcamento.status = 'rascunho'
    _aplicar_totais(
        orcamento,
        [(f.cleaned_data['quantidade'], f.cleaned_data['valor_unitario']) for f in forms_itens],
    )
    orcamento.save()
    _gravar_itens(orcamento, forms_itens)

    logger.info(
        "Orçamento criado. orcamento_id=%s, numero=%s, itens=%s, valor_liquido=%s",
        orcamento.id, orcamento.numero, len(forms_itens), orcamento.valor_liquido
    )
    return orcamento


@transaction.atomic
def atualizar_orcamento(user, orcamento_id, dados):
    """
    Atualização parcial. Se 'itens' vier no pedido, a lista substitui os itens
    atuais; os totais são sempre recalculados (o desconto pode ter mudado).
    """
    orcamento = obter_orcamento(user, orcamento_id)
    form = validar_form(
        OrcamentoForm(mesclar_com_instancia(OrcamentoForm, orcamento, dados), instance=orcamento)
    )
    orcamento = form.save(commit=False)
    verificar_dono(orcamento.cliente, user)

    if 'itens' in dados:
        forms_itens = _validar_itens(dados['itens'] or [])
        _verificar_produtos(orcamento, forms_itens)
        pares = [(f.cleaned_data['quantidade'], f.cleaned_data['valor_unitario']) for f in forms_itens]
    else:
        forms_itens = None
        pares = list(orcamento.itens.values_list('quantidade', 'valor_unitario'))

    _aplicar_totais(orcamento, pares)
    orcamento.save()
    if forms_itens is not None:
        _gravar_itens(orcamento, forms_itens)

    logger.info("Orçamento atualizado. orcamento_id=%s, user_id=%s", orcamento.id, user.id)
    return orcamento


@transaction.atomic
def excluir_orcamento(user, orcamento_id):
    """ O dono ou um admin podem excluir; os itens vão junto (CASCADE). """
    orcamento = obter_orcamento(user, orcamento_id)
    excluir_registo(orcamento)
    logger.info("Orçamento excluído. orcamento_id=%s, user_id=%s", orcamento_id, user.id)


def enviar_orcamento(user, orcamento_id):
    """
    Marca o orçamento como 'enviado' e envia-o por e-mail ao cliente.
    Devolve (orcamento, enviado); a falha do e-mail não desfaz o status.
    """
    orcamento = obter_orcamento(user, orcamento_id)
    if orcamento.status == 'rascunho':
        orcamento.status = 'enviado'
        orcamento.save(update_fields=['status', 'updated_at'])
        logger.info("Orçamento marcado como enviado. orcamento_id=%s", orcamento.id)
    enviado = notificacoes.enviar_orcamento_por_email(orcamento)
    return orcamento, enviado


def testar_email(user):
    """ Verificação da ligação SMTP, usada na tela de configurações (só admin). """
    exigir_admin(user)
    return notificacoes.testar_conexao_email()


# ---
# VENDAS
# ---

def _aplicar_comissao(venda):
    try:
        venda.comissao_valor = calcular_comissao(venda.valor_total, venda.comissao_percentual)
    except ValueError as e:
        raise ValidationError(str(e))


def _data(valor):
    """ 'AAAA-MM-DD' -> date; valores inválidos são ignorados como filtro. """
    if not valor:
        return None
    try:
        return parse_date(str(valor))
    except ValueError:
        return None


def listar_vendas(user, search='', status='', limit=None, offset=None):
    return paginar(filtrar_vendas(user, search=search, status=status), limit, offset)


def filtrar_vendas(user, search='', status='', representante_id=None, data_inicio=None, data_fim=None):
    """
    Queryset de vendas visível ao utilizador, com os filtros das listagens,
    do resumo de comissões e das exportações.
    """
    vendas = filtrar_por_representante(Venda.objects.all(), user)
    if search:
        vendas = vendas.filter(Q(numero__icontains=search) | Q(cliente__nome_estabelecimento__icontains=search))
    if status:
        vendas = vendas.filter(status=status)
    if representante_id and str(representante_id).isdigit():
        vendas = vendas.filter(representante_id=representante_id)
    data_inicio, data_fim = _data(data_inicio), _data(data_fim)
    if data_inicio:
        vendas = vendas.filter(data_venda__date__gte=data_inicio)
    if data_fim:
        vendas = vendas.filter(data_venda__date__lte=data_fim)
    return vendas.select_related('cliente', 'empresa', 'representante').order_by('-created_at', '-id')


def obter_venda(user, venda_id):
    venda = get_object_or_404(Venda, id=venda_id)
    verificar_dono(venda, user)
    return venda


def _aceitar_orcamento(orcamento):
    if orcamento.status != 'aceito':
        orcamento.status = 'aceito'
        orcamento.save(update_fields=['status', 'updated_at'])


@transaction.atomic
def criar_venda(user, dados):
    """
    Cria a venda (status 'pendente' se não vier outro). Com 'orcamento', o
    orçamento de origem passa a 'aceito'.
    """
    form = validar_form(VendaForm(dados))
    venda = form.save(commit=False)
    verificar_dono(venda.cliente, user)
    if venda.orcamento:
        verificar_dono(venda.orcamento, user)

    venda.numero = gerar_numero(Venda, 'VND')
    venda.representante = user
    _aplicar_comissao(venda)
    venda.save()

    if venda.orcamento:
        _aceitar_orcamento(venda.orcamento)

    logger.info(
        "Venda criada. venda_id=%s, numero=%s, valor_total=%s, comissao_valor=%s",
        venda.id, venda.numero, venda.valor_total, venda.comissao_valor
    )
    if venda.status == 'confirmada':
        transaction.on_commit(lambda: notificacoes.enviar_confirmacao_venda_por_email(venda))
    return venda


@transaction.atomic
def atualizar_venda(user, venda_id, dados):
    venda = obter_venda(user, venda_id)
    status_anterior = venda.status
    orcamento_anterior_id = venda.orcamento_id
    form = validar_form(VendaForm(mesclar_com_instancia(VendaForm, venda, dados), instance=venda))
    venda = form.save(commit=False)
    verificar_dono(venda.cliente, user)
    orcamento_novo = venda.orcamento_id is not None and venda.orcamento_id != orcamento_anterior_id
    if orcamento_novo:
        verificar_dono(venda.orcamento, user)
    _aplicar_comissao(venda)
    venda.save()

    if orcamento_novo:
        _aceitar_orcamento(venda.orcamento)

    logger.info(
        "Venda atualizada. venda_id=%s, status=%s, comissao_valor=%s",
        venda.id, venda.status, venda.comissao_valor
    )
    if venda.status == 'confirmada' and status_anterior != 'confirmada':
        transaction.on_commit(lambda: notificacoes.enviar_confirmacao_venda_por_email(venda))
    return venda


@transaction.atomic
def excluir_venda(user, venda_id):
    exigir_admin(user)
    venda = get_object_or_404(Venda, id=venda_id)
    excluir_registo(venda)
    logger.info("Venda excluída. venda_id=%s, user_id=%s", venda_id, user.id)
