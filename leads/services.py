"""
Operações de Leads: CRUD com regra de dono, histórico de status e conversão
do lead em cliente.
"""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q
from django.shortcuts import get_object_or_404

from common.api import mesclar_com_instancia, paginar, validar_form
from common.permissoes import exigir_admin, filtrar_por_representante, verificar_dono
from common.services import criar_cliente, excluir_registo

from . import ciclo_vida
from .forms import LeadForm
from .models import Lead

logger = logging.getLogger(__name__)

# Campos do lead reaproveitados como dados iniciais do cliente convertido
CAMPOS_CONVERSAO = ('nome_pessoa', 'nome_estabelecimento', 'cidade', 'telefone', 'email', 'observacoes')


def listar_leads(user, search='', status='', limit=None, offset=None):
    leads = filtrar_por_representante(Lead.objects.all(), user)
    if search:
        leads = leads.filter(
            Q(nome_pessoa__icontains=search) |
            Q(nome_estabelecimento__icontains=search)
        )
    if status:
        leads = leads.filter(status=status)
    return paginar(leads.order_by('-created_at', '-id'), limit, offset)


def obter_lead(user, lead_id):
    lead = get_object_or_404(Lead, id=lead_id)
    verificar_dono(lead, user)
    return lead


@transaction.atomic
def criar_lead(user, dados):
    form = validar_form(LeadForm(dados))
    lead = form.save(commit=False)
    lead.representante = user
    lead.status = 'novo'
    lead.save()
    logger.info("Lead criado. lead_id=%s, representante_id=%s", lead.id, user.id)
    return lead


@transaction.atomic
def atualizar_lead(user, lead_id, dados):
    """
    Atualização parcial do lead. Se o status vier diferente do atual,
    o ciclo de vida grava exatamente uma linha de histórico.
    """
    lead = obter_lead(user, lead_id)
    form = validar_form(LeadForm(mesclar_com_instancia(LeadForm, lead, dados), instance=lead))
    lead = form.save()

    novo_status = form.cleaned_data.get('status')
    if novo_status:
        ciclo_vida.registrar_status(lead, novo_status, user, form.cleaned_data.get('motivo'))
    return lead


@transaction.atomic
def excluir_lead(user, lead_id):
    exigir_admin(user)
    lead = get_object_or_404(Lead, id=lead_id)
    excluir_registo(lead)
    logger.info("Lead excluído. lead_id=%s, user_id=%s", lead_id, user.id)


def historico_lead(user, lead_id):
    lead = obter_lead(user, lead_id)
    return ciclo_vida.historico(lead)


@transaction.atomic
def converter_lead(user, lead_id, dados):
    """
    Cria um Cliente a partir do lead (os dados enviados completam/sobrepõem
    os do lead) e move o lead para 'convertido'.
    """
    lead = obter_lead(user, lead_id)
    if lead.status == 'convertido':
        raise ValidationError("Este lead já foi convertido em cliente.")

    dados_cliente = {campo: getattr(lead, campo) for campo in CAMPOS_CONVERSAO}
    dados_cliente.update({k: v for k, v in dados.items() if v not in (None, '')})

    cliente = criar_cliente(user, dados_cliente, lead=lead, representante=lead.representante)
    ciclo_vida.registrar_status(lead, 'convertido', user, "Convertido em cliente")
    logger.info("Lead convertido. lead_id=%s, cliente_id=%s", lead.id, cliente.id)
    return cliente
