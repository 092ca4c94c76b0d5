"""
Ciclo de vida do Lead.

Funil: novo -> em_contato -> qualificado -> proposta_enviada -> (perdido | convertido),
e qualquer etapa pode ir direto para perdido. O funil é apenas referência:
nenhuma transição é recusada. O que se garante é a trilha de auditoria,
uma linha de HistoricoLead por mudança efetiva de status, gravada na mesma
transação que sobrescreve o status do lead.
"""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from .models import HistoricoLead, Lead

logger = logging.getLogger(__name__)

FUNIL = ('novo', 'em_contato', 'qualificado', 'proposta_enviada')
STATUS_FINAIS = ('perdido', 'convertido')
MOTIVO_PADRAO = "Status atualizado"


def status_validos():
    return [valor for valor, _ in Lead.STATUS_CHOICES]


def segue_funil(anterior, novo):
    """ True quando a transição avança uma etapa do funil ou marca o lead como perdido. """
    if novo == 'perdido':
        return anterior != 'perdido'
    if anterior in FUNIL and novo == 'convertido':
        return anterior == 'proposta_enviada'
    if anterior in FUNIL and novo in FUNIL:
        return FUNIL.index(novo) == FUNIL.index(anterior) + 1
    return False


@transaction.atomic
def registrar_status(lead, novo_status, usuario, motivo=None):
    """
    Sobrescreve o status do lead e acrescenta a linha de histórico.
    Devolve o HistoricoLead criado, ou None quando o status não mudou.
    """
    if novo_status not in status_validos():
        raise ValidationError({'status': [f"Status inválido: {novo_status!r}."]})

    anterior = lead.status
    if anterior == novo_status:
        return None

    lead.status = novo_status
    lead.save(update_fields=['status', 'updated_at'])

    historico = HistoricoLead.objects.create(
        lead=lead,
        status_anterior=anterior,
        status_novo=novo_status,
        usuario=usuario,
        motivo=motivo or MOTIVO_PADRAO,
    )

    if not segue_funil(anterior, novo_status):
        logger.info("Transição fora do funil. lead_id=%s, %s -> %s", lead.id, anterior, novo_status)
    logger.info(
        "Status do lead alterado. lead_id=%s, %s -> %s, usuario_id=%s",
        lead.id, anterior, novo_status, usuario.id,
    )
    return historico


def historico(lead):
    return HistoricoLead.objects.filter(lead_id=lead.id).select_related('usuario').order_by('-data_alteracao', '-id')
