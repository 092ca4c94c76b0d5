"""
Envio de e-mails de orçamento e de confirmação de venda.

As funções devolvem True/False e nunca levantam: uma falha de SMTP é
registada no log e não desfaz a operação que pediu o envio.
"""

import logging
import smtplib

from django.conf import settings
from django.core.mail import EmailMultiAlternatives, get_connection
from django.template.loader import render_to_string
from django.utils.html import strip_tags

logger = logging.getLogger(__name__)


def _enviar(assunto, template, contexto, destinatario):
    html = render_to_string(template, contexto)
    mensagem = EmailMultiAlternatives(
        subject=assunto,
        body=strip_tags(html),
        from_email=settings.DEFAULT_FROM_EMAIL,
        to=[destinatario],
    )
    mensagem.attach_alternative(html, "text/html")
    mensagem.send()


def enviar_orcamento_por_email(orcamento):
    destinatario = orcamento.cliente.email
    if not destinatario:
        logger.warning("Orçamento sem e-mail de destino. orcamento_id=%s", orcamento.id)
        return False

    contexto = {
        'orcamento': orcamento,
        'itens': list(orcamento.itens.all()),
        'link': settings.CRM_LINK_ORCAMENTO.format(id=orcamento.id),
    }
    try:
        _enviar(
            f"Orçamento {orcamento.numero} - {orcamento.empresa.nome}",
            'vendas/email/orcamento.html',
            contexto,
            destinatario,
        )
    except (smtplib.SMTPException, OSError):
        logger.exception("Erro ao enviar orçamento. orcamento_id=%s", orcamento.id)
        return False

    logger.info("Orçamento %s enviado para %s", orcamento.numero, destinatario)
    return True


def enviar_confirmacao_venda_por_email(venda):
    destinatario = venda.cliente.email
    if not destinatario:
        logger.warning("Venda sem e-mail de destino. venda_id=%s", venda.id)
        return False

    contexto = {
        'venda': venda,
        'nome_representante': venda.representante.get_full_name() or venda.representante.username,
    }
    try:
        _enviar(
            f"Confirmação de Venda {venda.numero}",
            'vendas/email/venda_confirmada.html',
            contexto,
            destinatario,
        )
    except (smtplib.SMTPException, OSError):
        logger.exception("Erro ao enviar confirmação de venda. venda_id=%s", venda.id)
        return False

    logger.info("Confirmação de venda %s enviada para %s", venda.numero, destinatario)
    return True


def testar_conexao_email():
    """ Abre e fecha uma ligação com o servidor configurado em EMAIL_BACKEND. """
    try:
        conexao = get_connection(fail_silently=False)
        conexao.open()
        conexao.close()
    except (smtplib.SMTPException, OSError):
        logger.exception("Erro ao verificar a ligação SMTP")
        return False

    logger.info("Ligação SMTP verificada com sucesso")
    return True
