import smtplib
from decimal import Decimal
from unittest import mock

import pytest
from django.core import mail

from vendas import notificacoes
from vendas.models import Orcamento, Venda
from vendas.templatetags.vendas_extras import moeda


def test_filtro_moeda():
    assert moeda(Decimal('1234.5')) == "R$ 1.234,50"
    assert moeda(None) == "R$ 0,00"
    assert moeda(Decimal('1000000')) == "R$ 1.000.000,00"


@pytest.fixture
def orcamento(cliente, empresa, representante):
    return Orcamento.objects.create(
        numero='ORC-99', cliente=cliente, empresa=empresa, representante=representante,
        valor_total=Decimal('300.00'), valor_liquido=Decimal('300.00'),
    )


@pytest.mark.django_db
def test_enviar_orcamento(orcamento):
    assert notificacoes.enviar_orcamento_por_email(orcamento) is True
    assert mail.outbox[0].subject == "Orçamento ORC-99 - Alimentos Serra Azul"
    assert mail.outbox[0].from_email == 'crm@teste.local'
    assert "R$ 300,00" in mail.outbox[0].body


@pytest.mark.django_db
def test_falha_smtp_devolve_false(orcamento):
    with mock.patch.object(notificacoes.EmailMultiAlternatives, 'send', side_effect=smtplib.SMTPException("recusado")):
        assert notificacoes.enviar_orcamento_por_email(orcamento) is False


@pytest.mark.django_db
def test_confirmacao_de_venda(cliente, empresa, representante):
    venda = Venda.objects.create(
        numero='VND-99', cliente=cliente, empresa=empresa, representante=representante,
        valor_total=Decimal('1500.00'), status='confirmada',
    )
    assert notificacoes.enviar_confirmacao_venda_por_email(venda) is True
    assert "R$ 1.500,00" in mail.outbox[0].body


def test_testar_conexao_email():
    assert notificacoes.testar_conexao_email() is True


def test_testar_conexao_email_com_falha():
    with mock.patch.object(notificacoes, 'get_connection') as get_connection:
        get_connection.return_value.open.side_effect = OSError("sem rota")
        assert notificacoes.testar_conexao_email() is False


@pytest.mark.django_db
def test_endpoint_testar_email_so_admin(api_admin, api_representante):
    assert api_representante.post('/api/configuracoes/testar-email/').status_code == 403

    resposta = api_admin.post('/api/configuracoes/testar-email/')
    assert resposta.status_code == 200
    assert resposta.json() == {'sucesso': True}

    with mock.patch.object(notificacoes, 'get_connection') as get_connection:
        get_connection.return_value.open.side_effect = smtplib.SMTPException("recusado")
        assert api_admin.post('/api/configuracoes/testar-email/').json() == {'sucesso': False}
