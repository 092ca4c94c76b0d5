import csv
import io
from decimal import Decimal

import openpyxl
import pytest
from django.utils import timezone

from vendas.models import Venda


@pytest.fixture
def vendas(cliente, empresa, representante, outro_representante):
    dados = [
        ('VND-10', representante, '1000.00', '100.00', 'confirmada'),
        ('VND-11', representante, '500.00', '25.00', 'pendente'),
        ('VND-12', representante, '800.00', '80.00', 'cancelada'),
        ('VND-13', outro_representante, '2000.00', '200.00', 'entregue'),
    ]
    return [
        Venda.objects.create(
            numero=numero, cliente=cliente, empresa=empresa, representante=rep,
            valor_total=Decimal(valor), comissao_percentual=Decimal('10'),
            comissao_valor=Decimal(comissao), status=status,
        )
        for numero, rep, valor, comissao, status in dados
    ]


@pytest.mark.django_db
def test_resumo_do_admin_agrupa_por_representante(api_admin, vendas):
    resposta = api_admin.get('/api/comissoes/')

    assert resposta.status_code == 200
    corpo = resposta.json()
    por_representante = {r['representante']: r for r in corpo['resultados']}
    assert set(por_representante) == {'representante', 'outro_representante'}

    linha = por_representante['representante']
    assert linha['quantidade_vendas'] == 2
    assert Decimal(linha['total_vendas']) == Decimal('1500')
    assert Decimal(linha['total_comissao']) == Decimal('125')
    assert linha['periodo'] == timezone.localdate().strftime('%Y-%m')

    assert corpo['totais']['quantidade_vendas'] == 3
    assert Decimal(corpo['totais']['total_comissao']) == Decimal('325')
    assert Decimal(corpo['totais']['pendente']) == Decimal('25')


@pytest.mark.django_db
def test_representante_so_ve_as_suas_comissoes(api_outro, vendas):
    corpo = api_outro.get('/api/comissoes/').json()

    assert [r['representante'] for r in corpo['resultados']] == ['outro_representante']
    assert Decimal(corpo['totais']['total_comissao']) == Decimal('200')


@pytest.mark.django_db
def test_filtro_de_status_inclui_canceladas(api_admin, vendas):
    corpo = api_admin.get('/api/comissoes/', {'status': 'cancelada'}).json()
    assert corpo['totais']['quantidade_vendas'] == 1


@pytest.mark.django_db
def test_filtro_de_representante(api_admin, vendas, outro_representante):
    corpo = api_admin.get('/api/comissoes/', {'representante': outro_representante.id}).json()
    assert [r['representante'] for r in corpo['resultados']] == ['outro_representante']


@pytest.mark.django_db
def test_resumo_sem_vendas(api_representante):
    corpo = api_representante.get('/api/comissoes/').json()
    assert corpo['resultados'] == []
    assert corpo['totais']['quantidade_vendas'] == 0
    assert corpo['totais']['total_comissao'] == 0


@pytest.mark.django_db
def test_export_comissoes_csv(api_representante, vendas):
    resposta = api_representante.get('/comissoes/export/csv/')

    assert resposta.status_code == 200
    linhas = list(csv.reader(io.StringIO(resposta.content.decode('utf-8')), delimiter=';'))
    assert linhas[0][0] == 'Representante'
    assert sorted(linha[1] for linha in linhas[1:]) == ['VND-10', 'VND-11']


@pytest.mark.django_db
def test_export_comissoes_xlsx(api_admin, vendas):
    resposta = api_admin.get('/comissoes/export/xlsx/')
    ws = openpyxl.load_workbook(io.BytesIO(resposta.content)).active
    assert ws.max_row == 4
