import pytest
from django.test import Client

from common.models import Cliente
from leads.models import HistoricoLead, Lead


@pytest.mark.django_db
def test_criar_lead_forca_status_novo_e_representante(api_representante, representante, post_json):
    resposta = post_json(api_representante, '/api/leads/', {
        'nome_pessoa': "Carla Dias",
        'nome_estabelecimento': "Padaria Dias",
        'cidade': "Santos",
        'telefone': "(13) 99999-0000",
        'status': 'convertido',
    })

    assert resposta.status_code == 201
    lead = Lead.objects.get(id=resposta.json()['id'])
    assert lead.status == 'novo'
    assert lead.representante == representante
    assert lead.fonte_lead == 'outro'


@pytest.mark.django_db
def test_criar_lead_sem_campos_obrigatorios(api_representante, post_json):
    resposta = post_json(api_representante, '/api/leads/', {'nome_pessoa': "Sem Cidade"})

    assert resposta.status_code == 400
    campos = resposta.json()['campos']
    assert 'cidade' in campos
    assert 'telefone' in campos


@pytest.mark.django_db
def test_email_invalido(api_representante, post_json):
    resposta = post_json(api_representante, '/api/leads/', {
        'nome_pessoa': "Carla Dias",
        'nome_estabelecimento': "Padaria Dias",
        'cidade': "Santos",
        'telefone': "(13) 99999-0000",
        'email': "carla-arroba-padaria",
    })
    assert resposta.status_code == 400
    assert 'email' in resposta.json()['campos']


@pytest.mark.django_db
def test_sem_autenticacao():
    assert Client().get('/api/leads/').status_code == 401


@pytest.mark.django_db
def test_listagem_respeita_o_dono(api_representante, api_outro, api_admin, lead):
    assert len(api_representante.get('/api/leads/').json()['resultados']) == 1
    assert len(api_outro.get('/api/leads/').json()['resultados']) == 0
    assert len(api_admin.get('/api/leads/').json()['resultados']) == 1


@pytest.mark.django_db
def test_busca_e_filtro_de_status(api_representante, lead, representante):
    Lead.objects.create(
        nome_pessoa="Beatriz Ramos", nome_estabelecimento="Ramos Bebidas",
        cidade="Osasco", telefone="11 4000-0000", status='qualificado',
        representante=representante,
    )

    resposta = api_representante.get('/api/leads/', {'search': 'silva'})
    assert [r['nome_pessoa'] for r in resposta.json()['resultados']] == ["João Silva"]

    resposta = api_representante.get('/api/leads/', {'status': 'qualificado'})
    assert [r['nome_pessoa'] for r in resposta.json()['resultados']] == ["Beatriz Ramos"]


@pytest.mark.django_db
def test_paginacao(api_representante, representante):
    for i in range(5):
        Lead.objects.create(
            nome_pessoa=f"Contato {i}", nome_estabelecimento="Loja",
            cidade="Recife", telefone="81 3000-0000", representante=representante,
        )

    resposta = api_representante.get('/api/leads/', {'limit': 2, 'offset': 1})
    nomes = [r['nome_pessoa'] for r in resposta.json()['resultados']]
    assert nomes == ["Contato 3", "Contato 2"]

    assert api_representante.get('/api/leads/', {'limit': 'dez'}).status_code == 400


@pytest.mark.django_db
def test_ler_lead_de_outro_representante_e_proibido(api_outro, lead):
    assert api_outro.get(f'/api/leads/{lead.id}/').status_code == 403


@pytest.mark.django_db
def test_lead_inexistente(api_admin):
    assert api_admin.get('/api/leads/999999/').status_code == 404


@pytest.mark.django_db
def test_excluir_lead_so_admin(api_representante, api_admin, lead):
    resposta = api_representante.post(f'/api/leads/{lead.id}/excluir/')
    assert resposta.status_code == 403
    assert Lead.objects.filter(id=lead.id).exists()

    resposta = api_admin.delete(f'/api/leads/{lead.id}/excluir/')
    assert resposta.status_code == 200
    assert resposta.json() == {'sucesso': True}
    assert not Lead.objects.filter(id=lead.id).exists()


@pytest.mark.django_db
def test_metodo_nao_permitido(api_admin, lead):
    assert api_admin.get(f'/api/leads/{lead.id}/excluir/').status_code == 405


@pytest.mark.django_db
def test_converter_lead_em_cliente(api_representante, lead, representante, post_json):
    resposta = post_json(api_representante, f'/api/leads/{lead.id}/converter/', {
        'cnpj': "12.345.678/0001-95",
        'condicao_pagamento': "28 dias",
    })

    assert resposta.status_code == 201
    cliente = Cliente.objects.get(id=resposta.json()['id'])
    assert cliente.lead == lead
    assert cliente.nome_pessoa == "João Silva"
    assert cliente.email == lead.email
    assert cliente.cnpj == "12345678000195"
    assert cliente.status == 'ativo'
    assert cliente.representante == representante
    assert cliente.data_conversao is not None

    lead.refresh_from_db()
    assert lead.status == 'convertido'
    historico = HistoricoLead.objects.get(lead_id=lead.id)
    assert (historico.status_anterior, historico.status_novo) == ('novo', 'convertido')
    assert historico.motivo == "Convertido em cliente"


@pytest.mark.django_db
def test_converter_lead_duas_vezes(api_representante, lead, post_json):
    assert post_json(api_representante, f'/api/leads/{lead.id}/converter/', {}).status_code == 201
    assert post_json(api_representante, f'/api/leads/{lead.id}/converter/', {}).status_code == 400
    assert Cliente.objects.filter(lead=lead).count() == 1


@pytest.mark.django_db
def test_conversao_invalida_nao_altera_o_lead(api_representante, lead, post_json):
    resposta = post_json(api_representante, f'/api/leads/{lead.id}/converter/', {'cnpj': "123"})

    assert resposta.status_code == 400
    lead.refresh_from_db()
    assert lead.status == 'novo'
    assert not HistoricoLead.objects.filter(lead_id=lead.id).exists()
