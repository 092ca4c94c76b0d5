import pytest
from django.core.exceptions import ValidationError

from leads import ciclo_vida
from leads.models import HistoricoLead, Lead


@pytest.mark.django_db
def test_cenario_joao_silva(api_representante, representante, post_json):
    """
    Cenário:
    - Criar o lead João Silva pela API.
    - Atualizar o status para em_contato.

    Esperado:
    - lead criado com status novo
    - exatamente uma linha de histórico {novo -> em_contato}
    """
    resposta = post_json(api_representante, '/api/leads/', {
        'nome_pessoa': "João Silva",
        'nome_estabelecimento': "Silva Comércio",
        'cidade': "São Paulo",
        'telefone': "(11) 98765-4321",
    })
    assert resposta.status_code == 201
    lead_id = resposta.json()['id']
    assert resposta.json()['status'] == 'novo'
    assert not HistoricoLead.objects.filter(lead_id=lead_id).exists()

    resposta = post_json(api_representante, f'/api/leads/{lead_id}/', {'status': 'em_contato'})
    assert resposta.status_code == 200
    assert resposta.json()['status'] == 'em_contato'

    historico = list(HistoricoLead.objects.filter(lead_id=lead_id))
    assert len(historico) == 1
    assert historico[0].status_anterior == 'novo'
    assert historico[0].status_novo == 'em_contato'
    assert historico[0].usuario == representante
    assert historico[0].motivo == ciclo_vida.MOTIVO_PADRAO


@pytest.mark.django_db
def test_atualizacao_sem_mudar_status_nao_gera_historico(api_representante, lead, post_json):
    resposta = post_json(api_representante, f'/api/leads/{lead.id}/', {
        'status': 'novo',
        'observacoes': "Ligar na segunda-feira",
    })
    assert resposta.status_code == 200
    assert HistoricoLead.objects.filter(lead_id=lead.id).count() == 0

    lead.refresh_from_db()
    assert lead.observacoes == "Ligar na segunda-feira"


@pytest.mark.django_db
def test_motivo_enviado_fica_no_historico(api_representante, lead, post_json):
    post_json(api_representante, f'/api/leads/{lead.id}/', {
        'status': 'perdido',
        'motivo': "Fechou com a concorrência",
    })
    assert HistoricoLead.objects.get(lead_id=lead.id).motivo == "Fechou com a concorrência"


@pytest.mark.django_db
def test_transicao_fora_do_funil_nao_e_recusada(lead, representante):
    historico = ciclo_vida.registrar_status(lead, 'proposta_enviada', representante)

    assert historico.status_anterior == 'novo'
    assert Lead.objects.get(id=lead.id).status == 'proposta_enviada'
    assert not ciclo_vida.segue_funil('novo', 'proposta_enviada')
    assert ciclo_vida.segue_funil('novo', 'em_contato')
    assert ciclo_vida.segue_funil('qualificado', 'perdido')


@pytest.mark.django_db
def test_status_invalido(lead, representante):
    with pytest.raises(ValidationError):
        ciclo_vida.registrar_status(lead, 'arquivado', representante)
    assert HistoricoLead.objects.count() == 0


@pytest.mark.django_db
def test_historico_do_mais_recente_para_o_mais_antigo(api_representante, lead, representante):
    ciclo_vida.registrar_status(lead, 'em_contato', representante)
    ciclo_vida.registrar_status(lead, 'qualificado', representante)

    resposta = api_representante.get(f'/api/leads/{lead.id}/historico/')
    assert resposta.status_code == 200
    novos = [linha['status_novo'] for linha in resposta.json()['resultados']]
    assert novos == ['qualificado', 'em_contato']


@pytest.mark.django_db
def test_historico_nao_pode_ser_alterado_nem_apagado(lead, representante):
    historico = ciclo_vida.registrar_status(lead, 'em_contato', representante)

    historico.motivo = "outro"
    with pytest.raises(ValueError):
        historico.save()
    with pytest.raises(ValueError):
        historico.delete()


@pytest.mark.django_db
def test_historico_sobrevive_a_exclusao_do_lead(api_admin, lead, representante):
    ciclo_vida.registrar_status(lead, 'em_contato', representante)

    resposta = api_admin.post(f'/api/leads/{lead.id}/excluir/')
    assert resposta.status_code == 200
    assert not Lead.objects.filter(id=lead.id).exists()
    assert HistoricoLead.objects.filter(lead_id=lead.id).count() == 1
