import io

import openpyxl
import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from common.importacao import ler_planilha, normalizar_coluna
from common.models import Cliente, Importacao
from leads.models import Lead


CSV_LEADS = (
    "Nome;Estabelecimento;Cidade;Telefone;E-mail\n"
    "Ana Prado;Prado Doces;Campinas;(19) 98888-1111;ana@pradodoces.com.br\n"
    "João S.;Outra Loja;Santos;(13) 97777-2222;joao@silvacomercio.com.br\n"
    "Ana Prado;Prado Filial;Campinas;19 98888-1111;filial@pradodoces.com.br\n"
    "Pedro Lima;Lima Bar;;(11) 90000-0000;pedro@limabar.com.br\n"
)


def _csv(conteudo, nome='leads.csv'):
    return SimpleUploadedFile(nome, conteudo.encode('utf-8'), content_type='text/csv')


def test_normalizar_coluna():
    assert normalizar_coluna(" Nome do Contato ") == 'nome_do_contato'
    assert normalizar_coluna("Observações") == 'observacoes'
    assert normalizar_coluna("E-mail") == 'e_mail'


def test_ler_planilha_ignora_linhas_vazias():
    conteudo = "nome,cidade\nAna,Campinas\n,\nRui,Recife\n".encode('utf-8')
    registos = ler_planilha(conteudo, 'dados.csv')
    assert registos == [
        (2, {'nome': 'Ana', 'cidade': 'Campinas'}),
        (4, {'nome': 'Rui', 'cidade': 'Recife'}),
    ]


@pytest.mark.django_db
def test_importar_leads_com_duplicados(api_representante, representante, lead):
    resposta = api_representante.post('/api/importacao/leads/', {'arquivo': _csv(CSV_LEADS)})

    assert resposta.status_code == 201
    corpo = resposta.json()
    assert (corpo['total_linhas'], corpo['total_sucesso'], corpo['total_erros']) == (4, 1, 3)

    resultado = {r['linha']: r for r in corpo['resultado']}
    assert resultado[2]['status'] == 'sucesso'
    assert resultado[3] == {'linha': 3, 'status': 'erro', 'mensagem': "E-mail duplicado"}
    assert resultado[4] == {'linha': 4, 'status': 'erro', 'mensagem': "Lead duplicado (nome e telefone)"}
    assert resultado[5]['status'] == 'erro'
    assert 'cidade' in resultado[5]['mensagem']

    novo = Lead.objects.get(id=resultado[2]['id'])
    assert novo.representante == representante
    assert novo.status == 'novo'

    importacao = Importacao.objects.get(id=corpo['id'])
    assert importacao.responsavel == representante
    assert importacao.nome_original == 'leads.csv'
    assert importacao.arquivo.name.startswith('importacoes/leads/')


@pytest.mark.django_db
def test_duplicado_de_lead_e_por_representante(api_outro, outro_representante, lead):
    conteudo = (
        "nome;estabelecimento;cidade;telefone;email\n"
        "João Silva;Silva Comércio;São Paulo;(11) 98765-4321;joao@silvacomercio.com.br\n"
    )
    resposta = api_outro.post('/api/importacao/leads/', {'arquivo': _csv(conteudo)})

    assert resposta.json()['total_sucesso'] == 1
    assert Lead.objects.filter(representante=outro_representante).count() == 1


@pytest.mark.django_db
def test_importar_clientes_xlsx(api_representante, representante, cliente):
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.append(["Nome", "Razão Social", "CNPJ", "Cidade", "Telefone", "Email", "Limite"])
    ws.append(["Lia Moura", "Moura Mercearia", "11.111.111/0001-11", "Niterói", "21 2222-3333", "lia@moura.com.br", 1500])
    ws.append(["Outra Maria", "Souza Filial", "44.555.666/0001-99", "São Paulo", "11 1111-1111", "filial@souza.com.br", None])
    arquivo = io.BytesIO()
    wb.save(arquivo)

    upload = SimpleUploadedFile(
        'clientes.xlsx', arquivo.getvalue(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    )
    resposta = api_representante.post('/api/importacao/clientes/', {'arquivo': upload})

    assert resposta.status_code == 201
    resultado = resposta.json()['resultado']
    assert resultado[0]['status'] == 'sucesso'
    assert resultado[1] == {'linha': 3, 'status': 'erro', 'mensagem': "CNPJ duplicado"}

    novo = Cliente.objects.get(id=resultado[0]['id'])
    assert novo.cnpj == "11111111000111"
    assert novo.nome_estabelecimento == "Moura Mercearia"
    assert novo.representante == representante


@pytest.mark.django_db
def test_extensao_invalida(api_representante):
    upload = SimpleUploadedFile('leads.txt', b"nome\nAna\n", content_type='text/plain')
    resposta = api_representante.post('/api/importacao/leads/', {'arquivo': upload})

    assert resposta.status_code == 400
    assert resposta.json()['erro'] == "Apenas arquivos CSV ou XLSX são permitidos."
    assert not Importacao.objects.exists()


@pytest.mark.django_db
def test_xlsx_corrompido(api_representante):
    upload = SimpleUploadedFile('leads.xlsx', b"isto nao e um xlsx")
    resposta = api_representante.post('/api/importacao/leads/', {'arquivo': upload})

    assert resposta.status_code == 400
    assert resposta.json()['erro'].startswith("Não foi possível ler o arquivo")
    assert not Importacao.objects.exists()


@pytest.mark.django_db
def test_tipo_invalido(api_representante):
    resposta = api_representante.post('/api/importacao/produtos/', {'arquivo': _csv("nome\nx\n")})
    assert resposta.status_code == 400


@pytest.mark.django_db
def test_sem_arquivo(api_representante):
    resposta = api_representante.post('/api/importacao/leads/', {})
    assert resposta.status_code == 400
    assert 'arquivo' in resposta.json()['campos']
