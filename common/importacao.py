"""
Importação em lote de Leads e Clientes a partir de planilhas CSV ou XLSX.

- A primeira linha é o cabeçalho; as colunas são associadas aos campos pelo
  nome normalizado (sem acentos, minúsculas, espaços viram '_') e por apelidos.
- Cada linha é validada pelo mesmo form da API e gravada no seu próprio
  savepoint: uma linha com erro não desfaz as outras.
- Duplicados são detetados contra o banco e contra as linhas anteriores do
  próprio arquivo (leads: e-mail ou nome+telefone do mesmo representante;
  clientes: CNPJ ou e-mail).
- O arquivo e o resultado linha a linha ficam registados em Importacao.
"""

import csv
import io
import logging
import os
import unicodedata
import zipfile

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException
from django.core.exceptions import ValidationError
from django.core.files.base import ContentFile
from django.db import transaction

from leads.models import Lead
from leads.services import criar_lead

from .forms import somente_digitos
from .models import Cliente, Importacao
from .services import criar_cliente

logger = logging.getLogger(__name__)

EXTENSOES_PERMITIDAS = ('.csv', '.xlsx')

COLUNAS_LEAD = {
    'nome_pessoa': ('nome_pessoa', 'nome', 'nome_do_contato', 'contato'),
    'nome_estabelecimento': ('nome_estabelecimento', 'estabelecimento', 'empresa'),
    'cidade': ('cidade',),
    'telefone': ('telefone', 'fone', 'celular'),
    'email': ('email', 'e_mail'),
    'observacoes': ('observacoes', 'obs'),
    'fonte_lead': ('fonte_lead', 'fonte', 'origem'),
}

COLUNAS_CLIENTE = {
    'nome_pessoa': ('nome_pessoa', 'nome', 'nome_do_contato', 'contato'),
    'nome_estabelecimento': ('nome_estabelecimento', 'estabelecimento', 'razao_social', 'empresa'),
    'cnpj': ('cnpj',),
    'cpf': ('cpf',),
    'cidade': ('cidade',),
    'telefone': ('telefone', 'fone', 'celular'),
    'email': ('email', 'e_mail'),
    'endereco_completo': ('endereco_completo', 'endereco', 'logradouro'),
    'numero': ('numero',),
    'complemento': ('complemento',),
    'bairro': ('bairro',),
    'cep': ('cep',),
    'observacoes': ('observacoes', 'obs'),
    'limite_credito': ('limite_credito', 'limite'),
    'condicao_pagamento': ('condicao_pagamento', 'condicoes_pagamento', 'pagamento'),
}


def normalizar_coluna(nome):
    texto = unicodedata.normalize('NFKD', str(nome or ''))
    texto = ''.join(c for c in texto if not unicodedata.combining(c))
    return '_'.join(texto.strip().lower().replace('-', ' ').split())


def _texto(valor):
    if valor is None:
        return ''
    if isinstance(valor, float) and valor.is_integer():
        valor = int(valor)
    return str(valor).strip()


def _ler_csv(conteudo):
    try:
        texto = conteudo.decode('utf-8-sig')
    except UnicodeDecodeError:
        texto = conteudo.decode('latin-1')
    try:
        dialeto = csv.Sniffer().sniff(texto[:2048], delimiters=';,')
    except csv.Error:
        dialeto = csv.excel
    return list(csv.reader(io.StringIO(texto), dialeto))


def _ler_xlsx(conteudo):
    wb = openpyxl.load_workbook(io.BytesIO(conteudo), read_only=True, data_only=True)
    try:
        ws = wb.active
        return [list(linha) for linha in ws.iter_rows(values_only=True)]
    finally:
        wb.close()


def ler_planilha(conteudo, nome_arquivo):
    """ Devolve [(numero_da_linha, {coluna_normalizada: valor})] a partir do cabeçalho. """
    ext = os.path.splitext(nome_arquivo or '')[1].lower()
    if ext not in EXTENSOES_PERMITIDAS:
        raise ValidationError("Apenas arquivos CSV ou XLSX são permitidos.")

    try:
        linhas = _ler_xlsx(conteudo) if ext == '.xlsx' else _ler_csv(conteudo)
    except (ValueError, KeyError, OSError, zipfile.BadZipFile, InvalidFileException) as e:
        raise ValidationError(f"Não foi possível ler o arquivo: {e}")

    if not linhas:
        raise ValidationError("O arquivo está vazio.")

    cabecalho = [normalizar_coluna(c) for c in linhas[0]]
    registos = []
    for numero, linha in enumerate(linhas[1:], start=2):
        valores = [_texto(v) for v in linha]
        if not any(valores):
            continue
        registos.append((numero, dict(zip(cabecalho, valores))))
    return registos


def mapear_linha(linha, colunas):
    dados = {}
    for campo, apelidos in colunas.items():
        for apelido in apelidos:
            if linha.get(apelido):
                dados[campo] = linha[apelido]
                break
    return dados


def _mensagem_erro(erro):
    if hasattr(erro, 'error_dict'):
        return "; ".join(f"{campo}: {' '.join(msgs)}" for campo, msgs in erro.message_dict.items())
    return " ".join(erro.messages)


class _DetectorDuplicados:
    """ Guarda as chaves já vistas no arquivo e consulta o banco. """

    def __init__(self, tipo, user):
        self.tipo = tipo
        self.user = user
        self.vistos = set()

    def chaves(self, dados):
        chaves = []
        email = (dados.get('email') or '').lower()
        if email:
            chaves.append(('email', email))
        if self.tipo == 'leads':
            nome = (dados.get('nome_pessoa') or '').lower()
            telefone = somente_digitos(dados.get('telefone'))
            if nome and telefone:
                chaves.append(('nome_telefone', (nome, telefone)))
        else:
            cnpj = somente_digitos(dados.get('cnpj'))
            if cnpj:
                chaves.append(('cnpj', cnpj))
        return chaves

    def _existe_no_banco(self, tipo_chave, valor):
        if self.tipo == 'leads':
            leads = Lead.objects.filter(representante=self.user)
            if tipo_chave == 'email':
                return leads.filter(email__iexact=valor).exists()
            nome, telefone = valor
            return any(
                somente_digitos(t) == telefone
                for t in leads.filter(nome_pessoa__iexact=nome).values_list('telefone', flat=True)
            )
        if tipo_chave == 'cnpj':
            return Cliente.objects.filter(cnpj=valor).exists()
        return Cliente.objects.filter(email__iexact=valor).exists()

    def motivo(self, dados):
        """ Devolve a mensagem de duplicado, ou None. """
        rotulos = {'email': "E-mail duplicado", 'cnpj': "CNPJ duplicado",
                   'nome_telefone': "Lead duplicado (nome e telefone)"}
        for tipo_chave, valor in self.chaves(dados):
            if (tipo_chave, valor) in self.vistos or self._existe_no_banco(tipo_chave, valor):
                return rotulos[tipo_chave]
        return None

    def registrar(self, dados):
        self.vistos.update(self.chaves(dados))


def importar(user, tipo, arquivo):
    """
    Importa a planilha enviada (UploadedFile) e devolve o registo Importacao
    com o resultado de cada linha: {linha, status: sucesso|erro, mensagem}.
    """
    if tipo not in dict(Importacao.TIPO_CHOICES):
        raise ValidationError(f"Tipo de importação inválido: {tipo!r}.")

    conteudo = arquivo.read()
    registos = ler_planilha(conteudo, arquivo.name)

    colunas = COLUNAS_LEAD if tipo == 'leads' else COLUNAS_CLIENTE
    criar = criar_lead if tipo == 'leads' else criar_cliente
    duplicados = _DetectorDuplicados(tipo, user)

    resultado = []
    for numero, linha in registos:
        dados = mapear_linha(linha, colunas)
        motivo = duplicados.motivo(dados)
        if motivo:
            resultado.append({'linha': numero, 'status': 'erro', 'mensagem': motivo})
            continue
        try:
            with transaction.atomic():
                registo = criar(user, dados)
        except ValidationError as e:
            resultado.append({'linha': numero, 'status': 'erro', 'mensagem': _mensagem_erro(e)})
            continue
        duplicados.registrar(dados)
        resultado.append({'linha': numero, 'status': 'sucesso', 'id': registo.id})

    total_sucesso = sum(1 for r in resultado if r['status'] == 'sucesso')
    importacao = Importacao(
        tipo=tipo,
        nome_original=arquivo.name,
        responsavel=user,
        total_linhas=len(resultado),
        total_sucesso=total_sucesso,
        total_erros=len(resultado) - total_sucesso,
        resultado=resultado,
    )
    importacao.arquivo.save(os.path.basename(arquivo.name), ContentFile(conteudo), save=False)
    importacao.save()

    logger.info(
        "Importação concluída. importacao_id=%s, tipo=%s, sucesso=%s, erros=%s",
        importacao.id, tipo, importacao.total_sucesso, importacao.total_erros,
    )
    return importacao
