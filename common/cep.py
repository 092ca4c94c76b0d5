"""
Consulta de endereço por CEP na API ViaCEP (https://viacep.com.br).

A consulta é best-effort: qualquer falha de rede ou resposta inesperada é
registada no log e devolvida como None. Quem chama formata/valida o CEP antes.
"""

import http.client
import json
import logging
import re
import urllib.request
from dataclasses import asdict, dataclass

from django.conf import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Endereco:
    cep: str
    logradouro: str
    complemento: str
    bairro: str
    cidade: str
    uf: str

    def as_dict(self):
        return asdict(self)


def limpar_cep(cep):
    return re.sub(r'\D', '', cep or '')


def validar_cep(cep):
    return len(limpar_cep(cep)) == 8


def formatar_cep(cep):
    """ Formata no padrão XXXXX-XXX; devolve o valor original se não tiver 8 dígitos. """
    digitos = limpar_cep(cep)
    if len(digitos) != 8:
        return cep
    return f"{digitos[:5]}-{digitos[5:]}"


def buscar_endereco_por_cep(cep):
    digitos = limpar_cep(cep)
    if len(digitos) != 8:
        logger.warning("CEP inválido para consulta: %r", cep)
        return None

    url = settings.VIACEP_URL.format(cep=digitos)
    try:
        with urllib.request.urlopen(url, timeout=settings.VIACEP_TIMEOUT) as resposta:
            dados = json.loads(resposta.read().decode('utf-8'))
    except (OSError, http.client.HTTPException, ValueError):
        logger.exception("Erro ao consultar o ViaCEP. cep=%s", digitos)
        return None

    # O ViaCEP responde {"erro": true} quando o CEP não existe
    if not isinstance(dados, dict) or dados.get('erro'):
        return None

    return Endereco(
        cep=dados.get('cep') or formatar_cep(digitos),
        logradouro=dados.get('logradouro', ''),
        complemento=dados.get('complemento', ''),
        bairro=dados.get('bairro', ''),
        cidade=dados.get('localidade', ''),
        uf=dados.get('uf', ''),
    )
