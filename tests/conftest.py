import json
from decimal import Decimal

import pytest
from django.contrib.auth.models import Group, User
from django.test import Client

from common.models import Cliente, EmpresaRepresentada, Produto
from common.permissoes import GRUPO_ADMIN, GRUPO_REPRESENTANTE
from leads.models import Lead


def _utilizador(username, grupo, **extra):
    user = User.objects.create_user(username=username, password='senha-teste', **extra)
    user.groups.add(Group.objects.get_or_create(name=grupo)[0])
    return user


@pytest.fixture
def administrador(db):
    return _utilizador('administrador', GRUPO_ADMIN, first_name='Ana', last_name='Admin')


@pytest.fixture
def representante(db):
    return _utilizador('representante', GRUPO_REPRESENTANTE, first_name='Rui', last_name='Representante')


@pytest.fixture
def outro_representante(db):
    return _utilizador('outro_representante', GRUPO_REPRESENTANTE)


def _api(user):
    client = Client()
    client.force_login(user)
    return client


@pytest.fixture
def api_admin(administrador):
    return _api(administrador)


@pytest.fixture
def api_representante(representante):
    return _api(representante)


@pytest.fixture
def api_outro(outro_representante):
    return _api(outro_representante)


@pytest.fixture
def empresa(administrador):
    return EmpresaRepresentada.objects.create(
        nome="Alimentos Serra Azul",
        cnpj="11222333000181",
        cidade="Campinas",
        estado="SP",
        criado_por=administrador,
    )


@pytest.fixture
def produto(empresa):
    return Produto.objects.create(
        nome="Café Torrado 500g",
        descricao="Pacote de café torrado e moído",
        codigo_sku="CAF-500",
        empresa=empresa,
        preco_base=Decimal('25.00'),
    )


@pytest.fixture
def cliente(representante):
    return Cliente.objects.create(
        nome_pessoa="Maria Souza",
        nome_estabelecimento="Mercado Souza",
        cnpj="44555666000199",
        cidade="São Paulo",
        telefone="(11) 91234-5678",
        email="maria@mercadosouza.com.br",
        representante=representante,
    )


@pytest.fixture
def lead(representante):
    return Lead.objects.create(
        nome_pessoa="João Silva",
        nome_estabelecimento="Silva Comércio",
        cidade="São Paulo",
        telefone="(11) 98765-4321",
        email="joao@silvacomercio.com.br",
        representante=representante,
    )


@pytest.fixture
def post_json():
    """ POST com corpo JSON, como o front-end envia. """
    def _post(client, url, dados):
        return client.post(url, data=json.dumps(dados), content_type='application/json')
    return _post
