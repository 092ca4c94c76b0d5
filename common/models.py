# Em: common/models.py

import os
import uuid
from django.conf import settings
from django.db import models


def get_importacao_upload_path(instance, filename):
    """
    Cria um caminho padronizado para a planilha importada:
    media/importacoes/<tipo>/<uuid>.<ext>
    """
    ext = os.path.splitext(filename)[1]
    unique_filename = f"{uuid.uuid4()}{ext}"
    return os.path.join('importacoes', instance.tipo, unique_filename)


class EmpresaRepresentada(models.Model):
    nome = models.CharField(max_length=255, verbose_name="Nome")
    cnpj = models.CharField(max_length=18, unique=True, verbose_name="CNPJ")
    logo_url = models.URLField(blank=True, null=True, verbose_name="URL do Logo")
    descricao = models.TextField(blank=True, null=True, verbose_name="Descrição")
    telefone = models.CharField(max_length=20, blank=True, null=True, verbose_name="Telefone")
    email = models.EmailField(max_length=320, blank=True, null=True, verbose_name="E-mail")
    website = models.CharField(max_length=255, blank=True, null=True, verbose_name="Website")
    endereco = models.CharField(max_length=255, blank=True, null=True, verbose_name="Endereço")
    cidade = models.CharField(max_length=100, blank=True, null=True, verbose_name="Cidade")
    estado = models.CharField(max_length=2, blank=True, null=True, verbose_name="UF")
    ativo = models.BooleanField(default=True, verbose_name="Ativa")

    criado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="empresas_criadas",
        verbose_name="Criado por"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Empresa Representada"
        verbose_name_plural = "Empresas Representadas"
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.nome} ({self.cnpj})"


class Produto(models.Model):
    nome = models.CharField(max_length=255, verbose_name="Nome do Produto")
    descricao = models.TextField(blank=True, null=True, verbose_name="Descrição")
    codigo_sku = models.CharField(max_length=100, unique=True, verbose_name="Código SKU")
    empresa = models.ForeignKey(
        EmpresaRepresentada,
        on_delete=models.PROTECT,
        related_name="produtos",
        verbose_name="Empresa Representada"
    )
    categoria = models.CharField(max_length=100, blank=True, null=True, verbose_name="Categoria")
    preco_base = models.DecimalField(max_digits=12, decimal_places=2, verbose_name="Preço Base")
    ativo = models.BooleanField(default=True, verbose_name="Ativo")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.nome} [{self.codigo_sku}]"


class Cliente(models.Model):
    STATUS_CHOICES = (
        ('ativo', 'Ativo'),
        ('inativo', 'Inativo'),
        ('suspenso', 'Suspenso'),
    )

    nome_pessoa = models.CharField(max_length=255, verbose_name="Nome do Contato")
    nome_estabelecimento = models.CharField(max_length=255, verbose_name="Estabelecimento")
    cnpj = models.CharField(max_length=18, unique=True, blank=True, null=True, verbose_name="CNPJ")
    cpf = models.CharField(max_length=14, blank=True, null=True, verbose_name="CPF")
    cidade = models.CharField(max_length=100, verbose_name="Cidade")
    telefone = models.CharField(max_length=20, verbose_name="Telefone")
    email = models.EmailField(max_length=320, verbose_name="E-mail")

    endereco_completo = models.CharField(max_length=255, blank=True, null=True, verbose_name="Endereço")
    numero = models.CharField(max_length=20, blank=True, null=True, verbose_name="Número")
    complemento = models.CharField(max_length=255, blank=True, null=True, verbose_name="Complemento")
    bairro = models.CharField(max_length=100, blank=True, null=True, verbose_name="Bairro")
    cep = models.CharField(max_length=10, blank=True, null=True, verbose_name="CEP")
    observacoes = models.TextField(blank=True, null=True, verbose_name="Observações")

    # (string notation para evitar importação circular com 'leads')
    lead = models.ForeignKey(
        'leads.Lead',
        on_delete=models.SET_NULL,
        related_name="clientes",
        null=True, blank=True,
        verbose_name="Lead de Origem"
    )
    representante = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="clientes",
        verbose_name="Representante"
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='ativo')
    data_conversao = models.DateTimeField(blank=True, null=True, verbose_name="Data de Conversão")
    limite_credito = models.DecimalField(
        max_digits=12, decimal_places=2, blank=True, null=True,
        verbose_name="Limite de Crédito"
    )
    condicao_pagamento = models.CharField(max_length=100, blank=True, null=True, verbose_name="Condição de Pagamento")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.nome_estabelecimento} ({self.nome_pessoa})"


class Importacao(models.Model):
    TIPO_CHOICES = (
        ('leads', 'Leads'),
        ('clientes', 'Clientes'),
    )
    tipo = models.CharField(max_length=20, choices=TIPO_CHOICES)
    arquivo = models.FileField(upload_to=get_importacao_upload_path, verbose_name="Arquivo")
    nome_original = models.CharField(max_length=255, blank=True, null=True, verbose_name="Nome Original")
    responsavel = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="importacoes",
        verbose_name="Responsável"
    )
    data_importacao = models.DateTimeField(auto_now_add=True, verbose_name="Data da Importação")
    total_linhas = models.PositiveIntegerField(default=0)
    total_sucesso = models.PositiveIntegerField(default=0)
    total_erros = models.PositiveIntegerField(default=0)
    resultado = models.JSONField(default=list, blank=True, verbose_name="Resultado por Linha")

    class Meta:
        verbose_name = "Importação"
        verbose_name_plural = "Importações"
        ordering = ['-data_importacao']

    def __str__(self):
        return f"Importação #{self.id} ({self.get_tipo_display()}) - {self.total_sucesso}/{self.total_linhas}"
