# Em: vendas/models.py

from django.conf import settings
from django.db import models


class Orcamento(models.Model):
    STATUS_CHOICES = (
        ('rascunho', 'Rascunho'),
        ('enviado', 'Enviado'),
        ('aceito', 'Aceito'),
        ('rejeitado', 'Rejeitado'),
        ('expirado', 'Expirado'),
    )

    numero = models.CharField(max_length=50, unique=True, verbose_name="Número do Orçamento")

    # Relações (Usando "string notation" para evitar importações circulares)
    cliente = models.ForeignKey(
        'common.Cliente',
        on_delete=models.PROTECT,
        related_name="orcamentos",
        verbose_name="Cliente"
    )
    empresa = models.ForeignKey(
        'common.EmpresaRepresentada',
        on_delete=models.PROTECT,
        related_name="orcamentos",
        verbose_name="Empresa Representada"
    )
    representante = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="orcamentos",
        verbose_name="Representante"
    )

    data_orcamento = models.DateTimeField(auto_now_add=True, verbose_name="Data do Orçamento")
    data_validade = models.DateField(null=True, blank=True, verbose_name="Validade")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='rascunho')

    # Totais (calculados por vendas.calculos, nunca informados pelo utilizador)
    valor_total = models.DecimalField(max_digits=12, decimal_places=2, verbose_name="Subtotal dos Itens")
    desconto_percentual = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True, verbose_name="Desconto (%)")
    desconto_valor = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True, verbose_name="Desconto (R$)")
    valor_liquido = models.DecimalField(max_digits=12, decimal_places=2, verbose_name="Valor Líquido")

    observacoes = models.TextField(blank=True, null=True, verbose_name="Observações")
    condicoes_pagamento = models.TextField(blank=True, null=True, verbose_name="Condições de Pagamento")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Orçamento"
        verbose_name_plural = "Orçamentos"
        ordering = ['-created_at']

    def __str__(self):
        return f"Orçamento {self.numero} - {self.cliente.nome_estabelecimento}"


class ItemOrcamento(models.Model):
    """ Cópia do produto no momento do orçamento (não acompanha alterações posteriores do produto). """
    orcamento = models.ForeignKey(Orcamento, on_delete=models.CASCADE, related_name="itens", verbose_name="Orçamento")
    produto = models.ForeignKey(
        'common.Produto',
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name="itens_orcamento",
        verbose_name="Produto de Referência"
    )
    nome_produto = models.CharField(max_length=255, verbose_name="Produto")
    descricao = models.TextField(blank=True, null=True, verbose_name="Descrição")
    quantidade = models.DecimalField(max_digits=10, decimal_places=2, verbose_name="Quantidade")
    valor_unitario = models.DecimalField(max_digits=12, decimal_places=2, verbose_name="Valor Unitário")
    valor_total = models.DecimalField(max_digits=12, decimal_places=2, verbose_name="Total do Item")
    ordem = models.PositiveIntegerField(verbose_name="Ordem")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Item do Orçamento"
        verbose_name_plural = "Itens do Orçamento"
        ordering = ['ordem', 'id']

    def __str__(self):
        return f"{self.quantidade} x {self.nome_produto} ({self.orcamento.numero})"


class Venda(models.Model):
    STATUS_CHOICES = (
        ('pendente', 'Pendente'),
        ('confirmada', 'Confirmada'),
        ('entregue', 'Entregue'),
        ('cancelada', 'Cancelada'),
    )

    numero = models.CharField(max_length=50, unique=True, verbose_name="Número da Venda")
    orcamento = models.ForeignKey(
        Orcamento,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name="vendas",
        verbose_name="Orçamento de Origem"
    )
    cliente = models.ForeignKey(
        'common.Cliente',
        on_delete=models.PROTECT,
        related_name="compras",
        verbose_name="Cliente"
    )
    empresa = models.ForeignKey(
        'common.EmpresaRepresentada',
        on_delete=models.PROTECT,
        related_name="vendas",
        verbose_name="Empresa Representada"
    )
    representante = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="vendas",
        verbose_name="Representante"
    )

    valor_total = models.DecimalField(max_digits=12, decimal_places=2, verbose_name="Valor Total")
    comissao_percentual = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True, verbose_name="Comissão (%)")
    comissao_valor = models.DecimalField(max_digits=12, decimal_places=2, default=0, verbose_name="Comissão (R$)")

    data_venda = models.DateTimeField(auto_now_add=True, verbose_name="Data da Venda")
    data_entrega_prevista = models.DateField(null=True, blank=True, verbose_name="Entrega Prevista")
    data_entrega_real = models.DateField(null=True, blank=True, verbose_name="Entrega Realizada")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pendente')
    observacoes = models.TextField(blank=True, null=True, verbose_name="Observações")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"Venda {self.numero} - {self.cliente.nome_estabelecimento}"
