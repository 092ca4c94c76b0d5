# Em: vendas/forms.py

from decimal import Decimal

from django import forms
from django.core.validators import MaxValueValidator, MinValueValidator

from .models import ItemOrcamento, Orcamento, Venda

VALIDADORES_PERCENTUAL = [MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))]
VALIDADORES_NAO_NEGATIVO = [MinValueValidator(Decimal('0'))]


class OrcamentoForm(forms.ModelForm):
    """
    Cabeçalho do orçamento. Os itens chegam numa lista à parte (ItemOrcamentoForm)
    e os totais são sempre calculados pelo serviço.
    """
    desconto_percentual = forms.DecimalField(
        required=False, max_digits=5, decimal_places=2, validators=VALIDADORES_PERCENTUAL
    )
    desconto_valor = forms.DecimalField(
        required=False, max_digits=12, decimal_places=2, validators=VALIDADORES_NAO_NEGATIVO
    )

    class Meta:
        model = Orcamento
        fields = [
            'cliente', 'empresa', 'data_validade', 'status',
            'desconto_percentual', 'desconto_valor',
            'observacoes', 'condicoes_pagamento',
        ]

    def __init__(self, *args, **kwargs):
        super(OrcamentoForm, self).__init__(*args, **kwargs)
        self.fields['status'].required = False

    def clean_status(self):
        return self.cleaned_data.get('status') or 'rascunho'

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get('desconto_percentual') is not None and cleaned_data.get('desconto_valor') is not None:
            raise forms.ValidationError(
                "Informe apenas um tipo de desconto: percentual ou valor."
            )
        return cleaned_data


class ItemOrcamentoForm(forms.ModelForm):
    """
    Um item do orçamento. Com 'produto' informado, nome, descrição e preço
    em falta são copiados do cadastro do produto.
    """
    quantidade = forms.DecimalField(max_digits=10, decimal_places=2)
    valor_unitario = forms.DecimalField(
        required=False, max_digits=12, decimal_places=2, validators=VALIDADORES_NAO_NEGATIVO
    )

    class Meta:
        model = ItemOrcamento
        fields = ['produto', 'nome_produto', 'descricao', 'quantidade', 'valor_unitario', 'ordem']

    def __init__(self, *args, **kwargs):
        super(ItemOrcamentoForm, self).__init__(*args, **kwargs)
        self.fields['nome_produto'].required = False
        self.fields['ordem'].required = False

    def clean_quantidade(self):
        quantidade = self.cleaned_data.get('quantidade')
        if quantidade is not None and quantidade <= 0:
            raise forms.ValidationError("A quantidade deve ser maior que zero.")
        return quantidade

    def clean(self):
        cleaned_data = super().clean()
        produto = cleaned_data.get('produto')
        if produto:
            if not cleaned_data.get('nome_produto'):
                cleaned_data['nome_produto'] = produto.nome
            if not cleaned_data.get('descricao'):
                cleaned_data['descricao'] = produto.descricao
            if cleaned_data.get('valor_unitario') is None:
                cleaned_data['valor_unitario'] = produto.preco_base
        if not cleaned_data.get('nome_produto'):
            self.add_error('nome_produto', "Informe o nome do produto.")
        if cleaned_data.get('valor_unitario') is None and 'valor_unitario' not in self.errors:
            self.add_error('valor_unitario', "Informe o valor unitário.")
        return cleaned_data


class VendaForm(forms.ModelForm):
    """
    Dados da venda. Com 'orcamento' informado, cliente, empresa e valor_total
    em falta vêm do orçamento de origem (valor_total = valor líquido).
    """
    valor_total = forms.DecimalField(
        required=False, max_digits=12, decimal_places=2, validators=VALIDADORES_NAO_NEGATIVO
    )
    comissao_percentual = forms.DecimalField(
        required=False, max_digits=5, decimal_places=2, validators=VALIDADORES_PERCENTUAL
    )

    class Meta:
        model = Venda
        fields = [
            'orcamento', 'cliente', 'empresa', 'valor_total', 'comissao_percentual',
            'data_entrega_prevista', 'data_entrega_real', 'status', 'observacoes',
        ]

    def __init__(self, *args, **kwargs):
        super(VendaForm, self).__init__(*args, **kwargs)
        self.fields['cliente'].required = False
        self.fields['empresa'].required = False
        self.fields['status'].required = False

    def clean_status(self):
        return self.cleaned_data.get('status') or 'pendente'

    def clean(self):
        cleaned_data = super().clean()
        orcamento = cleaned_data.get('orcamento')
        if orcamento:
            for campo in ('cliente', 'empresa'):
                valor = cleaned_data.get(campo)
                if valor is None:
                    cleaned_data[campo] = getattr(orcamento, campo)
                elif valor != getattr(orcamento, campo):
                    self.add_error(campo, "Não corresponde ao orçamento de origem.")
            if cleaned_data.get('valor_total') is None:
                cleaned_data['valor_total'] = orcamento.valor_liquido

        for campo in ('cliente', 'empresa', 'valor_total'):
            if cleaned_data.get(campo) is None and campo not in self.errors:
                self.add_error(campo, "Este campo é obrigatório.")
        return cleaned_data
