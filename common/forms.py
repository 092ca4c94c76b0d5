import re
from decimal import Decimal

from django import forms
from django.core.validators import MinValueValidator

from .models import Cliente, EmpresaRepresentada, Produto


def somente_digitos(valor):
    return re.sub(r'\D', '', valor or '')


class ClienteForm(forms.ModelForm):
    """
    Dados aceites na criação/edição de um cliente.
    representante, lead e data_conversao são definidos pelo serviço, nunca pelo pedido.
    """
    limite_credito = forms.DecimalField(
        required=False, max_digits=12, decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )

    class Meta:
        model = Cliente
        fields = [
            'nome_pessoa', 'nome_estabelecimento', 'cnpj', 'cpf',
            'cidade', 'telefone', 'email',
            'endereco_completo', 'numero', 'complemento', 'bairro', 'cep',
            'observacoes', 'status', 'limite_credito', 'condicao_pagamento',
        ]

    def __init__(self, *args, **kwargs):
        super(ClienteForm, self).__init__(*args, **kwargs)
        self.fields['status'].required = False

    def clean_cnpj(self):
        cnpj = somente_digitos(self.cleaned_data.get('cnpj'))
        if not cnpj:
            return None
        if len(cnpj) != 14:
            raise forms.ValidationError("O CNPJ deve conter 14 dígitos.")
        return cnpj

    def clean_cpf(self):
        cpf = somente_digitos(self.cleaned_data.get('cpf'))
        if not cpf:
            return None
        if len(cpf) != 11:
            raise forms.ValidationError("O CPF deve conter 11 dígitos.")
        return cpf

    def clean_cep(self):
        cep = somente_digitos(self.cleaned_data.get('cep'))
        return cep or None

    def clean_status(self):
        return self.cleaned_data.get('status') or 'ativo'


class EmpresaForm(forms.ModelForm):
    class Meta:
        model = EmpresaRepresentada
        fields = [
            'nome', 'cnpj', 'logo_url', 'descricao', 'telefone', 'email',
            'website', 'endereco', 'cidade', 'estado', 'ativo',
        ]

    def clean_cnpj(self):
        cnpj = somente_digitos(self.cleaned_data.get('cnpj'))
        if len(cnpj) != 14:
            raise forms.ValidationError("O CNPJ deve conter 14 dígitos.")
        return cnpj

    def clean_estado(self):
        estado = (self.cleaned_data.get('estado') or '').strip().upper()
        if estado and len(estado) != 2:
            raise forms.ValidationError("Informe a UF com 2 letras.")
        return estado or None


class ProdutoForm(forms.ModelForm):
    preco_base = forms.DecimalField(
        max_digits=12, decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )

    class Meta:
        model = Produto
        fields = ['nome', 'descricao', 'codigo_sku', 'empresa', 'categoria', 'preco_base', 'ativo']

    def clean_codigo_sku(self):
        return (self.cleaned_data.get('codigo_sku') or '').strip()
