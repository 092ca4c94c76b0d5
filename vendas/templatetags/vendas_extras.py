from decimal import Decimal, InvalidOperation

from django import template

register = template.Library()


@register.filter
def moeda(valor):
    """ Decimal('1234.5') -> 'R$ 1.234,50' """
    try:
        valor = Decimal(valor or 0)
    except (InvalidOperation, TypeError, ValueError):
        return valor
    texto = f"{valor:,.2f}".replace(',', '_').replace('.', ',').replace('_', '.')
    return f"R$ {texto}"


@register.filter
def status_to_color(status_value):
    mapping = {
        # Status Orçamento
        'rascunho': '#6c757d', 'enviado': '#0d6efd',
        'aceito': '#198754', 'rejeitado': '#dc3545', 'expirado': '#fd7e14',

        # Status Venda
        'pendente': '#6c757d', 'confirmada': '#198754',
        'entregue': '#0dcaf0', 'cancelada': '#dc3545',
    }
    return mapping.get(status_value, '#212529')
