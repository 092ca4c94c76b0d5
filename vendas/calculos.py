"""
Cálculo do total de um orçamento.

subtotal = soma(quantidade * valor_unitario), cada linha já arredondada ao centavo
desconto percentual -> liquido = subtotal * (1 - p/100)
desconto em valor   -> liquido = subtotal - d
sem desconto        -> liquido = subtotal

Regras fixadas aqui:
- só um modo de desconto por orçamento (os dois juntos são recusados);
- percentual entre 0 e 100, desconto em valor >= 0;
- o líquido nunca fica negativo: desconto maior que o subtotal é recusado;
- valores monetários arredondados ao centavo com ROUND_HALF_EVEN;
- o subtotal é a soma dos totais de linha gravados em ItemOrcamento.
"""

from collections import namedtuple
from decimal import Decimal, ROUND_HALF_EVEN

CENTAVO = Decimal('0.01')
CEM = Decimal(100)

TotaisOrcamento = namedtuple('TotaisOrcamento', ['subtotal', 'desconto', 'liquido'])


def arredondar(valor):
    return Decimal(valor).quantize(CENTAVO, rounding=ROUND_HALF_EVEN)


def total_item(quantidade, valor_unitario):
    return arredondar(Decimal(quantidade) * Decimal(valor_unitario))


def calcular_subtotal(itens):
    """ itens: iterável de pares (quantidade, valor_unitario). """
    subtotal = Decimal(0)
    for quantidade, valor_unitario in itens:
        if Decimal(quantidade) < 0 or Decimal(valor_unitario) < 0:
            raise ValueError("Quantidade e valor unitário não podem ser negativos.")
        subtotal += total_item(quantidade, valor_unitario)
    return arredondar(subtotal)


def calcular_totais(itens, desconto_percentual=None, desconto_valor=None):
    subtotal = calcular_subtotal(itens)

    if desconto_percentual is not None and desconto_valor is not None:
        raise ValueError("Informe apenas um tipo de desconto: percentual ou valor.")

    if desconto_percentual is not None:
        percentual = Decimal(desconto_percentual)
        if not Decimal(0) <= percentual <= CEM:
            raise ValueError("O desconto percentual deve estar entre 0 e 100.")
        liquido = arredondar(subtotal * (1 - percentual / CEM))
    elif desconto_valor is not None:
        valor = Decimal(desconto_valor)
        if valor < 0:
            raise ValueError("O desconto em valor não pode ser negativo.")
        if valor > subtotal:
            raise ValueError("O desconto não pode ser maior que o subtotal dos itens.")
        liquido = arredondar(subtotal - valor)
    else:
        liquido = subtotal

    return TotaisOrcamento(subtotal=subtotal, desconto=subtotal - liquido, liquido=liquido)
