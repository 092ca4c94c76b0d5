from decimal import Decimal, ROUND_HALF_EVEN

CENTAVO = Decimal('0.01')


def calcular_comissao(valor_total, percentual=None):
    """
    Comissão da venda: valor_total * percentual / 100, ou zero sem percentual.
    Arredondada ao centavo com ROUND_HALF_EVEN (arredondamento bancário).
    """
    total = Decimal(valor_total)
    if total < 0:
        raise ValueError("O valor total da venda não pode ser negativo.")
    if percentual is None or percentual == '':
        return Decimal('0.00')

    percentual = Decimal(percentual)
    if not Decimal(0) <= percentual <= Decimal(100):
        raise ValueError("O percentual de comissão deve estar entre 0 e 100.")
    return (total * percentual / Decimal(100)).quantize(CENTAVO, rounding=ROUND_HALF_EVEN)
