from decimal import Decimal

import pytest

from comissoes.calculos import calcular_comissao


def test_comissao_percentual():
    assert calcular_comissao(Decimal('10000'), Decimal('10')) == Decimal('1000.00')


@pytest.mark.parametrize('percentual', [None, ''])
def test_sem_percentual_comissao_zero(percentual):
    assert calcular_comissao(Decimal('10000'), percentual) == Decimal('0.00')


def test_percentual_zero():
    assert calcular_comissao(Decimal('10000'), Decimal('0')) == Decimal('0.00')


def test_arredondamento_bancario():
    # 12.50 x 1% = 0.125 -> 0.12
    assert calcular_comissao(Decimal('12.50'), Decimal('1')) == Decimal('0.12')
    # 13.50 x 1% = 0.135 -> 0.14
    assert calcular_comissao(Decimal('13.50'), Decimal('1')) == Decimal('0.14')


@pytest.mark.parametrize('percentual', [Decimal('-0.01'), Decimal('100.5')])
def test_percentual_invalido(percentual):
    with pytest.raises(ValueError):
        calcular_comissao(Decimal('100'), percentual)


def test_valor_total_negativo():
    with pytest.raises(ValueError):
        calcular_comissao(Decimal('-1'), Decimal('5'))
