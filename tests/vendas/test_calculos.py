from decimal import Decimal

import pytest

from vendas.calculos import calcular_subtotal, calcular_totais, total_item


ITENS = [(Decimal('2'), Decimal('250.00')), (Decimal('1'), Decimal('500.00'))]


def test_sem_desconto_liquido_igual_a_soma_dos_itens():
    totais = calcular_totais(ITENS)
    assert totais.subtotal == Decimal('1000.00')
    assert totais.liquido == Decimal('1000.00')
    assert totais.desconto == Decimal('0.00')


def test_desconto_percentual():
    totais = calcular_totais(ITENS, desconto_percentual=Decimal('10'))
    assert totais.liquido == Decimal('900.00')
    assert totais.desconto == Decimal('100.00')


def test_desconto_em_valor():
    totais = calcular_totais(ITENS, desconto_valor=Decimal('150'))
    assert totais.liquido == Decimal('850.00')


def test_sem_itens_liquido_zero():
    assert calcular_totais([]).liquido == Decimal('0.00')


def test_os_dois_descontos_juntos_sao_recusados():
    with pytest.raises(ValueError):
        calcular_totais(ITENS, desconto_percentual=Decimal('10'), desconto_valor=Decimal('50'))


@pytest.mark.parametrize('percentual', [Decimal('-1'), Decimal('100.01')])
def test_percentual_fora_do_intervalo(percentual):
    with pytest.raises(ValueError):
        calcular_totais(ITENS, desconto_percentual=percentual)


def test_desconto_maior_que_subtotal_e_recusado():
    with pytest.raises(ValueError):
        calcular_totais(ITENS, desconto_valor=Decimal('1000.01'))


def test_desconto_igual_ao_subtotal_zera_o_liquido():
    assert calcular_totais(ITENS, desconto_valor=Decimal('1000')).liquido == Decimal('0.00')


def test_quantidade_negativa_e_recusada():
    with pytest.raises(ValueError):
        calcular_subtotal([(Decimal('-1'), Decimal('10'))])


def test_arredondamento_bancario():
    # 3 x 0.335 = 1.005 -> 1.00 (meio para o par)
    assert total_item(Decimal('3'), Decimal('0.335')) == Decimal('1.00')
    # 3 x 0.345 = 1.035 -> 1.04
    assert total_item(Decimal('3'), Decimal('0.345')) == Decimal('1.04')


def test_subtotal_soma_as_linhas_arredondadas():
    # 1.5 x 0.33 = 0.495 -> 0.50 por linha; sem arredondar por linha daria 0.99
    itens = [(Decimal('1.5'), Decimal('0.33')), (Decimal('1.5'), Decimal('0.33'))]
    assert calcular_subtotal(itens) == Decimal('1.00')
    assert calcular_subtotal(itens) == sum(total_item(q, v) for q, v in itens)
