# Em: vendas/admin.py

from django.contrib import admin
from .models import Orcamento, ItemOrcamento, Venda


class ItemOrcamentoInline(admin.TabularInline):
    model = ItemOrcamento
    extra = 0
    fields = ('ordem', 'produto', 'nome_produto', 'quantidade', 'valor_unitario', 'valor_total')
    readonly_fields = ('valor_total',)
    raw_id_fields = ('produto',)


@admin.register(Orcamento)
class OrcamentoAdmin(admin.ModelAdmin):
    list_display = ('numero', 'cliente', 'empresa', 'representante', 'valor_liquido', 'status', 'data_orcamento')
    search_fields = ('numero', 'cliente__nome_estabelecimento', 'representante__username')
    list_filter = ('status', 'empresa', 'representante')
    inlines = [ItemOrcamentoInline]
    # Totais só mudam pela API (vendas.services), que recalcula a partir dos itens
    readonly_fields = ('numero', 'valor_total', 'valor_liquido')
    raw_id_fields = ('cliente', 'empresa', 'representante')


@admin.register(Venda)
class VendaAdmin(admin.ModelAdmin):
    list_display = ('numero', 'cliente', 'empresa', 'representante', 'valor_total', 'comissao_valor', 'status', 'data_venda')
    search_fields = ('numero', 'cliente__nome_estabelecimento', 'representante__username')
    list_filter = ('status', 'empresa', 'representante')
    readonly_fields = ('numero', 'comissao_valor')
    raw_id_fields = ('orcamento', 'cliente', 'empresa', 'representante')
