from django.contrib import admin
from django.utils.html import format_html
from .models import EmpresaRepresentada, Produto, Cliente, Importacao

@admin.register(EmpresaRepresentada)
class EmpresaRepresentadaAdmin(admin.ModelAdmin):
    list_display = ('nome', 'cnpj', 'cidade', 'estado', 'ativo')
    search_fields = ('nome', 'cnpj')
    list_filter = ('ativo', 'estado')
    readonly_fields = ('criado_por',)

    def save_model(self, request, obj, form, change):
        if not change:
            obj.criado_por = request.user
        super().save_model(request, obj, form, change)

@admin.register(Produto)
class ProdutoAdmin(admin.ModelAdmin):
    list_display = ('nome', 'codigo_sku', 'empresa', 'categoria', 'preco_base', 'ativo')
    search_fields = ('nome', 'codigo_sku')
    list_filter = ('empresa', 'categoria', 'ativo')

@admin.register(Cliente)
class ClienteAdmin(admin.ModelAdmin):
    list_display = ('nome_estabelecimento', 'nome_pessoa', 'cnpj', 'cidade', 'status', 'representante')
    search_fields = ('nome_pessoa', 'nome_estabelecimento', 'cnpj', 'email')
    list_filter = ('status', 'representante')
    raw_id_fields = ('lead', 'representante')

@admin.register(Importacao)
class ImportacaoAdmin(admin.ModelAdmin):
    list_display = ('id', 'tipo', 'responsavel', 'total_linhas', 'total_sucesso', 'total_erros', 'link_para_o_arquivo', 'data_importacao')
    list_filter = ('tipo', 'responsavel')
    readonly_fields = ('tipo', 'arquivo', 'nome_original', 'responsavel', 'total_linhas', 'total_sucesso', 'total_erros', 'resultado')
    def has_add_permission(self, request): return False

    def link_para_o_arquivo(self, obj):
        if obj.arquivo:
            return format_html('<a href="{}" target="_blank">Abrir Planilha</a>', obj.arquivo.url)
        return "Nenhum arquivo"
    link_para_o_arquivo.short_description = "Arquivo"
