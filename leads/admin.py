from django.contrib import admin
from .models import Lead, HistoricoLead


class HistoricoLeadInline(admin.TabularInline):
    model = HistoricoLead
    extra = 0
    fields = ('status_anterior', 'status_novo', 'usuario', 'motivo', 'data_alteracao')
    readonly_fields = ('status_anterior', 'status_novo', 'usuario', 'motivo', 'data_alteracao')
    can_delete = False
    def has_add_permission(self, request, obj=None): return False


@admin.register(Lead)
class LeadAdmin(admin.ModelAdmin):
    list_display = ('nome_pessoa', 'nome_estabelecimento', 'cidade', 'status', 'fonte_lead', 'representante', 'created_at')
    search_fields = ('nome_pessoa', 'nome_estabelecimento', 'email', 'telefone')
    list_filter = ('status', 'fonte_lead', 'representante')
    # Status só muda pela API, para passar pelo histórico
    readonly_fields = ('status',)
    inlines = [HistoricoLeadInline]


@admin.register(HistoricoLead)
class HistoricoLeadAdmin(admin.ModelAdmin):
    list_display = ('lead', 'status_anterior', 'status_novo', 'usuario', 'data_alteracao')
    list_filter = ('status_novo', 'usuario')
    search_fields = ('lead__nome_pessoa', 'motivo')
    def has_add_permission(self, request): return False
    def has_change_permission(self, request, obj=None): return False
    def has_delete_permission(self, request, obj=None): return False
