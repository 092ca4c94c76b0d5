from django.urls import path
from . import views

urlpatterns = [
    # --- Orçamentos ---
    path('api/orcamentos/', views.orcamentos, name='orcamentos'),
    path('api/orcamentos/<int:orcamento_id>/', views.orcamento_detalhe, name='orcamento_detalhe'),
    path('api/orcamentos/<int:orcamento_id>/excluir/', views.orcamento_excluir, name='orcamento_excluir'),
    path('api/orcamentos/<int:orcamento_id>/enviar/', views.orcamento_enviar, name='orcamento_enviar'),

    # --- Configurações ---
    path('api/configuracoes/testar-email/', views.testar_email, name='testar_email'),

    # --- Vendas ---
    path('api/vendas/', views.vendas, name='vendas'),
    path('api/vendas/<int:venda_id>/', views.venda_detalhe, name='venda_detalhe'),
    path('api/vendas/<int:venda_id>/excluir/', views.venda_excluir, name='venda_excluir'),

    # --- Rotas de Exportação (Vendas) ---
    path('vendas/export/csv/', views.export_vendas_csv, name='export_vendas_csv'),
    path('vendas/export/xlsx/', views.export_vendas_xlsx, name='export_vendas_xlsx'),
]
