from django.urls import path
from . import views

urlpatterns = [
    # Clientes
    path('api/clientes/', views.clientes, name='clientes'),
    path('api/clientes/check/', views.check_cliente, name='check_cliente'),
    path('api/clientes/<int:cliente_id>/', views.cliente_detalhe, name='cliente_detalhe'),
    path('api/clientes/<int:cliente_id>/excluir/', views.cliente_excluir, name='cliente_excluir'),

    # Empresas Representadas
    path('api/empresas/', views.empresas, name='empresas'),
    path('api/empresas/<int:empresa_id>/', views.empresa_detalhe, name='empresa_detalhe'),
    path('api/empresas/<int:empresa_id>/excluir/', views.empresa_excluir, name='empresa_excluir'),

    # Produtos
    path('api/produtos/', views.produtos, name='produtos'),
    path('api/produtos/<int:produto_id>/', views.produto_detalhe, name='produto_detalhe'),
    path('api/produtos/<int:produto_id>/excluir/', views.produto_excluir, name='produto_excluir'),

    # Integrações
    path('api/cep/<str:cep>/', views.busca_cep, name='busca_cep'),
    path('api/importacao/<str:tipo>/', views.importacao, name='importacao'),
]
