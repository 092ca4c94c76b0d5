from django.urls import path
from . import views

urlpatterns = [
    # Resumo de Comissões
    path('api/comissoes/', views.comissoes, name='comissoes'),

    # Exports de Comissões
    path('comissoes/export/csv/', views.export_comissoes_csv, name='export_comissoes_csv'),
    path('comissoes/export/xlsx/', views.export_comissoes_xlsx, name='export_comissoes_xlsx'),
]
