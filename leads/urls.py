from django.urls import path
from . import views

urlpatterns = [
    path('api/leads/', views.leads, name='leads'),
    path('api/leads/<int:lead_id>/', views.lead_detalhe, name='lead_detalhe'),
    path('api/leads/<int:lead_id>/excluir/', views.lead_excluir, name='lead_excluir'),
    path('api/leads/<int:lead_id>/historico/', views.lead_historico, name='lead_historico'),
    path('api/leads/<int:lead_id>/converter/', views.lead_converter, name='lead_converter'),
]
