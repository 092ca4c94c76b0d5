# Em: core/urls.py

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    path('admin/', admin.site.urls),

    # APIs de cadastros, CEP e importação (de 'common')
    path('', include('common.urls')),

    # Leads e histórico de status (de 'leads')
    path('', include('leads.urls')),

    # Orçamentos, Vendas e exportações (de 'vendas')
    path('', include('vendas.urls')),

    # Resumo e exportações de Comissões (de 'comissoes')
    path('', include('comissoes.urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
