from django.apps import AppConfig


class ComissoesConfig(AppConfig):
    name = 'comissoes'
    verbose_name = 'Comissões'
