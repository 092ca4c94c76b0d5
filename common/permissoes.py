"""
Regras de acesso do CRM.

- Admin (superuser ou grupo 'Admin'): acesso total.
- Representante: só vê e altera os registos em que é o representante.
- Exclusões e o cadastro de empresas/produtos são exclusivos do admin.

As funções levantam PermissionDenied; a conversão para HTTP 403 fica em
common.api.api_view.
"""

from django.core.exceptions import PermissionDenied

GRUPO_ADMIN = 'Admin'
GRUPO_REPRESENTANTE = 'Representante'


def get_user_permissions(user):
    """ Verifica os grupos do utilizador e retorna um dicionário de flags. """
    grupos = set(user.groups.values_list('name', flat=True))
    return {
        'is_admin': user.is_superuser or GRUPO_ADMIN in grupos,
        'is_representante': GRUPO_REPRESENTANTE in grupos,
    }


def is_admin(user):
    return bool(user.is_authenticated and get_user_permissions(user)['is_admin'])


def exigir_admin(user):
    if not is_admin(user):
        raise PermissionDenied("Apenas administradores podem executar esta ação.")


def filtrar_por_representante(queryset, user):
    """ Admin vê tudo; os demais apenas os registos em que são o representante. """
    if is_admin(user):
        return queryset
    return queryset.filter(representante=user)


def verificar_dono(obj, user):
    if is_admin(user):
        return
    if obj.representante_id != user.id:
        raise PermissionDenied("Você não tem permissão para aceder a este registo.")
