"""
Peças partilhadas pelas views JSON de todas as apps.

api_view      -> autenticação, método HTTP e tradução das exceções de serviço
                 (ValidationError -> 400, PermissionDenied -> 403, Http404 -> 404)
ler_dados     -> corpo JSON ou form-encoded como dict
serializar    -> instância de modelo -> dict pronto para JsonResponse
paginar       -> limit/offset com os limites definidos em settings
"""

import json
import logging
from functools import wraps

from django.conf import settings
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import models
from django.http import Http404, JsonResponse

logger = logging.getLogger(__name__)


def _corpo_validacao(erro):
    if hasattr(erro, 'error_dict'):
        return {'erro': "Dados inválidos.", 'campos': erro.message_dict}
    return {'erro': " ".join(erro.messages)}


def api_view(metodos=('GET',)):
    """ Decorator das views JSON: exige sessão e converte os erros de serviço. """
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped_view(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return JsonResponse({'erro': "Autenticação necessária."}, status=401)
            if request.method not in metodos:
                return JsonResponse({'erro': "Método não permitido."}, status=405)
            try:
                return view_func(request, *args, **kwargs)
            except ValidationError as e:
                return JsonResponse(_corpo_validacao(e), status=400)
            except PermissionDenied as e:
                logger.info("Acesso negado. user_id=%s, view=%s", request.user.id, view_func.__name__)
                return JsonResponse({'erro': str(e) or "Acesso negado."}, status=403)
            except Http404:
                return JsonResponse({'erro': "Registo não encontrado."}, status=404)
        return _wrapped_view
    return decorator


def ler_dados(request):
    """ Lê o corpo do pedido (JSON ou formulário) como dict. """
    if request.content_type == 'application/json':
        try:
            dados = json.loads(request.body or b'{}')
        except ValueError:
            raise ValidationError("JSON inválido no corpo do pedido.")
        if not isinstance(dados, dict):
            raise ValidationError("O corpo do pedido deve ser um objeto JSON.")
        return dados
    return request.POST.dict()


def validar_form(form):
    """ Levanta ValidationError com os erros por campo quando o form é inválido. """
    if not form.is_valid():
        raise ValidationError(form.errors.as_data())
    return form


def mesclar_com_instancia(form_class, instance, dados):
    """
    Atualização parcial: parte dos valores atuais da instância e sobrepõe
    apenas os campos enviados.
    """
    base = form_class(instance=instance).initial
    base.update(dados)
    return base


def serializar(obj, **extras):
    dados = {}
    for field in obj._meta.concrete_fields:
        valor = getattr(obj, field.attname)
        if isinstance(field, models.FileField):
            valor = valor.name if valor else None
        dados[field.attname] = valor
    dados.update(extras)
    return dados


def _inteiro(valor, nome, padrao):
    if valor in (None, ''):
        return padrao
    try:
        numero = int(valor)
    except (TypeError, ValueError):
        raise ValidationError({nome: ["Informe um número inteiro."]})
    if numero < 0:
        raise ValidationError({nome: ["O valor não pode ser negativo."]})
    return numero


def paginar(queryset, limit=None, offset=None):
    limit = _inteiro(limit, 'limit', settings.CRM_PAGINACAO_PADRAO)
    offset = _inteiro(offset, 'offset', 0)
    limit = min(limit, settings.CRM_PAGINACAO_MAXIMA)
    return queryset[offset:offset + limit]


def resposta_lista(registos, **extras):
    corpo = {'resultados': [serializar(r) for r in registos]}
    corpo.update(extras)
    return JsonResponse(corpo)
