"""Settings usados pelo pytest (pytest-django)."""

import os
import tempfile

os.environ.setdefault('DJANGO_SECRET_KEY', 'chave-apenas-para-testes')
os.environ.setdefault('DJANGO_DEBUG', 'True')
os.environ.setdefault('DATABASE_URL', 'sqlite://:memory:')

from .settings import *  # noqa: E402,F401,F403

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
DEFAULT_FROM_EMAIL = 'crm@teste.local'
MEDIA_ROOT = tempfile.mkdtemp(prefix='crm-media-')
PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
CRM_LINK_ORCAMENTO = 'https://crm.teste/orcamentos/{id}/'
