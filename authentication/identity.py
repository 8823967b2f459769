"""
============================================================================
IDENTITY VERIFIER
============================================================================
Valida a credencial "<esquema> <token>" e extrai o identificador do sujeito.
Não acessa banco nem cache: a verificação é só assinatura + expiração.
"""
import logging
from dataclasses import dataclass
from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.signals import setting_changed
from django.dispatch import receiver
from rest_framework_simplejwt.backends import TokenBackend
from rest_framework_simplejwt.exceptions import TokenBackendError

logger = logging.getLogger(__name__)


class Unauthenticated(Exception):
    """Credencial ausente, malformada ou com assinatura/expiração inválida"""


@dataclass(frozen=True)
class SubjectIdentity:
    """
    Identidade do chamador extraída de um token válido.

    Não é um usuário do banco: é só o "sub" do token. Expõe os atributos
    que o DRF e o Django consultam em request.user.
    """
    id: str

    is_authenticated = True
    is_anonymous = False
    is_active = True

    @property
    def pk(self):
        return self.id

    def __str__(self):
        return self.id


class IdentityVerifier:
    """
    Verifica credenciais bearer contra um segredo mantido pelo servidor.

    A configuração é recebida no construtor; nada é lido do ambiente
    durante a verificação.
    """

    SUBJECT_CLAIM = 'sub'

    def __init__(self, signing_key: str, algorithm: str = 'HS256', leeway=0):
        if not signing_key:
            raise ImproperlyConfigured('A chave de assinatura dos tokens não foi configurada')
        self._backend = TokenBackend(algorithm, signing_key=signing_key, leeway=leeway)

    def verify(self, credential) -> str:
        """
        Retorna o identificador do sujeito de uma credencial "<esquema> <token>".

        Só o segundo termo é verificado; o esquema não é interpretado.

        Raises:
            Unauthenticated: credencial ausente, malformada, com assinatura
                inválida, expirada ou sem "sub".
        """
        if not credential:
            raise Unauthenticated('Token de acesso ausente')

        parts = credential.split(' ')
        if len(parts) != 2 or not parts[1]:
            raise Unauthenticated('Cabeçalho de autorização malformado')

        try:
            payload = self._backend.decode(parts[1], verify=True)
        except TokenBackendError as e:
            raise Unauthenticated('Token de acesso inválido ou expirado') from e

        subject = payload.get(self.SUBJECT_CLAIM)
        if not isinstance(subject, str) or not subject:
            raise Unauthenticated('Token sem identificador de sujeito')

        return subject


@lru_cache(maxsize=None)
def get_identity_verifier() -> IdentityVerifier:
    """Verificador único, construído a partir de settings.SIMPLE_JWT"""
    jwt_settings = getattr(settings, 'SIMPLE_JWT', {})
    return IdentityVerifier(
        signing_key=jwt_settings.get('SIGNING_KEY', settings.SECRET_KEY),
        algorithm=jwt_settings.get('ALGORITHM', 'HS256'),
        leeway=jwt_settings.get('LEEWAY', 0),
    )


@receiver(setting_changed)
def reset_identity_verifier(*, setting, **kwargs):
    if setting in ('SIMPLE_JWT', 'SECRET_KEY'):
        get_identity_verifier.cache_clear()
        logger.debug("Verificador de identidade recriado após mudança de configuração")
