"""
============================================================================
BEARER IDENTITY AUTHENTICATION - Portão de todas as views protegidas
============================================================================
"""
import logging

from django.conf import settings
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

from authentication.identity import SubjectIdentity, Unauthenticated, get_identity_verifier

logger = logging.getLogger(__name__)


class BearerIdentityAuthentication(BaseAuthentication):
    """
    Lê o cabeçalho Authorization e delega a verificação ao IdentityVerifier.

    O DRF executa esta classe em APIView.initial(), antes do handler,
    então uma chamada rejeitada nunca chega à persistência.
    Sem cabeçalho retorna None e o IsAuthenticated responde 401.
    """

    www_authenticate_realm = 'api'

    def authenticate(self, request):
        header_name = getattr(settings, 'SIMPLE_JWT', {}).get('AUTH_HEADER_NAME', 'HTTP_AUTHORIZATION')
        credential = request.META.get(header_name)

        if not credential:
            return None

        try:
            subject_id = get_identity_verifier().verify(credential)
        except Unauthenticated as e:
            logger.warning(f"Credencial rejeitada em {request.path}: {e}")
            raise AuthenticationFailed(str(e))

        return SubjectIdentity(subject_id), credential.split(' ')[1]

    def authenticate_header(self, request):
        return f'Bearer realm="{self.www_authenticate_realm}"'
