"""
============================================================================
AUTHENTICATION VIEWS
============================================================================
Login com emissão de token bearer e consulta da identidade atual
"""

import logging

from django.conf import settings
from django.contrib.auth import authenticate

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from authentication.serializers import AuthUserSerializer, LoginSerializer
from authentication.services.auth_service import AuthService

logger = logging.getLogger(__name__)


# ============================================================================
# LOGIN
# ============================================================================

@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    """
    Login de profissionais.
    Retorna o token de acesso e os dados do usuário.
    """
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    usuario = authenticate(
        request,
        username=serializer.validated_data['username'],
        password=serializer.validated_data['password'],
    )

    if not usuario:
        raise AuthenticationFailed('Usuário ou senha incorretos')

    access_token = AuthService.issue_access_token(usuario)
    lifetime = settings.SIMPLE_JWT['ACCESS_TOKEN_LIFETIME']

    logger.info(f"Login bem-sucedido: {usuario.username}")

    return Response({
        'access': access_token,
        'token_type': 'Bearer',
        'expires_in': int(lifetime.total_seconds()),
        'user': AuthUserSerializer(usuario).data,
    }, status=status.HTTP_200_OK)


# ============================================================================
# GET ME
# ============================================================================

@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_me(request):
    """
    Identidade do chamador.
    O sujeito vem do token; os dados do profissional só aparecem se ele existir.
    """
    subject_id = request.user.id
    usuario = AuthService.get_current_user(subject_id)

    return Response({
        'subject': subject_id,
        'user': AuthUserSerializer(usuario).data if usuario else None,
    })
