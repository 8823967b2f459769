# authentication/services/auth_service.py
from django.contrib.auth.models import update_last_login
from django.core.exceptions import ValidationError
from rest_framework_simplejwt.tokens import AccessToken

from api.users.models import Usuario


class AuthService:
    @staticmethod
    def issue_access_token(usuario: Usuario) -> str:
        """Emite o token de acesso; o claim "sub" carrega o id do usuário"""
        token = AccessToken.for_user(usuario)
        update_last_login(None, usuario)
        return str(token)

    @staticmethod
    def get_current_user(user_id: str):
        """Profissional correspondente ao sujeito do token, se existir"""
        try:
            return Usuario.objects.get(pk=user_id, is_active=True)
        except (Usuario.DoesNotExist, ValidationError):
            return None
