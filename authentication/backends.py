from django.contrib.auth.backends import BaseBackend
from django.core.exceptions import ValidationError
from api.users.models import Usuario


class UsuarioAuthBackend(BaseBackend):
    def authenticate(self, request, username=None, password=None, **kwargs):
        try:
            usuario = Usuario.objects.get(username=username)
        except Usuario.DoesNotExist:
            return None
        if usuario.check_password(password) and usuario.is_active:
            return usuario
        return None

    def get_user(self, user_id):
        try:
            return Usuario.objects.get(pk=user_id, is_active=True)
        except (Usuario.DoesNotExist, ValidationError):
            return None
