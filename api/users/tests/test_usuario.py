import pytest
from django.core.exceptions import ValidationError

from api.users.models import Usuario


@pytest.mark.django_db
class TestUsuarioModel:

    def test_senha_armazenada_com_bcrypt(self):
        usuario = Usuario.objects.create_user(
            username='dra.beatriz',
            email='beatriz@clinica.com.br',
            password='segredo-123',
            nome='Beatriz Rocha',
        )

        assert usuario.password.startswith('$2')
        assert usuario.check_password('segredo-123')
        assert not usuario.check_password('outra')

    def test_superusuario(self):
        admin = Usuario.objects.create_superuser(
            username='admin',
            email='admin@clinica.com.br',
            password='admin-123',
            nome='Administrador',
        )

        assert admin.is_staff
        assert admin.has_perm('qualquer.permissao')

    def test_telefone_invalido(self):
        usuario = Usuario(username='x', email='x@clinica.com.br', nome='Xavier', telefone='123')
        usuario.set_password('senha12345')

        with pytest.raises(ValidationError):
            usuario.full_clean()
