# authentication/tests/test_auth_views.py

import pytest
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from api.users.factories import UsuarioFactory
from authentication.identity import get_identity_verifier

LOGIN_URL = '/api/auth/login/'
ME_URL = '/api/auth/me/'


@pytest.mark.django_db
class TestAuthenticationViews:
    """Login e consulta da identidade atual"""

    @pytest.fixture(autouse=True)
    def setup(self, db):
        self.client = APIClient()
        self.usuario = UsuarioFactory(username='dr.carlos', nome='Carlos Mendes', password='senha-forte-123')
        self.inativo = UsuarioFactory(username='inativo', is_active=False)

    def test_login_retorna_token(self):
        response = self.client.post(
            LOGIN_URL,
            {'username': 'dr.carlos', 'password': 'senha-forte-123'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['token_type'] == 'Bearer'
        assert response.data['user']['username'] == 'dr.carlos'
        assert 'password' not in response.data['user']
        subject = get_identity_verifier().verify(f"Bearer {response.data['access']}")
        assert subject == str(self.usuario.id)

    def test_login_atualiza_ultimo_acesso(self):
        self.client.post(LOGIN_URL, {'username': 'dr.carlos', 'password': 'senha-forte-123'}, format='json')

        self.usuario.refresh_from_db()
        assert self.usuario.last_login is not None

    def test_senha_incorreta(self):
        response = self.client.post(LOGIN_URL, {'username': 'dr.carlos', 'password': 'errada'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False
        assert response['WWW-Authenticate'].startswith('Bearer')

    def test_usuario_inativo(self):
        response = self.client.post(LOGIN_URL, {'username': 'inativo', 'password': 'senha12345'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['message'] == 'Usuário ou senha incorretos'

    def test_campos_obrigatorios(self):
        response = self.client.post(LOGIN_URL, {'username': 'dr.carlos'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data['errors']

    def test_bloqueio_apos_tentativas(self):
        for _ in range(5):
            self.client.post(LOGIN_URL, {'username': 'dr.carlos', 'password': 'errada'}, format='json')

        response = self.client.post(
            LOGIN_URL,
            {'username': 'dr.carlos', 'password': 'senha-forte-123'},
            format='json'
        )

        assert response.status_code == 429

    def test_me_com_token_do_login(self):
        login = self.client.post(
            LOGIN_URL,
            {'username': 'dr.carlos', 'password': 'senha-forte-123'},
            format='json'
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")

        response = self.client.get(ME_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['subject'] == str(self.usuario.id)
        assert response.data['user']['nome'] == 'Carlos Mendes'

    def test_me_sem_token(self):
        assert self.client.get(ME_URL).status_code == status.HTTP_401_UNAUTHORIZED

    def test_me_sujeito_sem_cadastro(self):
        token = AccessToken()
        token['sub'] = 'integracao-externa'
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')

        response = self.client.get(ME_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'subject': 'integracao-externa', 'user': None}
