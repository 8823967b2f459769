"""
Fixtures compartilhadas pelos testes da API.
"""
import pytest
from django.core.cache import cache
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from api.clinical_records.factories import ProntuarioFactory
from api.patients.factories import PacienteFactory
from api.users.factories import UsuarioFactory


@pytest.fixture(autouse=True)
def limpar_cache():
    """Contadores de login e throttling ficam no cache local"""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def profissional(db):
    return UsuarioFactory(username='dra.ana', nome='Ana Souza')


@pytest.fixture
def token(profissional):
    return str(AccessToken.for_user(profissional))


@pytest.fixture
def auth_client(api_client, token):
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return api_client


@pytest.fixture
def paciente(db):
    return PacienteFactory(nome='Maria Oliveira', cpf='123.456.789-00')


@pytest.fixture
def prontuario(paciente, profissional):
    return ProntuarioFactory(paciente=paciente, profissional=profissional)
