import pytest
from rest_framework import status
from rest_framework_simplejwt.tokens import AccessToken

from api.clinical_records.factories import ProntuarioFactory
from api.clinical_records.models import Prontuario
from api.patients.factories import PacienteFactory


def prontuarios_url(paciente_id, prontuario_id=None):
    url = f'/api/patients/{paciente_id}/records/'
    if prontuario_id is not None:
        url += f'{prontuario_id}/'
    return url


@pytest.mark.django_db
class TestProntuarioAPI:
    """Prontuários aninhados ao paciente"""

    def test_criar(self, auth_client, paciente, profissional):
        response = auth_client.post(
            prontuarios_url(paciente.id),
            {'descricao': 'Dor no dente 36', 'profissional': str(profissional.id)},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['paciente'] == str(paciente.id)
        assert response.data['profissional_nome'] == 'Ana Souza'
        prontuario = Prontuario.objects.get(id=response.data['id'])
        assert prontuario.criado_por == str(profissional.id)

    def test_criar_para_paciente_inexistente(self, auth_client):
        response = auth_client.post(
            prontuarios_url('00000000-0000-0000-0000-000000000000'),
            {'descricao': 'x'},
            format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_listar_somente_do_paciente(self, auth_client, prontuario):
        ProntuarioFactory()

        response = auth_client.get(prontuarios_url(prontuario.paciente_id))

        assert response.status_code == status.HTTP_200_OK
        assert [p['id'] for p in response.data['results']] == [str(prontuario.id)]

    def test_detalhe(self, auth_client, prontuario):
        response = auth_client.get(prontuarios_url(prontuario.paciente_id, prontuario.id))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['descricao'] == prontuario.descricao

    def test_detalhe_de_outro_paciente(self, auth_client, prontuario):
        outro = PacienteFactory()

        response = auth_client.get(prontuarios_url(outro.id, prontuario.id))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_criar_com_sujeito_de_identificador_longo(self, api_client, paciente):
        token = AccessToken()
        token['sub'] = 'integracao|' + 'y' * 120
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')

        response = api_client.post(prontuarios_url(paciente.id), {'descricao': 'Retorno'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Prontuario.objects.get(id=response.data['id']).criado_por == token['sub']
