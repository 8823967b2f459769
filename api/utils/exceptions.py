# api/utils/exceptions.py
"""
Taxonomia de erros da API.

Autenticação usa as exceções do próprio DRF (NotAuthenticated /
AuthenticationFailed, 401).
"""
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound


class InvalidInput(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Dados inválidos'
    default_code = 'invalid_input'


class RecordNotFound(NotFound):
    default_detail = 'Recurso não encontrado'
    default_code = 'not_found'


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Conflito com o estado atual do recurso'
    default_code = 'conflict'


class Unavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'Serviço de persistência indisponível, tente novamente'
    default_code = 'unavailable'
