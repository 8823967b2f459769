# api/utils/exception_handlers.py
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import OperationalError
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
from rest_framework.exceptions import ValidationError
import logging

from api.utils.exceptions import Unavailable

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Trata todas as exceções e devolve o formato padrão de erro.

    Args:
        exc: Exceção levantada
        context: Contexto da view

    Returns:
        Response: Resposta formatada
    """
    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(detail=_django_validation_detail(exc))
    elif isinstance(exc, OperationalError):
        # Timeout ou queda do banco: nada foi aplicado parcialmente
        logger.error(f"Persistência indisponível: {exc}", exc_info=True)
        exc = Unavailable()

    # Handler padrão do DRF (Http404, PermissionDenied, APIException)
    response = exception_handler(exc, context)

    if response is not None:
        logger.warning(
            f"API Error: {exc.__class__.__name__} - {str(exc)}",
            extra={'status_code': response.status_code}
        )

        response.data = {
            'success': False,
            'status_code': response.status_code,
            'message': _get_error_message(exc, response),
            'data': None,
            'errors': _format_errors(response.data)
        }
    else:
        # Exceção não tratada pelo DRF (500): sem detalhes internos na resposta
        logger.critical(
            f"Unhandled Exception: {exc.__class__.__name__} - {str(exc)}",
            exc_info=exc,
        )

        response = Response(
            {
                'success': False,
                'status_code': 500,
                'message': 'Erro interno do servidor',
                'data': None,
                'errors': {'detail': ['Ocorreu um erro inesperado']}
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return response


def _django_validation_detail(exc):
    if hasattr(exc, 'message_dict'):
        return exc.message_dict
    return {'detail': exc.messages}


def _get_error_message(exc, response):
    """
    Extrai a mensagem principal do erro.
    """
    if hasattr(exc, 'detail'):
        if isinstance(exc.detail, dict) and exc.detail:
            first_error = next(iter(exc.detail.values()))
            return str(first_error[0]) if isinstance(first_error, list) else str(first_error)
        if isinstance(exc.detail, list) and exc.detail:
            return str(exc.detail[0])
        return str(exc.detail)

    status_messages = {
        400: 'Erro nos dados enviados',
        401: 'Credenciais inválidas',
        403: 'Sem permissão para esta ação',
        404: 'Recurso não encontrado',
        405: 'Método não permitido',
        409: 'Conflito com o estado atual do recurso',
        503: 'Serviço indisponível',
    }

    return status_messages.get(response.status_code, 'Erro na requisição')


def _format_errors(data):
    """
    Formata erros de validação.
    """
    if isinstance(data, dict):
        errors = {}
        for field, messages in data.items():
            if isinstance(messages, list):
                errors[field] = messages
            elif isinstance(messages, dict):
                errors[field] = _format_errors(messages)
            else:
                errors[field] = [str(messages)]
        return errors
    elif isinstance(data, list):
        return {'non_field_errors': data}
    else:
        return {'detail': [str(data)]}
