"""
============================================================================
AUTHENTICATION MIDDLEWARE
============================================================================
Middleware de segurança do endpoint de login
"""

from django.core.cache import cache
from django.http import JsonResponse

LOGIN_PATH = '/api/auth/login/'


class LoginRateLimitMiddleware:
    """
    Limita tentativas de login por IP.
    Bloqueia depois de 5 tentativas falhas durante 1 minuto.
    """
    MAX_ATTEMPTS = 5
    BLOCK_DURATION = 60  # segundos

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        is_login = request.path == LOGIN_PATH and request.method == 'POST'

        if is_login:
            cache_key = self.get_cache_key(request)
            attempts = cache.get(cache_key, 0)

            if attempts >= self.MAX_ATTEMPTS:
                return JsonResponse({
                    'success': False,
                    'status_code': 429,
                    'message': f'Muitas tentativas. Aguarde {self.BLOCK_DURATION} segundos antes de tentar novamente.',
                    'data': None,
                    'errors': None,
                }, status=429)

            cache.set(cache_key, attempts + 1, self.BLOCK_DURATION)

        response = self.get_response(request)

        # Login bem-sucedido zera o contador
        if is_login and response.status_code == 200:
            cache.delete(self.get_cache_key(request))

        return response

    def get_cache_key(self, request):
        return f'login_attempts_{self.get_client_ip(request)}'

    def get_client_ip(self, request):
        """IP real do cliente, considerando proxies"""
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            return x_forwarded_for.split(',')[0].strip()
        return request.META.get('REMOTE_ADDR')
