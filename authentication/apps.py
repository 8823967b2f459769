from django.apps import AppConfig


class AuthenticationConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'authentication'
    label = 'authentication'
    verbose_name = 'Autenticação'

    def ready(self):
        """Registra o receiver que recria o verificador quando SIMPLE_JWT muda"""
        import authentication.identity  # noqa: F401
