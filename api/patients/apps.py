from django.apps import AppConfig


class PatientsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'api.patients'
    label = 'patients'
    verbose_name = 'Pacientes'

    def ready(self):
        # Importa os signals quando a aplicação inicia
        import api.patients.signals  # noqa: F401
