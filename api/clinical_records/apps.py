from django.apps import AppConfig


class ClinicalRecordsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'api.clinical_records'
    label = 'clinical_records'
    verbose_name = 'Prontuários'

    def ready(self):
        import api.clinical_records.signals  # noqa: F401
