# api/clinical_records/signals.py
import logging

from django.db.models.signals import post_save
from django.dispatch import receiver

from api.clinical_records.models import Prontuario

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Prontuario)
def prontuario_audit(sender, instance, created, **kwargs):
    if created:
        logger.info(
            f"[AUDIT] Prontuário criado: {instance.id} (paciente {instance.paciente_id}) por {instance.criado_por}"
        )
