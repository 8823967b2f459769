# patients/signals.py
from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver
from .models import Paciente
import logging

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Paciente)
def paciente_audit(sender, instance, created, **kwargs):
    """Auditoria de pacientes"""
    if created:
        logger.info(f"[AUDIT] Paciente criado: {instance.nome} (ID: {instance.id}) por {instance.criado_por}")
    else:
        logger.info(f"[AUDIT] Paciente atualizado: {instance.nome} (ID: {instance.id}) por {instance.atualizado_por}")


@receiver(post_delete, sender=Paciente)
def paciente_excluido_audit(sender, instance, **kwargs):
    logger.info(f"[AUDIT] Paciente excluído: {instance.nome} (ID: {instance.id})")
