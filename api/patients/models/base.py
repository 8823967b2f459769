# patients/models/base.py

# Modelo base com campos comuns
import uuid
from django.db import models


class BaseModel(models.Model):
    """Modelo base abstrato com campos comuns a todos os modelos"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Sujeito do token de quem criou / alterou por último
    criado_por = models.TextField(null=True, blank=True, editable=False, verbose_name="Criado por")
    atualizado_por = models.TextField(null=True, blank=True, editable=False, verbose_name="Atualizado por")

    criado_em = models.DateTimeField(auto_now_add=True, verbose_name="Data de criação")
    atualizado_em = models.DateTimeField(auto_now=True, verbose_name="Data de modificação")

    class Meta:
        abstract = True
