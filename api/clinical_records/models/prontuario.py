from django.conf import settings
from django.db import models
from django.utils import timezone

from api.patients.models.base import BaseModel
from api.patients.models.paciente import Paciente


class Prontuario(BaseModel):
    """
    Prontuário de um atendimento do paciente.
    Possui no máximo um odontograma, criado sob demanda.
    """

    paciente = models.ForeignKey(
        Paciente,
        on_delete=models.PROTECT,
        related_name='prontuarios',
        verbose_name='Paciente'
    )

    profissional = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='prontuarios',
        verbose_name='Profissional responsável'
    )

    data_atendimento = models.DateTimeField(default=timezone.now, verbose_name='Data do atendimento')
    descricao = models.TextField(blank=True, verbose_name='Descrição')

    class Meta:
        db_table = 'prontuarios'
        verbose_name = 'Prontuário'
        verbose_name_plural = 'Prontuários'
        ordering = ['-data_atendimento']

    def __str__(self):
        return f"Prontuário {self.id} - {self.paciente.nome}"
