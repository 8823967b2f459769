import uuid

from django.db import models


class Odontograma(models.Model):
    """
    Documento de procedimentos por dente de um prontuário.

    `dados` guarda {"procedures": [...]} e só é lido pelo codec.
    `versao` é incrementada a cada escrita e protege contra perda de
    atualizações concorrentes.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    prontuario = models.OneToOneField(
        'clinical_records.Prontuario',
        on_delete=models.CASCADE,
        related_name='odontograma',
        verbose_name='Prontuário'
    )
    dados = models.JSONField(default=dict, blank=True, verbose_name='Dados')
    versao = models.PositiveIntegerField(default=1, verbose_name='Revisão')

    criado_em = models.DateTimeField(auto_now_add=True, verbose_name='Data de criação')
    atualizado_em = models.DateTimeField(auto_now=True, verbose_name='Data de modificação')

    class Meta:
        db_table = 'odontogramas'
        verbose_name = 'Odontograma'
        verbose_name_plural = 'Odontogramas'

    def __str__(self):
        return f"Odontograma do prontuário {self.prontuario_id} (rev. {self.versao})"
