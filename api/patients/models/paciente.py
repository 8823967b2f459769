# patients/models/paciente.py
from django.db import models
from django.core.validators import MinLengthValidator, RegexValidator
from .base import BaseModel
from .constants import STATUS_CHOICES, STATUS_ATIVO, CPF_REGEX


class Paciente(BaseModel):
    """Modelo principal de pacientes"""

    # ================== DADOS PESSOAIS ==================
    nome = models.CharField(
        max_length=150,
        validators=[MinLengthValidator(3, message="O nome deve ter pelo menos 3 caracteres.")],
        verbose_name="Nome completo"
    )
    cpf = models.CharField(
        max_length=14,
        unique=True,
        validators=[RegexValidator(regex=CPF_REGEX, message="CPF deve estar no formato 000.000.000-00.")],
        verbose_name="CPF"
    )
    data_nascimento = models.DateField(verbose_name="Data de nascimento")
    genero = models.CharField(max_length=20, blank=True, null=True, verbose_name="Gênero")

    # ================== CONTATO ==================
    email = models.EmailField(blank=True, null=True, verbose_name="E-mail")
    telefone_celular = models.CharField(max_length=20, verbose_name="Telefone celular")
    telefone_fixo = models.CharField(max_length=20, blank=True, null=True, verbose_name="Telefone fixo")

    # ================== ENDEREÇO ==================
    cep = models.CharField(max_length=9, blank=True, null=True, verbose_name="CEP")
    logradouro = models.CharField(max_length=255, blank=True, null=True)
    numero = models.CharField(max_length=20, blank=True, null=True, verbose_name="Número")
    complemento = models.CharField(max_length=100, blank=True, null=True)
    bairro = models.CharField(max_length=100, blank=True, null=True)
    cidade = models.CharField(max_length=100, blank=True, null=True)
    estado = models.CharField(max_length=2, blank=True, null=True, verbose_name="UF")

    # ================== CONTATO DE EMERGÊNCIA ==================
    contato_emergencia_nome = models.CharField(max_length=150, blank=True, null=True)
    contato_emergencia_telefone = models.CharField(max_length=20, blank=True, null=True)
    contato_emergencia_parentesco = models.CharField(max_length=50, blank=True, null=True)

    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_ATIVO, verbose_name="Status")
    avatar_url = models.CharField(max_length=255, blank=True, null=True, verbose_name="Avatar")

    class Meta:
        db_table = 'pacientes'
        verbose_name = "Paciente"
        verbose_name_plural = "Pacientes"
        ordering = ['nome']
        indexes = [
            models.Index(fields=['nome'], name='pacientes_nome_4b1c2e_idx'),
            models.Index(fields=['status'], name='pacientes_status_9d8a7f_idx'),
        ]

    def __str__(self):
        return f"{self.nome} - {self.cpf}"
