# api/patients/admin.py
from django.contrib import admin

from .models.paciente import Paciente


@admin.register(Paciente)
class PacienteAdmin(admin.ModelAdmin):
    list_display = ('cpf', 'nome', 'telefone_celular', 'cidade', 'status', 'criado_em')
    list_filter = ('status', 'estado')
    search_fields = ('nome', 'cpf', 'telefone_celular', 'email')
    ordering = ('nome',)
    readonly_fields = ('id', 'criado_por', 'atualizado_por', 'criado_em', 'atualizado_em')
