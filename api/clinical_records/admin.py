from django.contrib import admin

from api.clinical_records.models import Prontuario


@admin.register(Prontuario)
class ProntuarioAdmin(admin.ModelAdmin):
    list_display = ('id', 'paciente', 'profissional', 'data_atendimento')
    search_fields = ('paciente__nome', 'paciente__cpf', 'descricao')
    list_select_related = ('paciente', 'profissional')
    readonly_fields = ('id', 'criado_por', 'atualizado_por', 'criado_em', 'atualizado_em')
