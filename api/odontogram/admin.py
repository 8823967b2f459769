from django.contrib import admin

from api.odontogram.models import Odontograma


@admin.register(Odontograma)
class OdontogramaAdmin(admin.ModelAdmin):
    list_display = ('id', 'prontuario', 'versao', 'atualizado_em')
    search_fields = ('prontuario__paciente__nome',)
    list_select_related = ('prontuario', 'prontuario__paciente')
    # Escritas passam pelo serviço para respeitar a revisão
    readonly_fields = ('id', 'prontuario', 'dados', 'versao', 'criado_em', 'atualizado_em')
