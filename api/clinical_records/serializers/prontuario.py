from rest_framework import serializers

from api.clinical_records.models import Prontuario
from api.users.models import Usuario


class ProntuarioSerializer(serializers.ModelSerializer):
    """Leitura e escrita de prontuários"""

    paciente = serializers.UUIDField(source='paciente_id', read_only=True)
    profissional = serializers.PrimaryKeyRelatedField(
        queryset=Usuario.objects.filter(is_active=True),
        required=False,
        allow_null=True,
    )
    profissional_nome = serializers.CharField(source='profissional.nome', read_only=True, default=None)

    class Meta:
        model = Prontuario
        fields = [
            'id',
            'paciente',
            'profissional',
            'profissional_nome',
            'data_atendimento',
            'descricao',
            'criado_por',
            'criado_em',
            'atualizado_em',
        ]
        read_only_fields = ['id', 'paciente', 'criado_por', 'criado_em', 'atualizado_em']
        extra_kwargs = {
            'data_atendimento': {'required': False},
        }
