# api/patients/serializers.py

from django.core.validators import RegexValidator
from rest_framework import serializers

from api.clinical_records.serializers import ProntuarioSerializer
from api.patients.models import Paciente, STATUS_CHOICES
from api.patients.models.constants import CPF_REGEX
from api.patients.services.patient_service import PatientService


class PacienteSerializer(serializers.ModelSerializer):
    """Leitura e escrita de pacientes"""

    class Meta:
        model = Paciente
        fields = '__all__'
        read_only_fields = [
            'id', 'status', 'avatar_url',
            'criado_por', 'atualizado_por',
            'criado_em', 'atualizado_em',
        ]
        extra_kwargs = {
            # Unicidade verificada no serviço, com a mensagem da clínica
            'cpf': {'validators': [RegexValidator(CPF_REGEX, 'CPF deve estar no formato 000.000.000-00.')]},
        }

    def validate_nome(self, value):
        value = value.strip()
        if len(value) < 3:
            raise serializers.ValidationError("O nome deve ter pelo menos 3 caracteres")
        return value


class PacienteDetailSerializer(PacienteSerializer):
    """Paciente com os prontuários mais recentes"""

    prontuarios = serializers.SerializerMethodField()

    def get_prontuarios(self, obj):
        recentes = PatientService.prontuarios_recentes(obj)
        return ProntuarioSerializer(recentes, many=True).data


class PacienteStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=STATUS_CHOICES)
