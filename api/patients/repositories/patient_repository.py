# patients/repositories/patient_repository.py
from django.db.models import Q, QuerySet

from common.repositories.base_repository import BaseRepository
from ..models import Paciente, STATUS_ATIVO


class PatientRepository(BaseRepository[Paciente]):
    model = Paciente

    @staticmethod
    def get_all(busca=None) -> QuerySet:
        """Pacientes ativos, ordenados por nome"""
        queryset = Paciente.objects.filter(status=STATUS_ATIVO)
        if busca:
            queryset = queryset.filter(
                Q(nome__icontains=busca)
                | Q(cpf__icontains=busca)
                | Q(telefone_celular__icontains=busca)
            )
        return queryset.order_by('nome')

    @staticmethod
    def cpf_em_uso(cpf, exceto_id=None) -> bool:
        queryset = Paciente.objects.filter(cpf=cpf)
        if exceto_id is not None:
            queryset = queryset.exclude(pk=exceto_id)
        return queryset.exists()

    @staticmethod
    def delete(paciente):
        paciente.delete()
