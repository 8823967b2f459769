from typing import Optional

from django.core.exceptions import ValidationError
from django.db.models import QuerySet

from api.clinical_records.models import Prontuario
from common.repositories.base_repository import BaseRepository


class ProntuarioRepository(BaseRepository[Prontuario]):
    """Acesso a dados de prontuários"""

    model = Prontuario

    @classmethod
    def get_queryset(cls) -> QuerySet:
        return Prontuario.objects.select_related('paciente', 'profissional')

    @classmethod
    def obter_do_paciente(cls, paciente_id, prontuario_id) -> Optional[Prontuario]:
        """
        Prontuário somente se pertencer ao paciente informado.
        Ids malformados são tratados como inexistentes.
        """
        try:
            return cls.get_queryset().get(id=prontuario_id, paciente_id=paciente_id)
        except (Prontuario.DoesNotExist, ValidationError, ValueError):
            return None

    @classmethod
    def listar_por_paciente(cls, paciente_id) -> QuerySet:
        return cls.get_queryset().filter(paciente_id=paciente_id).order_by('-data_atendimento')

    @classmethod
    def recentes_do_paciente(cls, paciente_id, limite=5) -> QuerySet:
        return cls.listar_por_paciente(paciente_id)[:limite]

    @classmethod
    def paciente_possui_prontuarios(cls, paciente_id) -> bool:
        return Prontuario.objects.filter(paciente_id=paciente_id).exists()
