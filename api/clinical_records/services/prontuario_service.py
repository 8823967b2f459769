"""
Regras de negócio de prontuários
"""
import logging

from api.clinical_records.repositories import ProntuarioRepository
from api.patients.repositories.patient_repository import PatientRepository
from api.utils.exceptions import RecordNotFound

logger = logging.getLogger(__name__)


class ProntuarioService:
    """Serviço de prontuários de um paciente"""

    @staticmethod
    def _paciente_ou_404(paciente_id):
        paciente = PatientRepository.get_by_id(paciente_id)
        if paciente is None:
            raise RecordNotFound('Paciente não encontrado')
        return paciente

    @classmethod
    def listar(cls, paciente_id):
        cls._paciente_ou_404(paciente_id)
        return ProntuarioRepository.listar_por_paciente(paciente_id)

    @staticmethod
    def obter(paciente_id, prontuario_id):
        prontuario = ProntuarioRepository.obter_do_paciente(paciente_id, prontuario_id)
        if prontuario is None:
            raise RecordNotFound('Prontuário não encontrado')
        return prontuario

    @classmethod
    def criar(cls, paciente_id, data, ator=None):
        paciente = cls._paciente_ou_404(paciente_id)
        prontuario = ProntuarioRepository.create(
            paciente=paciente,
            criado_por=ator,
            atualizado_por=ator,
            **data,
        )
        logger.info(f"Prontuário {prontuario.id} criado para o paciente {paciente.id}")
        return prontuario
