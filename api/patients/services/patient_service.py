# patients/services/patient_service.py
import logging
import os
import uuid

from django.conf import settings
from django.core.files.storage import default_storage

from api.clinical_records.repositories import ProntuarioRepository
from api.utils.exceptions import Conflict, InvalidInput, RecordNotFound
from ..models import STATUS_CHOICES
from ..repositories.patient_repository import PatientRepository

logger = logging.getLogger(__name__)


class PatientService:
    @staticmethod
    def listar_pacientes(busca=None):
        return PatientRepository.get_all(busca)

    @staticmethod
    def obter_paciente(id_paciente):
        paciente = PatientRepository.get_by_id(id_paciente)
        if paciente is None:
            raise RecordNotFound('Paciente não encontrado')
        return paciente

    @staticmethod
    def prontuarios_recentes(paciente, limite=5):
        return ProntuarioRepository.recentes_do_paciente(paciente.id, limite)

    @staticmethod
    def criar_paciente(data, ator=None):
        if PatientRepository.cpf_em_uso(data['cpf']):
            raise InvalidInput('CPF já cadastrado')
        return PatientRepository.create(criado_por=ator, atualizado_por=ator, **data)

    @staticmethod
    def atualizar_paciente(paciente, data, ator=None):
        cpf = data.get('cpf')
        if cpf and PatientRepository.cpf_em_uso(cpf, exceto_id=paciente.pk):
            raise InvalidInput('CPF já cadastrado')
        return PatientRepository.update(paciente, atualizado_por=ator, **data)

    @staticmethod
    def atualizar_avatar(paciente, arquivo, ator=None):
        """Salva o arquivo e guarda apenas o caminho relativo"""
        if arquivo is None:
            raise InvalidInput('Arquivo não enviado')

        extensao = os.path.splitext(arquivo.name)[1].lower()
        nome = default_storage.save(f"{uuid.uuid4().hex}{extensao}", arquivo)
        avatar_url = f"{settings.MEDIA_URL.rstrip('/')}/{nome}"

        logger.info(f"Avatar do paciente {paciente.id} salvo em {nome}")
        return PatientRepository.update(paciente, avatar_url=avatar_url, atualizado_por=ator)

    @staticmethod
    def atualizar_status(paciente, novo_status, ator=None):
        if novo_status not in dict(STATUS_CHOICES):
            raise InvalidInput("Status deve ser 'ativo' ou 'inativo'")
        return PatientRepository.update(paciente, status=novo_status, atualizado_por=ator)

    @staticmethod
    def excluir_paciente(paciente):
        if ProntuarioRepository.paciente_possui_prontuarios(paciente.id):
            raise Conflict('Não é possível excluir o paciente pois existem registros vinculados')
        PatientRepository.delete(paciente)
