"""
Ciclo de vida do odontograma de um prontuário.

O documento só cresce: cada chamada acrescenta um procedimento ao final.
A primeira escrita cria o registro já com a entrada; as seguintes
substituem o documento inteiro condicionadas à revisão lida, repetindo
a partir de uma leitura nova quando outra escrita chegou antes.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from django.conf import settings
from django.utils import timezone

from api.clinical_records.repositories import ProntuarioRepository
from api.odontogram import codec
from api.odontogram.codec import ProcedureEntry
from api.odontogram.repositories import OdontogramaRepository
from api.utils.exceptions import Conflict, InvalidInput, RecordNotFound

logger = logging.getLogger(__name__)

DEFAULT_APPEND_MAX_RETRIES = 3


@dataclass(frozen=True)
class OdontogramView:
    """Odontograma já decodificado, como é exposto pela API"""

    id: Optional[str]
    record_id: str
    procedures: List[ProcedureEntry] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class OdontogramService:

    @staticmethod
    def _prontuario_ou_404(paciente_id, prontuario_id):
        prontuario = ProntuarioRepository.obter_do_paciente(paciente_id, prontuario_id)
        if prontuario is None:
            raise RecordNotFound('Prontuário não encontrado para este paciente')
        return prontuario

    @staticmethod
    def _max_retries() -> int:
        return getattr(settings, 'ODONTOGRAM_APPEND_MAX_RETRIES', DEFAULT_APPEND_MAX_RETRIES)

    @staticmethod
    def _decodificar(odontograma) -> List[ProcedureEntry]:
        resultado = codec.decode(odontograma.dados)
        if resultado.dropped:
            logger.warning(
                f"Odontograma {odontograma.id}: {resultado.dropped} entrada(s) inválida(s) descartada(s)"
            )
        return resultado.entries

    @classmethod
    def get(cls, paciente_id, prontuario_id) -> OdontogramView:
        prontuario = cls._prontuario_ou_404(paciente_id, prontuario_id)
        odontograma = OdontogramaRepository.obter_por_prontuario(prontuario.id)

        if odontograma is None:
            agora = timezone.now()
            return OdontogramView(
                id=None,
                record_id=str(prontuario.id),
                procedures=[],
                created_at=agora,
                updated_at=agora,
            )

        return OdontogramView(
            id=str(odontograma.id),
            record_id=str(prontuario.id),
            procedures=cls._decodificar(odontograma),
            created_at=odontograma.criado_em,
            updated_at=odontograma.atualizado_em,
        )

    @classmethod
    def append_procedure(cls, paciente_id, prontuario_id, raw_input, actor=None) -> OdontogramView:
        """
        Acrescenta um procedimento ao odontograma do prontuário.

        O corpo recebido deve conter exatamente um procedimento válido;
        `id` e data enviados pelo cliente são ignorados.

        Raises:
            InvalidInput: corpo não descreve um procedimento
            RecordNotFound: prontuário inexistente ou de outro paciente
            Conflict: escritas concorrentes esgotaram as tentativas
        """
        recebidos = codec.decode_many([raw_input])
        if len(recebidos) != 1:
            raise InvalidInput('Procedimento inválido: informe ao menos "tooth" e "type"')
        recebido = recebidos[0]

        prontuario = cls._prontuario_ou_404(paciente_id, prontuario_id)
        entrada = ProcedureEntry.new(
            tooth=recebido.tooth,
            type=recebido.type,
            face=recebido.face,
            note=recebido.note,
        )

        tentativas = 1 + cls._max_retries()
        for tentativa in range(1, tentativas + 1):
            odontograma = OdontogramaRepository.obter_por_prontuario(prontuario.id)

            if odontograma is None:
                criado = OdontogramaRepository.criar_com_dados(prontuario, codec.encode([entrada]))
                if criado is not None:
                    logger.info(
                        f"Odontograma {criado.id} criado para o prontuário {prontuario.id} por {actor}"
                    )
                    return OdontogramView(
                        id=str(criado.id),
                        record_id=str(prontuario.id),
                        procedures=[entrada],
                        created_at=criado.criado_em,
                        updated_at=criado.atualizado_em,
                    )
                logger.info(f"Prontuário {prontuario.id}: odontograma criado por outra escrita, relendo")
                continue

            entradas = cls._decodificar(odontograma) + [entrada]
            agora = timezone.now()
            if OdontogramaRepository.atualizar_se_versao(
                odontograma.id, odontograma.versao, codec.encode(entradas), agora
            ):
                logger.info(
                    f"Procedimento {entrada.id} adicionado ao odontograma {odontograma.id} por {actor}"
                )
                return OdontogramView(
                    id=str(odontograma.id),
                    record_id=str(prontuario.id),
                    procedures=entradas,
                    created_at=odontograma.criado_em,
                    updated_at=agora,
                )

            logger.warning(
                f"Odontograma {odontograma.id}: revisão {odontograma.versao} desatualizada "
                f"(tentativa {tentativa}/{tentativas})"
            )

        raise Conflict('O odontograma foi alterado por outra requisição, tente novamente')
