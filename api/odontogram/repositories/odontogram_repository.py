from typing import Optional

from django.db import IntegrityError, transaction
from django.db.models import QuerySet
from django.utils import timezone

from api.odontogram.models import Odontograma
from common.repositories.base_repository import BaseRepository


class OdontogramaRepository(BaseRepository[Odontograma]):
    """Acesso ao documento de odontograma de um prontuário"""

    model = Odontograma

    @classmethod
    def get_queryset(cls) -> QuerySet:
        return Odontograma.objects.all()

    @classmethod
    def obter_por_prontuario(cls, prontuario_id) -> Optional[Odontograma]:
        return cls.get_queryset().filter(prontuario_id=prontuario_id).first()

    @classmethod
    def criar_com_dados(cls, prontuario, dados) -> Optional[Odontograma]:
        """
        Insere o odontograma já com o documento inicial.
        Retorna None se outro escritor criou o registro antes.
        """
        try:
            with transaction.atomic():
                return Odontograma.objects.create(prontuario=prontuario, dados=dados, versao=1)
        except IntegrityError:
            return None

    @classmethod
    def atualizar_se_versao(cls, odontograma_id, versao, dados, atualizado_em=None) -> bool:
        """
        Substitui o documento somente se a revisão ainda for `versao`.
        Um único UPDATE: ou tudo é aplicado, ou nada.
        """
        alterados = cls.get_queryset().filter(id=odontograma_id, versao=versao).update(
            dados=dados,
            versao=versao + 1,
            atualizado_em=atualizado_em or timezone.now(),
        )
        return alterados == 1
