from typing import TypeVar, Generic, Optional, Type
from django.core.exceptions import ValidationError
from django.db.models import Model, QuerySet

T = TypeVar('T', bound=Model)


class BaseRepository(Generic[T]):
    """Repositório base: acesso por chave, criação e atualização"""

    model: Type[T] = None

    @classmethod
    def get_queryset(cls) -> QuerySet:
        return cls.model.objects.all()

    @classmethod
    def get_by_id(cls, pk) -> Optional[T]:
        """Retorna None para ids inexistentes ou malformados"""
        try:
            return cls.get_queryset().get(pk=pk)
        except (cls.model.DoesNotExist, ValidationError, ValueError):
            return None

    @classmethod
    def create(cls, **kwargs) -> T:
        instance = cls.model(**kwargs)
        instance.full_clean()
        instance.save()
        return instance

    @classmethod
    def update(cls, instance: T, **kwargs) -> T:
        for key, value in kwargs.items():
            setattr(instance, key, value)
        instance.full_clean()
        instance.save()
        return instance
