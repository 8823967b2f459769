import factory

from api.patients.factories import PacienteFactory
from api.users.factories import UsuarioFactory
from .models import Prontuario


class ProntuarioFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Prontuario

    paciente = factory.SubFactory(PacienteFactory)
    profissional = factory.SubFactory(UsuarioFactory)
    descricao = 'Avaliação inicial'
