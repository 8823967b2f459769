import datetime

import factory

from .models import Paciente


def _cpf(n):
    digitos = f'{n:011d}'
    return f'{digitos[:3]}.{digitos[3:6]}.{digitos[6:9]}-{digitos[9:]}'


class PacienteFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Paciente

    nome = factory.Faker('name', locale='pt_BR')
    cpf = factory.Sequence(_cpf)
    data_nascimento = datetime.date(1990, 5, 15)
    telefone_celular = '11987654321'
    email = factory.LazyAttribute(lambda o: f'paciente{o.cpf[:3]}@email.com')
