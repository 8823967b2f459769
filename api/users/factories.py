import factory
from .models import Usuario


class UsuarioFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Usuario
        django_get_or_create = ('username',)
        skip_postgeneration_save = True

    nome = factory.Faker('name', locale='pt_BR')
    username = factory.Sequence(lambda n: f'profissional{n}')
    email = factory.LazyAttribute(lambda o: f'{o.username}@clinica.com.br')
    telefone = '11987654321'
    cro = factory.Sequence(lambda n: f'SP-{10000 + n}')
    is_active = True

    @factory.post_generation
    def password(self, create, extracted, **kwargs):
        self.set_password(extracted or 'senha12345')
        if create:
            self.save(update_fields=['password'])
