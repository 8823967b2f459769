import django.core.validators
from django.db import migrations, models
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Paciente',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('criado_por', models.TextField(blank=True, editable=False, null=True, verbose_name='Criado por')),
                ('atualizado_por', models.TextField(blank=True, editable=False, null=True, verbose_name='Atualizado por')),
                ('criado_em', models.DateTimeField(auto_now_add=True, verbose_name='Data de criação')),
                ('atualizado_em', models.DateTimeField(auto_now=True, verbose_name='Data de modificação')),
                ('nome', models.CharField(max_length=150, validators=[django.core.validators.MinLengthValidator(3, message='O nome deve ter pelo menos 3 caracteres.')], verbose_name='Nome completo')),
                ('cpf', models.CharField(max_length=14, unique=True, validators=[django.core.validators.RegexValidator(message='CPF deve estar no formato 000.000.000-00.', regex='^\\d{3}\\.\\d{3}\\.\\d{3}-\\d{2}$')], verbose_name='CPF')),
                ('data_nascimento', models.DateField(verbose_name='Data de nascimento')),
                ('genero', models.CharField(blank=True, max_length=20, null=True, verbose_name='Gênero')),
                ('email', models.EmailField(blank=True, max_length=254, null=True, verbose_name='E-mail')),
                ('telefone_celular', models.CharField(max_length=20, verbose_name='Telefone celular')),
                ('telefone_fixo', models.CharField(blank=True, max_length=20, null=True, verbose_name='Telefone fixo')),
                ('cep', models.CharField(blank=True, max_length=9, null=True, verbose_name='CEP')),
                ('logradouro', models.CharField(blank=True, max_length=255, null=True)),
                ('numero', models.CharField(blank=True, max_length=20, null=True, verbose_name='Número')),
                ('complemento', models.CharField(blank=True, max_length=100, null=True)),
                ('bairro', models.CharField(blank=True, max_length=100, null=True)),
                ('cidade', models.CharField(blank=True, max_length=100, null=True)),
                ('estado', models.CharField(blank=True, max_length=2, null=True, verbose_name='UF')),
                ('contato_emergencia_nome', models.CharField(blank=True, max_length=150, null=True)),
                ('contato_emergencia_telefone', models.CharField(blank=True, max_length=20, null=True)),
                ('contato_emergencia_parentesco', models.CharField(blank=True, max_length=50, null=True)),
                ('status', models.CharField(choices=[('ativo', 'Ativo'), ('inativo', 'Inativo')], default='ativo', max_length=10, verbose_name='Status')),
                ('avatar_url', models.CharField(blank=True, max_length=255, null=True, verbose_name='Avatar')),
            ],
            options={
                'verbose_name': 'Paciente',
                'verbose_name_plural': 'Pacientes',
                'db_table': 'pacientes',
                'ordering': ['nome'],
                'indexes': [
                    models.Index(fields=['nome'], name='pacientes_nome_4b1c2e_idx'),
                    models.Index(fields=['status'], name='pacientes_status_9d8a7f_idx'),
                ],
            },
        ),
    ]
