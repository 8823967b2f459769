from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('patients', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Prontuario',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('criado_por', models.TextField(blank=True, editable=False, null=True, verbose_name='Criado por')),
                ('atualizado_por', models.TextField(blank=True, editable=False, null=True, verbose_name='Atualizado por')),
                ('criado_em', models.DateTimeField(auto_now_add=True, verbose_name='Data de criação')),
                ('atualizado_em', models.DateTimeField(auto_now=True, verbose_name='Data de modificação')),
                ('data_atendimento', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Data do atendimento')),
                ('descricao', models.TextField(blank=True, verbose_name='Descrição')),
                ('paciente', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='prontuarios', to='patients.paciente', verbose_name='Paciente')),
                ('profissional', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='prontuarios', to=settings.AUTH_USER_MODEL, verbose_name='Profissional responsável')),
            ],
            options={
                'verbose_name': 'Prontuário',
                'verbose_name_plural': 'Prontuários',
                'db_table': 'prontuarios',
                'ordering': ['-data_atendimento'],
            },
        ),
    ]
