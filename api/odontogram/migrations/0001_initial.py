from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('clinical_records', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Odontograma',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('dados', models.JSONField(blank=True, default=dict, verbose_name='Dados')),
                ('versao', models.PositiveIntegerField(default=1, verbose_name='Revisão')),
                ('criado_em', models.DateTimeField(auto_now_add=True, verbose_name='Data de criação')),
                ('atualizado_em', models.DateTimeField(auto_now=True, verbose_name='Data de modificação')),
                ('prontuario', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='odontograma', to='clinical_records.prontuario', verbose_name='Prontuário')),
            ],
            options={
                'verbose_name': 'Odontograma',
                'verbose_name_plural': 'Odontogramas',
                'db_table': 'odontogramas',
            },
        ),
    ]
