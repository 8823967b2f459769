from datetime import datetime, timedelta
from unittest.mock import patch

import pytest
from django.utils import timezone

from api.clinical_records.factories import ProntuarioFactory
from api.odontogram import codec
from api.odontogram.codec import ProcedureEntry
from api.odontogram.models import Odontograma
from api.odontogram.repositories import OdontogramaRepository
from api.odontogram.services import OdontogramService
from api.patients.factories import PacienteFactory
from api.utils.exceptions import Conflict, InvalidInput, RecordNotFound


@pytest.mark.django_db
class TestOdontogramServiceGet:

    def test_sem_odontograma_retorna_documento_vazio(self, prontuario):
        view = OdontogramService.get(prontuario.paciente_id, prontuario.id)

        assert view.id is None
        assert view.record_id == str(prontuario.id)
        assert view.procedures == []
        assert view.created_at is not None
        assert not Odontograma.objects.exists()

    def test_entradas_invalidas_armazenadas_sao_descartadas(self, prontuario):
        Odontograma.objects.create(
            prontuario=prontuario,
            dados={'procedures': [{'tooth': '11', 'type': 'selante'}, {'tooth': 11}, 'lixo']},
        )

        view = OdontogramService.get(prontuario.paciente_id, prontuario.id)

        assert [e.tooth for e in view.procedures] == ['11']

    def test_documento_antigo_e_lido(self, prontuario):
        Odontograma.objects.create(
            prontuario=prontuario,
            dados={'procedimentos': [{'dente': '36', 'tipo': 'extração'}]},
        )

        view = OdontogramService.get(prontuario.paciente_id, prontuario.id)

        assert view.procedures[0].tooth == '36'
        assert view.procedures[0].type == 'extração'

    def test_prontuario_de_outro_paciente(self, prontuario):
        outro = PacienteFactory()

        with pytest.raises(RecordNotFound):
            OdontogramService.get(outro.id, prontuario.id)

    def test_ids_malformados(self):
        with pytest.raises(RecordNotFound):
            OdontogramService.get('nao-existe', 'tambem-nao')


@pytest.mark.django_db
class TestOdontogramServiceAppend:

    def test_primeira_escrita_cria_documento_com_a_entrada(self, prontuario):
        view = OdontogramService.append_procedure(
            prontuario.paciente_id, prontuario.id, {'tooth': '11', 'type': 'restauração'}
        )

        odontograma = Odontograma.objects.get(prontuario=prontuario)
        assert view.id == str(odontograma.id)
        assert odontograma.versao == 1
        assert codec.decode_many(odontograma.dados) == view.procedures
        assert len(view.procedures) == 1

    def test_duas_escritas_preservam_ordem(self, prontuario):
        primeira = OdontogramService.append_procedure(
            prontuario.paciente_id, prontuario.id, {'tooth': '11', 'type': 'restauração'}
        )
        segunda = OdontogramService.append_procedure(
            prontuario.paciente_id, prontuario.id, {'tooth': '21', 'type': 'canal', 'face': 'palatina'}
        )

        assert len(segunda.procedures) == 2
        assert segunda.procedures[0] == primeira.procedures[0]
        assert segunda.procedures[1].tooth == '21'
        assert segunda.id == primeira.id
        assert Odontograma.objects.get(prontuario=prontuario).versao == 2

    def test_id_e_data_do_cliente_sao_ignorados(self, prontuario):
        view = OdontogramService.append_procedure(
            prontuario.paciente_id,
            prontuario.id,
            {'tooth': '21', 'type': 'canal', 'id': 'client-supplied', 'data': '2000-01-01'},
        )

        entrada = view.procedures[0]
        assert entrada.id != 'client-supplied'
        ocorrido = datetime.fromisoformat(entrada.occurred_at)
        assert abs(timezone.now() - ocorrido) < timedelta(seconds=5)

    @pytest.mark.parametrize('corpo', [
        {},
        {'tooth': '11'},
        {'tooth': '', 'type': 'canal'},
        {'tooth': '11', 'type': 'canal', 'note': 5},
        [{'tooth': '11', 'type': 'canal'}],
        'canal',
    ])
    def test_corpo_invalido(self, prontuario, corpo):
        with pytest.raises(InvalidInput):
            OdontogramService.append_procedure(prontuario.paciente_id, prontuario.id, corpo)

        assert not Odontograma.objects.exists()

    def test_prontuario_de_outro_paciente(self, prontuario):
        outro = PacienteFactory()

        with pytest.raises(RecordNotFound):
            OdontogramService.append_procedure(outro.id, prontuario.id, {'tooth': '11', 'type': 'x'})

        assert not Odontograma.objects.exists()

    def test_documentos_sao_isolados_por_prontuario(self, prontuario):
        outro = ProntuarioFactory(paciente=prontuario.paciente)

        OdontogramService.append_procedure(prontuario.paciente_id, prontuario.id, {'tooth': '11', 'type': 'x'})

        assert OdontogramService.get(outro.paciente_id, outro.id).procedures == []


@pytest.mark.django_db
class TestOdontogramServiceConcorrencia:

    def test_revisao_desatualizada_refaz_a_leitura(self, prontuario):
        OdontogramService.append_procedure(prontuario.paciente_id, prontuario.id, {'tooth': '11', 'type': 'restauração'})
        atualizar = OdontogramaRepository.atualizar_se_versao
        concorrente = ProcedureEntry.new(tooth='31', type='selante')
        chamadas = []

        def escrita_concorrente(odontograma_id, versao, dados, atualizado_em=None):
            if not chamadas:
                # outra requisição grava entre a leitura e a escrita
                anteriores = codec.decode_many(dados)[:-1]
                Odontograma.objects.filter(id=odontograma_id).update(
                    dados=codec.encode(anteriores + [concorrente]),
                    versao=versao + 1,
                )
            chamadas.append(versao)
            return atualizar(odontograma_id, versao, dados, atualizado_em)

        with patch.object(OdontogramaRepository, 'atualizar_se_versao', side_effect=escrita_concorrente):
            view = OdontogramService.append_procedure(
                prontuario.paciente_id, prontuario.id, {'tooth': '21', 'type': 'canal'}
            )

        assert chamadas == [1, 2]
        assert [e.tooth for e in view.procedures] == ['11', '31', '21']
        armazenado = Odontograma.objects.get(prontuario=prontuario)
        assert [e.tooth for e in codec.decode_many(armazenado.dados)] == ['11', '31', '21']
        assert armazenado.versao == 3

    def test_tentativas_esgotadas_geram_conflito(self, prontuario, settings):
        settings.ODONTOGRAM_APPEND_MAX_RETRIES = 2
        OdontogramService.append_procedure(prontuario.paciente_id, prontuario.id, {'tooth': '11', 'type': 'x'})

        with patch.object(OdontogramaRepository, 'atualizar_se_versao', return_value=False) as atualizar:
            with pytest.raises(Conflict):
                OdontogramService.append_procedure(prontuario.paciente_id, prontuario.id, {'tooth': '21', 'type': 'y'})

        assert atualizar.call_count == 3
        armazenado = Odontograma.objects.get(prontuario=prontuario)
        assert len(codec.decode_many(armazenado.dados)) == 1

    def test_criacao_concorrente_vira_atualizacao(self, prontuario):
        primeira = ProcedureEntry.new(tooth='18', type='extração')

        def criado_por_outro(prontuario_, dados):
            Odontograma.objects.create(prontuario=prontuario_, dados=codec.encode([primeira]))
            return None

        with patch.object(OdontogramaRepository, 'criar_com_dados', side_effect=criado_por_outro):
            view = OdontogramService.append_procedure(
                prontuario.paciente_id, prontuario.id, {'tooth': '21', 'type': 'canal'}
            )

        assert view.procedures[0] == primeira
        assert view.procedures[1].tooth == '21'
        assert Odontograma.objects.filter(prontuario=prontuario).count() == 1


@pytest.mark.django_db
class TestOdontogramaRepository:

    def test_criar_duas_vezes_retorna_none(self, prontuario):
        assert OdontogramaRepository.criar_com_dados(prontuario, {'procedures': []}) is not None
        assert OdontogramaRepository.criar_com_dados(prontuario, {'procedures': []}) is None

    def test_atualizar_com_revisao_errada(self, prontuario):
        odontograma = OdontogramaRepository.criar_com_dados(prontuario, {'procedures': []})

        assert OdontogramaRepository.atualizar_se_versao(odontograma.id, 7, {'procedures': []}) is False
        assert OdontogramaRepository.atualizar_se_versao(odontograma.id, 1, {'procedures': []}) is True
        odontograma.refresh_from_db()
        assert odontograma.versao == 2
