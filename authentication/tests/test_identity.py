from datetime import timedelta

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.utils import timezone
from rest_framework_simplejwt.backends import TokenBackend

from authentication.identity import (
    IdentityVerifier,
    SubjectIdentity,
    Unauthenticated,
    get_identity_verifier,
)

CHAVE = 'chave-de-teste-com-pelo-menos-32-bytes!!'


def assinar(payload, chave=CHAVE):
    return TokenBackend('HS256', signing_key=chave).encode(payload)


def payload_valido(**claims):
    payload = {'sub': 'user-42', 'exp': timezone.now() + timedelta(minutes=5)}
    payload.update(claims)
    return payload


class TestIdentityVerifier:
    """Verificação de credenciais sem acesso a banco"""

    def setup_method(self):
        self.verifier = IdentityVerifier(CHAVE)

    def test_retorna_sujeito(self):
        assert self.verifier.verify(f'Bearer {assinar(payload_valido())}') == 'user-42'

    def test_esquema_qualquer(self):
        assert self.verifier.verify(f'Qualquer {assinar(payload_valido())}') == 'user-42'

    @pytest.mark.parametrize('credencial', [None, '', 'Bearer', 'a b c', 'Bearer '])
    def test_credencial_ausente_ou_malformada(self, credencial):
        with pytest.raises(Unauthenticated):
            self.verifier.verify(credencial)

    def test_assinatura_de_outra_chave(self):
        token = assinar(payload_valido(), chave='outra-chave-com-pelo-menos-32-bytes!!')

        with pytest.raises(Unauthenticated):
            self.verifier.verify(f'Bearer {token}')

    def test_token_expirado(self):
        token = assinar(payload_valido(exp=timezone.now() - timedelta(seconds=30)))

        with pytest.raises(Unauthenticated):
            self.verifier.verify(f'Bearer {token}')

    def test_leeway_aceita_expiracao_recente(self):
        verifier = IdentityVerifier(CHAVE, leeway=60)
        token = assinar(payload_valido(exp=timezone.now() - timedelta(seconds=30)))

        assert verifier.verify(f'Bearer {token}') == 'user-42'

    @pytest.mark.parametrize('sub', [None, ''])
    def test_sub_invalido(self, sub):
        payload = payload_valido(sub=sub)
        if sub is None:
            del payload['sub']

        with pytest.raises(Unauthenticated):
            self.verifier.verify(f'Bearer {assinar(payload)}')

    def test_lixo_no_lugar_do_token(self):
        with pytest.raises(Unauthenticated):
            self.verifier.verify('Bearer nao.e.jwt')

    def test_chave_obrigatoria(self):
        with pytest.raises(ImproperlyConfigured):
            IdentityVerifier('')


class TestGetIdentityVerifier:

    def test_recriado_quando_configuracao_muda(self, settings):
        antes = get_identity_verifier()
        assert get_identity_verifier() is antes

        settings.SIMPLE_JWT = {**settings.SIMPLE_JWT, 'SIGNING_KEY': CHAVE}

        depois = get_identity_verifier()
        assert depois is not antes
        assert depois.verify(f'Bearer {assinar(payload_valido())}') == 'user-42'


class TestSubjectIdentity:

    def test_atributos_de_usuario(self):
        identidade = SubjectIdentity('abc')

        assert identidade.is_authenticated is True
        assert identidade.pk == 'abc'
        assert str(identidade) == 'abc'
