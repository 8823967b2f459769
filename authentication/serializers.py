from rest_framework import serializers
from api.users.models import Usuario


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(
        required=True,
        error_messages={'required': 'O nome de usuário é obrigatório.'}
    )

    password = serializers.CharField(
        required=True,
        style={'input_type': 'password'},
        write_only=True,
        error_messages={'required': 'A senha é obrigatória.'}
    )


class AuthUserSerializer(serializers.ModelSerializer):
    """Dados do profissional devolvidos no login"""

    class Meta:
        model = Usuario
        fields = [
            'id',
            'username',
            'nome',
            'email',
            'telefone',
            'cro',
            'is_active',
            'criado_em',
        ]
        read_only_fields = fields
