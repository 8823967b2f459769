from rest_framework import serializers

from api.odontogram import codec


class OdontogramSerializer(serializers.Serializer):
    """Saída do odontograma: {id, recordId, dados, createdAt, updatedAt}"""

    id = serializers.CharField(allow_null=True, read_only=True)
    recordId = serializers.CharField(source='record_id', read_only=True)
    dados = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    def get_dados(self, obj):
        return codec.encode(obj.procedures)
