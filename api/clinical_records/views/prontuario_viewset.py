"""
ViewSet de prontuários aninhado ao paciente

Endpoints:
    - GET  /api/patients/{paciente_id}/records/               - Listar prontuários
    - POST /api/patients/{paciente_id}/records/               - Criar prontuário
    - GET  /api/patients/{paciente_id}/records/{record_id}/   - Detalhe
"""
from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from api.clinical_records.serializers import ProntuarioSerializer
from api.clinical_records.services import ProntuarioService


class ProntuarioViewSet(viewsets.GenericViewSet):
    serializer_class = ProntuarioSerializer
    permission_classes = [IsAuthenticated]

    def list(self, request, paciente_id=None):
        queryset = ProntuarioService.listar(paciente_id)
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)
        return Response(self.get_serializer(queryset, many=True).data)

    def create(self, request, paciente_id=None):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        prontuario = ProntuarioService.criar(paciente_id, serializer.validated_data, ator=request.user.id)
        return Response(self.get_serializer(prontuario).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, paciente_id=None, pk=None):
        prontuario = ProntuarioService.obter(paciente_id, pk)
        return Response(self.get_serializer(prontuario).data)
