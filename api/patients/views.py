# api/patients/views.py
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.pagination import PageNumberPagination
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from api.patients.serializers import (
    PacienteSerializer,
    PacienteDetailSerializer,
    PacienteStatusSerializer,
)
from api.patients.services.patient_service import PatientService


class PacientePagination(PageNumberPagination):
    page_size = 10
    page_size_query_param = 'page_size'
    max_page_size = 1000


class PacienteViewSet(viewsets.ModelViewSet):
    serializer_class = PacienteSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PacientePagination
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_fields = ['genero', 'cidade', 'estado']
    ordering_fields = ['nome', 'criado_em', 'data_nascimento']
    ordering = ['nome']

    def get_queryset(self):
        """Somente pacientes ativos, com busca opcional por ?busca="""
        return PatientService.listar_pacientes(self.request.query_params.get('busca'))

    def get_object(self):
        paciente = PatientService.obter_paciente(self.kwargs['pk'])
        self.check_object_permissions(self.request, paciente)
        return paciente

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return PacienteDetailSerializer
        return PacienteSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        paciente = PatientService.criar_paciente(serializer.validated_data, ator=request.user.id)
        output_serializer = self.get_serializer(paciente)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        paciente = PatientService.atualizar_paciente(instance, serializer.validated_data, ator=request.user.id)
        return Response(self.get_serializer(paciente).data)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        PatientService.excluir_paciente(instance)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['patch'], url_path='avatar', parser_classes=[MultiPartParser, FormParser])
    def atualizar_avatar(self, request, pk=None):
        instance = self.get_object()
        paciente = PatientService.atualizar_avatar(instance, request.FILES.get('avatar'), ator=request.user.id)
        return Response(self.get_serializer(paciente).data)

    @action(detail=True, methods=['patch'], url_path='status')
    def alterar_status(self, request, pk=None):
        instance = self.get_object()
        serializer = PacienteStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        paciente = PatientService.atualizar_status(instance, serializer.validated_data['status'], ator=request.user.id)
        return Response(self.get_serializer(paciente).data)
