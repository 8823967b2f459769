# api/clinical_records/urls.py

from django.urls import path

from .views import ProntuarioViewSet

app_name = 'clinical_records'

prontuario_list = ProntuarioViewSet.as_view({'get': 'list', 'post': 'create'})
prontuario_detail = ProntuarioViewSet.as_view({'get': 'retrieve'})

urlpatterns = [
    path('<str:paciente_id>/records/', prontuario_list, name='prontuario-list'),
    path('<str:paciente_id>/records/<str:pk>/', prontuario_detail, name='prontuario-detail'),
]
