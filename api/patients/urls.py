from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import PacienteViewSet

router = SimpleRouter()
router.register(r'', PacienteViewSet, basename='paciente')

app_name = 'patients'
urlpatterns = [
    path('', include(router.urls)),
]
