# config/urls.py
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin/', admin.site.urls),

    # Endpoints do sistema
    path('api/auth/', include('authentication.urls')),
    path('api/patients/', include('api.patients.urls', namespace='patients')),
    path('api/patients/', include('api.clinical_records.urls', namespace='clinical_records')),
    path('api/patients/', include('api.odontogram.urls', namespace='odontogram')),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
