"""
URL configuration for the MediFind project.
"""
from django.contrib import admin
from django.urls import include, path

from medifind.views import api_root_view

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', api_root_view, name='api-root'),

    # API endpoints (REST API)
    path('api/', include('apps.accounts.urls')),
    path('api/', include('apps.pharmacies.urls')),
    path('api/', include('apps.medicines.urls')),
]
