"""
URL configuration for pharmacies app.
"""
from django.urls import include, path

from medifind.routers import OptionalSlashRouter

from .views import PharmacyViewSet

app_name = "pharmacies"

router = OptionalSlashRouter()
router.register(r"pharmacies", PharmacyViewSet, basename="pharmacy")

urlpatterns = [
    path("", include(router.urls)),
]
