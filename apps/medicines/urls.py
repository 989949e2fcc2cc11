"""
URL configuration for medicines app.
"""
from django.urls import include, path

from medifind.routers import OptionalSlashRouter

from .views import MedicineViewSet

app_name = "medicines"

router = OptionalSlashRouter()
router.register(r"medicines", MedicineViewSet, basename="medicine")

urlpatterns = [
    path("", include(router.urls)),
]
