"""
API URL configuration for accounts app.
"""
from django.urls import include, path

from medifind.routers import OptionalSlashRouter

from .views import UserViewSet

app_name = "accounts"

router = OptionalSlashRouter()
router.register(r"users", UserViewSet, basename="user")

urlpatterns = [
    path("", include(router.urls)),
]
