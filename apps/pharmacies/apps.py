from django.apps import AppConfig


class PharmaciesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.pharmacies"
    label = "pharmacies"
    verbose_name = "Pharmacies"
