from django.apps import AppConfig


class MedicinesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.medicines"
    label = "medicines"
    verbose_name = "Medicines"
