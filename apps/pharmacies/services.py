import logging

from django.core.exceptions import ValidationError

from .models import Pharmacy

logger = logging.getLogger(__name__)


class PharmacyService:
    @staticmethod
    def owns_pharmacy(user):
        return Pharmacy.objects.filter(owner=user).exists()

    @staticmethod
    def register_pharmacy(*, owner, pharmacy_data):
        """
        Create a pharmacy owned by *owner*.

        Operators may register a single pharmacy; admins are not limited.
        """
        if owner is None:
            raise ValidationError({"owner": "Owner is required."})

        if not owner.is_admin() and PharmacyService.owns_pharmacy(owner):
            raise ValidationError("You already registered a pharmacy")

        pharmacy = Pharmacy.objects.create(owner=owner, **pharmacy_data)
        logger.info("Pharmacy %s registered by user %s", pharmacy.pk, owner.pk)
        return pharmacy
