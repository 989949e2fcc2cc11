from .utils import require_user_pharmacy


class PharmacyScopedMixin:
    """
    Viewset helpers for records owned by the caller's pharmacy.

    The caller's pharmacy is looked up once per request and used both as the
    owner reference for ``IsResourceOwner`` and as the owner of new records.
    """
    pharmacy_field = "pharmacy"
    missing_pharmacy_message = "Your pharmacy not found"

    def get_caller_pharmacy(self, message=None):
        if not hasattr(self, "_caller_pharmacy"):
            self._caller_pharmacy = require_user_pharmacy(
                self.request.user,
                message or self.missing_pharmacy_message,
            )
        return self._caller_pharmacy

    def get_owner_reference(self, request):
        return self.get_caller_pharmacy().pk

    def perform_create(self, serializer):
        serializer.save(**{self.pharmacy_field: self.get_caller_pharmacy()})
