from rest_framework.exceptions import NotFound

from .models import Pharmacy


def get_user_pharmacy(user):
    if not getattr(user, "is_authenticated", False):
        return None
    return Pharmacy.objects.filter(owner=user).order_by("id").first()


def require_user_pharmacy(user, message="Pharmacy not found"):
    pharmacy = get_user_pharmacy(user)
    if pharmacy is None:
        raise NotFound(message)
    return pharmacy
