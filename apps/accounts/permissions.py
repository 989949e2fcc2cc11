import logging

from rest_framework.permissions import BasePermission, SAFE_METHODS

from medifind.exceptions import OwnershipError

logger = logging.getLogger(__name__)


def _is_admin(user):
    return bool(getattr(user, "is_superuser", False)) or bool(getattr(user, "is_admin", lambda: False)())


def _is_pharmacy_operator(user):
    return bool(getattr(user, "is_pharmacy_operator", lambda: False)())


def can_manage_pharmacies(user):
    return _is_admin(user) or _is_pharmacy_operator(user)


def can_manage_medicines(user):
    return _is_pharmacy_operator(user)


def owner_of(resource, caller_id):
    """
    Return True when *caller_id* is the owner reference stored on *resource*.

    Each ownable model names its owner reference in ``owner_field``:
    pharmacies point at a user, medicines at a pharmacy, users at themselves.
    """
    if caller_id is None:
        return False
    return str(getattr(resource, resource.owner_field)) == str(caller_id)


class PharmacyRolePermission(BasePermission):
    message = "Access denied: Not a pharmacy admin"

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return can_manage_pharmacies(user)


class MedicineRolePermission(BasePermission):
    message = "Access denied: Not a pharmacy admin"

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return can_manage_medicines(user)


class IsResourceOwner(BasePermission):
    """
    Object-level gate for mutations.

    The view supplies the caller's owner reference through
    ``get_owner_reference(request)``; that call may itself raise (for example
    ``NotFound`` when the caller has no pharmacy).
    """

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            return True
        if owner_of(obj, view.get_owner_reference(request)):
            return True
        logger.warning(
            "Ownership check failed: user %s on %s %s",
            request.user.pk, obj.__class__.__name__, obj.pk,
        )
        raise OwnershipError(getattr(view, "ownership_denied_message", None))


class IsSelfOrAdmin(BasePermission):
    message = "You can only access your own account."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated)

    def has_object_permission(self, request, view, obj):
        return _is_admin(request.user) or owner_of(obj, request.user.pk)
