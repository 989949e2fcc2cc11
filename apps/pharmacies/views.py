"""
API views for pharmacies app.

Public browsing of pharmacies plus owner-only mutation.
"""
import logging

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.accounts.authentication import PublicReadMixin
from apps.accounts.permissions import IsResourceOwner, PharmacyRolePermission
from .models import Pharmacy
from .serializers import PharmacySerializer
from .utils import require_user_pharmacy

logger = logging.getLogger(__name__)


class PharmacyViewSet(PublicReadMixin, viewsets.ModelViewSet):
    """
    ViewSet for Pharmacy model.

    Reads are public. Creating requires a pharmacy or admin role; updating and
    deleting additionally require owning the pharmacy.
    """

    # prefetch rather than join so pharmacies of a deleted owner still list
    queryset = Pharmacy.objects.prefetch_related("owner").all()
    serializer_class = PharmacySerializer
    permission_classes = [PharmacyRolePermission, IsResourceOwner]
    lookup_value_regex = r"\d+"
    pagination_class = None
    ownership_denied_message = "You are not authorized to modify this pharmacy"

    def get_owner_reference(self, request):
        return request.user.pk

    def perform_create(self, serializer):
        serializer.save(owner=self.request.user)

    def update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        pharmacy = self.get_object()
        # Medicines are left in place and keep pointing at the removed pharmacy.
        pharmacy.delete()
        logger.info("Pharmacy %s deleted by user %s", kwargs.get("pk"), request.user.pk)
        return Response({"message": "Pharmacy deleted successfully"}, status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"], url_path="my-pharmacy", permission_classes=[IsAuthenticated])
    def my_pharmacy(self, request):
        pharmacy = require_user_pharmacy(request.user, "No pharmacy linked to this account")
        return Response(self.get_serializer(pharmacy).data, status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"], url_path="me", permission_classes=[IsAuthenticated])
    def me(self, request):
        return self.my_pharmacy(request)
