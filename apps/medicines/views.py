"""
API views for medicines app.

Public listing and search of medicines, plus CRUD restricted to the
operator of the owning pharmacy.
"""
import logging

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from apps.accounts.authentication import PublicReadMixin
from apps.accounts.permissions import IsResourceOwner, MedicineRolePermission
from apps.pharmacies.mixins import PharmacyScopedMixin
from apps.pharmacies.models import Pharmacy
from apps.pharmacies.serializers import PharmacySummarySerializer
from .filters import MedicineFilter
from .models import Medicine
from .pagination import MedicinePagination
from .serializers import MedicineSerializer

logger = logging.getLogger(__name__)


class MedicineViewSet(PublicReadMixin, PharmacyScopedMixin, viewsets.ModelViewSet):
    """
    ViewSet for Medicine model.

    Provides CRUD operations for medicines with filtering and search.
    """

    # prefetch rather than join so medicines of a deleted pharmacy still list
    queryset = Medicine.objects.prefetch_related("pharmacy").all()
    serializer_class = MedicineSerializer
    permission_classes = [MedicineRolePermission, IsResourceOwner]
    pagination_class = MedicinePagination
    lookup_value_regex = r"\d+"
    ownership_denied_message = "You can only modify medicines from your own pharmacy"
    public_actions = ("list", "retrieve", "search", "by_pharmacy")

    def get_queryset(self):
        queryset = super().get_queryset().order_by("name", "id")
        if self.action in ("list", "search"):
            medicine_filter = MedicineFilter.from_query_params(self.request.query_params)
            queryset = medicine_filter.apply(queryset)
        return queryset

    def create(self, request, *args, **kwargs):
        # Operators without a pharmacy get 404 whatever the payload.
        self.get_caller_pharmacy("Pharmacy not found")
        return super().create(request, *args, **kwargs)

    def perform_create(self, serializer):
        super().perform_create(serializer)
        logger.info(
            "Medicine %s added to pharmacy %s by user %s",
            serializer.instance.pk, serializer.instance.pharmacy_id, self.request.user.pk,
        )

    def update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        medicine = self.get_object()
        medicine.delete()
        logger.info("Medicine %s deleted by user %s", kwargs.get("pk"), request.user.pk)
        return Response({"message": "Medicine deleted successfully"}, status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"])
    def search(self, request):
        return self.list(request)

    @action(
        detail=False,
        methods=["get"],
        url_path=r"pharmacy/(?P<pharmacy_id>\d+)",
        url_name="by-pharmacy",
    )
    def by_pharmacy(self, request, pharmacy_id=None):
        pharmacy = Pharmacy.objects.filter(pk=pharmacy_id).first()
        if pharmacy is None:
            raise NotFound("Pharmacy not found")

        medicines = Medicine.objects.filter(pharmacy=pharmacy).select_related("pharmacy").order_by("name", "id")
        return Response(
            {
                "medicines": self.get_serializer(medicines, many=True).data,
                "pharmacy": PharmacySummarySerializer(pharmacy).data,
            },
            status=status.HTTP_200_OK,
        )
