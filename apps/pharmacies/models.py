"""
Pharmacy models for MediFind.

A pharmacy is a storefront registered by a pharmacy operator. It owns the
medicines listed under it.
"""
from django.conf import settings
from django.db import models


class Pharmacy(models.Model):
    """
    Pharmacy registry entry.

    Each pharmacy is linked to exactly one owning user. One pharmacy per
    operator is enforced when registering, not by the database.
    """
    owner_field = "owner_id"

    name = models.CharField(max_length=255)
    address = models.TextField()
    phone = models.CharField(max_length=20)
    email = models.EmailField(blank=True, null=True)
    license_number = models.CharField(max_length=100, blank=True, null=True)
    location = models.CharField(
        max_length=120,
        blank=True,
        null=True,
        help_text="City or pincode"
    )
    # No database constraint: deleting a user leaves their pharmacy behind.
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="pharmacies",
        help_text="User who registered and manages this pharmacy",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Pharmacy"
        verbose_name_plural = "Pharmacies"
        ordering = ["name", "id"]

    def __str__(self):
        return self.name
