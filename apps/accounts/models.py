"""
User models for MediFind.

This module defines the custom User model with role-based access control.
Roles: Regular user, Pharmacy operator, Admin
"""
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Custom User model extending Django's AbstractUser.

    Email is the login identifier. Roles:
    - USER: Searches medicines and pharmacies
    - PHARMACY: Operates a pharmacy and manages its medicines
    - ADMIN: Full system access
    """
    ROLE_USER = "user"
    ROLE_PHARMACY = "pharmacy"
    ROLE_ADMIN = "admin"
    LEGACY_ROLE_PHARMACY_ADMIN = "pharmacyAdmin"

    ROLE_CHOICES = [
        (ROLE_USER, "User"),
        (ROLE_PHARMACY, "Pharmacy"),
        (ROLE_ADMIN, "Admin"),
    ]

    # Ownership predicate compares the record itself against the caller.
    owner_field = "id"

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=150, blank=True, default="")
    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=ROLE_USER,
        help_text="User role determines access level"
    )
    phone_number = models.CharField(
        max_length=20,
        blank=True,
        null=True,
        help_text="Contact phone number"
    )
    address = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["username"]

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.email} ({self.role})"

    def is_admin(self):
        """Check if user is an admin."""
        return self.is_superuser or self.role == self.ROLE_ADMIN

    def is_pharmacy_operator(self):
        """Check if user operates a pharmacy (including the legacy role value)."""
        return self.role in {self.ROLE_PHARMACY, self.LEGACY_ROLE_PHARMACY_ADMIN}
