import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("pharmacies", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Medicine",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(help_text="Medicine name (e.g., Paracetamol 500mg)", max_length=200)),
                ("brand", models.CharField(blank=True, max_length=120, null=True)),
                (
                    "category",
                    models.CharField(blank=True, help_text="Dosage form (e.g., Tablet, Syrup)", max_length=100, null=True),
                ),
                ("dosage", models.CharField(blank=True, help_text="Strength (e.g., 500mg)", max_length=50, null=True)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Price per unit",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                ("stock", models.PositiveIntegerField(help_text="Units currently in stock")),
                ("expiry_date", models.DateField(blank=True, null=True)),
                ("prescription_required", models.BooleanField(default=False)),
                ("description", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "pharmacy",
                    models.ForeignKey(
                        db_constraint=False,
                        help_text="Pharmacy that owns this medicine",
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="medicines",
                        to="pharmacies.pharmacy",
                    ),
                ),
            ],
            options={
                "verbose_name": "Medicine",
                "verbose_name_plural": "Medicines",
                "ordering": ["name", "id"],
            },
        ),
    ]
