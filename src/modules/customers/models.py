"""Customer model.

Customers are referenced by orders and reviews but never mutated by
the order placement transaction.  Orders keep their customer via
``PROTECT`` so purchase history cannot be orphaned.
"""

from __future__ import annotations

import structlog
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)


class Gender(models.TextChoices):
    MALE = "Male", "Male"
    FEMALE = "Female", "Female"
    OTHER = "Other", "Other"


class Customer(BaseModel):
    """A registered shopper.

    ``email`` is normalised to lowercase on save so look-ups are
    case-insensitive without a functional index.
    """

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)
    age = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(18), MaxValueValidator(120)],
    )
    gender = models.CharField(
        max_length=10, choices=Gender.choices, blank=True, default=""
    )
    city = models.CharField(max_length=100, blank=True, default="")
    state = models.CharField(max_length=100, blank=True, default="")
    country = models.CharField(max_length=100, blank=True, default="")
    signup_date = models.DateField(null=True, blank=True)
    prime_member = models.BooleanField(default=False)

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["city"], name="customers_city_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.name} ({self.city or 'unknown city'})"
