"""Intake app models."""

import time
import uuid
from dataclasses import dataclass, field
from typing import Any

from django.conf import settings
from django.utils import timezone


def generate_submission_id() -> str:
    """Time-based prefix plus a short random suffix, e.g. ``1718000000000-3f9a1c``."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}"


def iso_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    return timezone.now().isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Submission:
    """One product request as stored in the submissions document."""

    id: str
    created_at: str
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    whatsapp: str | None = None
    product_details: str | None = None
    images: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "images", tuple(self.images))
        if len(self.images) > settings.MAX_UPLOAD_IMAGES:
            raise ValueError(f"A submission holds at most {settings.MAX_UPLOAD_IMAGES} images")

    @classmethod
    def create(
        cls,
        *,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        whatsapp: str | None = None,
        product_details: str | None = None,
        images: tuple[str, ...] | list[str] = (),
    ) -> "Submission":
        """Build a new submission with a fresh id and creation timestamp."""
        return cls(
            id=generate_submission_id(),
            created_at=iso_timestamp(),
            name=name,
            email=email,
            phone=phone,
            whatsapp=whatsapp,
            product_details=product_details,
            images=tuple(images),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "whatsapp": self.whatsapp,
            "productDetails": self.product_details,
            "images": list(self.images),
            "createdAt": self.created_at,
        }

    def __str__(self) -> str:
        return f"{self.name or 'Unknown'} ({self.id})"
