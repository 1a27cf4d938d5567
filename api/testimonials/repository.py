"""
Testimonial persistence.
"""

from __future__ import annotations

from dataclasses import dataclass

from core import documents

TABLE = "testimonials"
ENTITY = "Testimonial"

# Featured first, then manual order, newest first within a slot.
SORT: list[documents.SortKey] = [
    ("isFeatured", documents.DESC),
    ("displayOrder", documents.ASC),
    ("createdAt", documents.DESC),
]


@dataclass(frozen=True)
class TestimonialFilter:
    active: bool | None = True
    service_type: str | None = None
    featured: bool | None = None

    def predicates(self) -> list[documents.Predicate]:
        preds: list[documents.Predicate] = []
        if self.active is not None:
            preds.append(documents.eq("isActive", self.active))
        if self.service_type and self.service_type != "all":
            preds.append(documents.one_of("serviceType", [self.service_type, "all"]))
        if self.featured is not None:
            preds.append(documents.eq("isFeatured", self.featured))
        return preds
