"""Catalog product data models (v1 Catalog Products API)."""

from __future__ import annotations

from datetime import datetime

from unipay.models.common import Link, ListParams, Patch, PayPalModel, SharedListResponse

PRODUCT_TYPE_PHYSICAL = "PHYSICAL"
PRODUCT_TYPE_DIGITAL = "DIGITAL"
PRODUCT_TYPE_SERVICE = "SERVICE"


class Product(PayPalModel):
    id: str | None = None
    name: str
    description: str | None = None
    category: str | None = None  # e.g. SOFTWARE, BOOKS_PERIODICALS_AND_NEWSPAPERS
    type: str = PRODUCT_TYPE_PHYSICAL
    image_url: str | None = None
    home_url: str | None = None

    def update_patch(self) -> list[Patch]:
        """Replace operations for the fields PayPal lets you change after creation."""
        return [
            Patch(operation="replace", path=f"/{field}", value=getattr(self, field))
            for field in ("description", "category", "image_url", "home_url")
            if getattr(self, field)
        ]


class CreateProductResponse(Product):
    create_time: datetime | None = None
    update_time: datetime | None = None
    links: list[Link] = []


class ProductListParams(ListParams):
    pass


class ListProductsResponse(SharedListResponse):
    products: list[Product] = []
