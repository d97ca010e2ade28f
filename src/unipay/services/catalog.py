"""Catalog products, the goods or services subscription plans are sold for."""

from __future__ import annotations

from unipay.client import PayPalClient
from unipay.models.catalog import (
    CreateProductResponse,
    ListProductsResponse,
    Product,
    ProductListParams,
)


class ProductService:
    """Service for catalog products (v1 Catalog Products API)."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def create(self, product: Product) -> CreateProductResponse:
        return self._client.post("/v1/catalogs/products", product, into=CreateProductResponse)

    def update(self, product: Product) -> None:
        """Patch the mutable fields that are set on ``product``. Its ``id`` names the target."""
        self._client.patch(f"/v1/catalogs/products/{product.id}", product.update_patch())

    def get(self, product_id: str) -> Product:
        return self._client.get(f"/v1/catalogs/products/{product_id}", into=Product)

    def list(self, params: ProductListParams | None = None) -> ListProductsResponse:
        query = params.model_dump() if params else None
        return self._client.get("/v1/catalogs/products", params=query, into=ListProductsResponse)
