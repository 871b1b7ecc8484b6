"""JSON-file-backed implementation of CatalogProvider.

Reads the static ``products.json`` catalog the storefront ships with.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.exceptions import CollaboratorError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import to_number
from storefront.domain.repository.catalog_provider import CatalogProvider


class JsonCatalogProvider(CatalogProvider):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def list_products(self) -> list[Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise CollaboratorError("Failed to load products") from exc
        if not isinstance(raw, list):
            raise CollaboratorError("Failed to load products")
        return [self._to_domain(item) for item in raw if isinstance(item, dict)]

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw.get("id"),
            name=str(raw.get("name") or ""),
            price=to_number(raw.get("price")) or 0.0,
            category=raw.get("category") or "",
            image=raw.get("image") or "",
            tags=tuple(raw.get("tags") or ()),
            slug=raw.get("slug") or "",
        )
