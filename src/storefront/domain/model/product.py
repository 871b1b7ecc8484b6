"""Product: a read-only catalog entry.

The storefront never mutates products; it only joins cart lines
against them by id.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Product:
    id: int | str
    name: str
    price: float
    category: str = ""
    image: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
    slug: str = ""
