from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Category:
    id: str
    label: str
    emoji: str


QUICK_FILTERS: List[Category] = [
    Category("carnes", "Carnes", "🥩"),
    Category("massas", "Massas", "🍝"),
    Category("peixes", "Peixes", "🐟"),
    Category("fastfood", "Fast Food", "🍔"),
    Category("brasileira", "Brasileira", "🇧🇷"),
    Category("sobremesas", "Doces", "🍰"),
]


def find_category(category_id: Optional[str]) -> Optional[Category]:
    if not category_id:
        return None
    for c in QUICK_FILTERS:
        if c.id == category_id:
            return c
    return None


def category_label(category_id: Optional[str]) -> str:
    """Label sent to the gateway; empty when nothing is selected."""
    c = find_category(category_id)
    return c.label if c else ""
