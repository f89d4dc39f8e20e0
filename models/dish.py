from dataclasses import dataclass, field
from datetime import datetime, timezone

from models.category import Category


@dataclass(frozen=True)
class Dish:
    """A single menu entry. Only MenuCollection creates or replaces it."""

    id: str
    name: str
    description: str
    category: Category
    price: float
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
