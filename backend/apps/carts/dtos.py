from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass
class CartDTO:
    id: int
    total_price: float
    created_at: datetime
    # Ordered product identifiers; may include products that no longer exist.
    products: List[int] = field(default_factory=list)
