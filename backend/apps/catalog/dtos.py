from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ProductDTO:
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    stock: Optional[int] = None
    category: Optional[str] = None
    thumbnails: List[str] = field(default_factory=list)
    code: Optional[str] = None


@dataclass
class ProductPageDTO:
    items: List[ProductDTO]
    page: int
    limit: int
    total: int
    total_pages: int
    prev_page: Optional[int]
    next_page: Optional[int]
    has_prev_page: bool
    has_next_page: bool
    prev_link: Optional[str]
    next_link: Optional[str]


"""DTO dataclasses only. Mapping logic lives in mappers.py."""
