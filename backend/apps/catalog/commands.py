from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from apps.api.exceptions import ApplicationError

PRODUCT_FIELDS = (
    "title",
    "description",
    "price",
    "stock",
    "category",
    "thumbnails",
    "code",
)

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1
SORT_DIRECTIONS = ("asc", "desc")
FALSE_FLAGS = ("false", "0", "no", "off")


def _pick_fields(payload: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    data = dict(payload or {})
    # the identifier is assigned by the store and never taken from input
    data.pop("id", None)
    return {name: data[name] for name in PRODUCT_FIELDS if name in data}


# Product Commands
@dataclass
class ProductCreateCommand:
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    stock: Optional[int] = None
    category: Optional[str] = None
    thumbnails: List[str] = field(default_factory=list)
    code: Optional[str] = None

    @staticmethod
    def from_raw(payload: Optional[Mapping[str, Any]]):
        data = _pick_fields(payload)
        if data.get("thumbnails") is None:
            data.pop("thumbnails", None)
        return ProductCreateCommand(**data)

    def to_fields(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in PRODUCT_FIELDS}


@dataclass
class ProductUpdateCommand:
    product_id: int
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    stock: Optional[int] = None
    category: Optional[str] = None
    thumbnails: Optional[List[str]] = None
    code: Optional[str] = None
    provided: FrozenSet[str] = frozenset()

    @staticmethod
    def from_raw(product_id: int, payload: Optional[Mapping[str, Any]]):
        data = _pick_fields(payload)
        if "thumbnails" in data and data["thumbnails"] is None:
            data["thumbnails"] = []
        return ProductUpdateCommand(
            product_id=product_id, provided=frozenset(data), **data
        )

    def changes(self) -> Dict[str, Any]:
        """Only the fields present in the request; everything else is left untouched."""
        return {name: getattr(self, name) for name in PRODUCT_FIELDS if name in self.provided}


# Listing query
@dataclass(frozen=True)
class ProductFilter:
    text: Optional[str] = None
    category: Optional[str] = None
    available: bool = False


@dataclass
class ProductListQuery:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort: Optional[str] = None
    text: Optional[str] = None
    category: Optional[str] = None
    available: bool = False

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def filters(self) -> ProductFilter:
        return ProductFilter(
            text=self.text, category=self.category, available=self.available
        )

    @staticmethod
    def _positive_int(params: Mapping[str, Any], name: str, default: int) -> int:
        raw = params.get(name)
        if raw is None or str(raw).strip() == "":
            return default
        try:
            value = int(str(raw).strip())
        except ValueError:
            value = 0
        if value < 1:
            raise ApplicationError(
                "VALIDATION_ERROR",
                f"{name} must be a positive integer",
                details={name: str(raw)},
            )
        return value

    @staticmethod
    def _text(params: Mapping[str, Any], name: str) -> Optional[str]:
        raw = params.get(name)
        if raw is None:
            return None
        value = str(raw).strip()
        return value or None

    @staticmethod
    def _flag(params: Mapping[str, Any], name: str) -> bool:
        raw = params.get(name)
        if raw is None:
            return False
        value = str(raw).strip().lower()
        return bool(value) and value not in FALSE_FLAGS

    @staticmethod
    def from_params(params: Optional[Mapping[str, Any]]):
        params = params or {}
        sort = (ProductListQuery._text(params, "sort") or "").lower()
        return ProductListQuery(
            page=ProductListQuery._positive_int(params, "page", DEFAULT_PAGE),
            limit=ProductListQuery._positive_int(params, "limit", DEFAULT_LIMIT),
            sort=sort if sort in SORT_DIRECTIONS else None,
            text=ProductListQuery._text(params, "query"),
            category=ProductListQuery._text(params, "category"),
            available=ProductListQuery._flag(params, "availability"),
        )
