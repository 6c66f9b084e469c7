import math
from dataclasses import dataclass
from typing import Optional

from rest_framework.utils.urls import replace_query_param


@dataclass(frozen=True)
class PageInfo:
    page: int
    limit: int
    total: int
    total_pages: int
    has_prev_page: bool
    has_next_page: bool

    @property
    def prev_page(self) -> Optional[int]:
        return self.page - 1 if self.has_prev_page else None

    @property
    def next_page(self) -> Optional[int]:
        return self.page + 1 if self.has_next_page else None


class ProductListPagination:
    # Clients override page size with `?limit=` and select pages with `?page=`
    limit_query_param = "limit"
    page_query_param = "page"

    def page_info(self, page: int, limit: int, total: int) -> PageInfo:
        total_pages = math.ceil(total / limit)
        return PageInfo(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_prev_page=page > 1,
            has_next_page=page < total_pages,
        )

    def get_link(self, url: str, page: Optional[int], limit: int) -> Optional[str]:
        """Same path and query string as ``url`` pointing at ``page``; ``None`` when there is no such page."""
        if page is None:
            return None
        url = replace_query_param(url, self.limit_query_param, limit)
        return replace_query_param(url, self.page_query_param, page)
