"""업스트림(Nexon Open API) 접근 모듈"""

from .categories import CATEGORY_SPECS, Category, CategorySpec, category_from_slug
from .client import NexonApiClient, query_date

__all__ = [
    "CATEGORY_SPECS",
    "Category",
    "CategorySpec",
    "category_from_slug",
    "NexonApiClient",
    "query_date",
]
