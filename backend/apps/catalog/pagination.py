import math
from dataclasses import dataclass
from typing import Any, Dict

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageWindow:
    """Offset pagination over a counted result set."""

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.offset + self.page_size

    def summarize(self, returned: int, total: int) -> Dict[str, Any]:
        return {
            "currentPage": self.page,
            "totalPages": math.ceil(total / self.page_size) if total else 0,
            "totalProducts": total,
            "hasNext": self.offset + returned < total,
            "hasPrev": self.page > 1,
        }
