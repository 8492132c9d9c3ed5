"""Terminal presentation: table rendering and page navigation."""

from .navigator import PaginationController
from .table import TableRenderer

__all__ = ["PaginationController", "TableRenderer"]
