"""Catalog domain operations for applications and environments."""

from .errors import CatalogBadRequestError, CatalogNotFoundError
from .service import CatalogService

__all__ = ["CatalogBadRequestError", "CatalogNotFoundError", "CatalogService"]
