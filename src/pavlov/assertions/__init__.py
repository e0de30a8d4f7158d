"""Check descriptors, the catalog they are registered in, and the default checks."""

from pavlov.assertions.base import BinaryCheck, Check, UnaryCheck
from pavlov.assertions.builtin import DEFAULT_CATALOG
from pavlov.assertions.catalog import Catalog, CatalogError

__all__ = [
    "BinaryCheck",
    "Catalog",
    "CatalogError",
    "Check",
    "DEFAULT_CATALOG",
    "UnaryCheck",
]
