"""
Catalog data: tools, charge policies and holiday rules.

Quick start:
    >>> from toolrental.data import DEFAULT_CATALOG
    >>> DEFAULT_CATALOG.lookup_tool("LADW")
    Tool(code='LADW', type='Ladder', brand='Werner')
"""

from .base import BaseCatalogSource, CatalogSource
from .builtin import (
    CHAINSAW,
    DEFAULT_CATALOG,
    DEFAULT_CHARGES,
    DEFAULT_HOLIDAYS,
    DEFAULT_TOOLS,
    INDEPENDENCE_DAY,
    JACKHAMMER,
    LABOR_DAY,
    LADDER,
)
from .catalog import Catalog
from .factory import create_catalog, create_catalog_source, load_catalog
from .loaders import BuiltinCatalogSource, JSONCatalogSource

__all__ = [
    # Catalog
    "Catalog",
    "DEFAULT_CATALOG",
    "DEFAULT_TOOLS",
    "DEFAULT_CHARGES",
    "DEFAULT_HOLIDAYS",
    "INDEPENDENCE_DAY",
    "LABOR_DAY",
    "CHAINSAW",
    "LADDER",
    "JACKHAMMER",
    # Sources
    "CatalogSource",
    "BaseCatalogSource",
    "BuiltinCatalogSource",
    "JSONCatalogSource",
    # Factory
    "create_catalog_source",
    "create_catalog",
    "load_catalog",
]
