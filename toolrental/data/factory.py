"""
Factory for creating catalog sources.
"""

from pathlib import Path
from typing import Optional, Union

from toolrental.conventions.types import CatalogSourceType
from toolrental.data.base import CatalogSource
from toolrental.data.catalog import Catalog
from toolrental.data.loaders import BuiltinCatalogSource, JSONCatalogSource


def create_catalog_source(source_type: CatalogSourceType, **kwargs) -> CatalogSource:
    """
    Create a catalog source.

    Args:
        source_type: Type of catalog source to create
        **kwargs: Configuration specific to the source type

    Returns:
        Catalog source ready to ``load()``

    Examples:
        >>> source = create_catalog_source(CatalogSourceType.BUILTIN)

        >>> source = create_catalog_source(
        ...     CatalogSourceType.JSON,
        ...     path="/path/to/catalog.json"
        ... )
    """
    if source_type == CatalogSourceType.BUILTIN:
        return BuiltinCatalogSource()
    elif source_type == CatalogSourceType.JSON:
        path = kwargs.get("path")
        if not path:
            raise ValueError("path required for JSON catalog source")
        return JSONCatalogSource(path=Path(path))
    else:
        raise ValueError(f"Unsupported catalog source type: {source_type}")


def create_catalog(source_type: CatalogSourceType, **kwargs) -> Catalog:
    """Create a catalog source and load it."""
    return create_catalog_source(source_type, **kwargs).load()


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """Load the JSON catalog at ``path``, or the built-in one if no path is given."""
    if path:
        return create_catalog(CatalogSourceType.JSON, path=path)
    return create_catalog(CatalogSourceType.BUILTIN)
