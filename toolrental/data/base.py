"""
Base abstractions for catalog loading.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from toolrental.data.catalog import Catalog


@runtime_checkable
class CatalogSource(Protocol):
    """
    Protocol for catalog sources.

    Anything that can produce a Catalog (built-in constants, a file, a
    database) satisfies it.
    """

    def load(self) -> Catalog:
        """
        Load the catalog.

        Returns:
            Catalog of tools, charge policies and holiday rules
        """
        ...


class BaseCatalogSource(ABC):
    """
    Abstract base class for catalog sources.

    Caches the loaded catalog so repeated ``load`` calls return the same object.
    """

    def __init__(self):
        self._catalog = None

    def load(self) -> Catalog:
        if self._catalog is None:
            self._catalog = self._load()
        return self._catalog

    @abstractmethod
    def _load(self) -> Catalog:
        """Build the catalog (to be implemented by subclasses)."""
        pass
