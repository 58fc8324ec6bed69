"""Swappable infrastructure components."""

# Importing the production subclass registers it for ``get_provider``
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
