"""Registry queries."""

from .get_registry_stats import GetRegistryStats, RegistryStats
from .list_recipients import ListRecipients, RecipientListing

__all__ = ["GetRegistryStats", "RegistryStats", "ListRecipients", "RecipientListing"]
