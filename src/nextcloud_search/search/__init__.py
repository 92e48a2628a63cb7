from nextcloud_search.search.models import SearchProvider, SearchProviders
from nextcloud_search.search.unified_search_providers import UnifiedSearchProvidersRemoteOperation

__all__ = [
    "SearchProvider",
    "SearchProviders",
    "UnifiedSearchProvidersRemoteOperation",
]
