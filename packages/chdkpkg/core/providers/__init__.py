"""Provider lookups mapping product categories and names to on-disk conventions."""

from chdkpkg.core.providers.models import BootProvider, ModulesProvider, ProviderConfig
from chdkpkg.core.providers.protocols import BootProviderResolver, ModulesProviderResolver
from chdkpkg.core.providers.registry import ProviderRegistry

__all__ = [
    "BootProvider",
    "BootProviderResolver",
    "ModulesProvider",
    "ModulesProviderResolver",
    "ProviderConfig",
    "ProviderRegistry",
]
