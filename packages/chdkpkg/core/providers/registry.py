"""Table-backed provider resolution."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from chdkpkg.core.providers.models import BootProvider, ModulesProvider, ProviderConfig

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Resolves boot and modules providers from static lookup tables.

    Implements both BootProviderResolver and ModulesProviderResolver. Names are
    matched case-insensitively. The tables are copied into read-only mappings
    at construction, so one registry can be shared across threads.

    Example:
        registry = ProviderRegistry.from_config(ProviderConfig())
        registry.get_boot_provider("ps").file_name  # 'DISKBOOT.BIN'
    """

    def __init__(
        self,
        boot: Mapping[str, BootProvider] | None = None,
        modules: Mapping[str, ModulesProvider] | None = None,
    ):
        self._boot: Mapping[str, BootProvider] = MappingProxyType(
            {name.casefold(): provider for name, provider in (boot or {}).items()}
        )
        self._modules: Mapping[str, ModulesProvider] = MappingProxyType(
            {name.casefold(): provider for name, provider in (modules or {}).items()}
        )

        logger.debug(
            f"ProviderRegistry initialized with {len(self._boot)} boot and "
            f"{len(self._modules)} modules providers"
        )

    @classmethod
    def from_config(cls, config: ProviderConfig) -> ProviderRegistry:
        """Build a registry from a ProviderConfig."""
        return cls(boot=config.boot, modules=config.modules)

    def get_boot_provider(self, category: str) -> BootProvider | None:
        if not category:
            return None
        return self._boot.get(category.casefold())

    def get_modules_provider(self, product_name: str) -> ModulesProvider | None:
        if not product_name:
            return None
        return self._modules.get(product_name.casefold())
