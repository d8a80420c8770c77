"""Protocols for provider lookups consumed by the validators."""

from typing import Protocol

from .models import BootProvider, ModulesProvider


class BootProviderResolver(Protocol):
    """Resolves a product category to its boot file convention.

    Implementations must be side-effect free and safe for concurrent reads.
    """

    def get_boot_provider(self, category: str) -> BootProvider | None:
        """
        Look up the boot provider for a category.

        Args:
            category: Product category from the manifest

        Returns:
            BootProvider, or None if the category is unknown
        """
        ...


class ModulesProviderResolver(Protocol):
    """Resolves a product name to its modules directory convention."""

    def get_modules_provider(self, product_name: str) -> ModulesProvider | None:
        """
        Look up the modules provider for a product.

        Args:
            product_name: Product name from the module set

        Returns:
            ModulesProvider, or None if the product has no known modules layout
        """
        ...
