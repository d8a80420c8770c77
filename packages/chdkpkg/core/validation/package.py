"""Top-level package validation.

Runs the field validators in a fixed order, resolves the category's boot
provider, verifies the declared file digests, confirms the boot file is among
them and, for modules-bearing packages, validates the module set.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from chdkpkg.core.config.models import ValidationSettings
from chdkpkg.core.models import ModuleSet, PackageManifest
from chdkpkg.core.providers import BootProviderResolver, ModulesProviderResolver, ProviderRegistry
from chdkpkg.core.utils.logging import get_logger
from chdkpkg.core.validation.context import (
    CancelToken,
    ProgressCallback,
    ValidationContext,
    new_context,
)
from chdkpkg.core.validation.errors import (
    ValidationError,
    missing_boot_file,
    missing_field,
    unknown_provider,
)
from chdkpkg.core.validation.fields import (
    validate_build,
    validate_camera,
    validate_compiler,
    validate_encoding,
    validate_hash_block,
    validate_package_version,
    validate_product,
    validate_source,
)
from chdkpkg.core.validation.hashes import verify_hash_values
from chdkpkg.core.validation.modules import ModuleSetValidator
from chdkpkg.core.validation.paths import normalize_key
from chdkpkg.core.validation.result import ValidationResult, to_result

logger = get_logger(__name__)


def _declared_file_count(manifest: PackageManifest | None) -> int:
    if manifest is None:
        return 0
    total = len(manifest.hash.values or {}) if manifest.hash is not None else 0
    if manifest.modules is not None:
        total += manifest.modules.declared_file_count()
    return total


class PackageValidator:
    """Validates a PackageManifest against the package tree.

    Stateless: one instance may validate many packages, concurrently from
    several threads, as long as the resolvers allow concurrent reads.

    Example:
        registry = ProviderRegistry.from_config(settings.providers)
        validator = PackageValidator(
            boot_resolver=registry,
            modules_validator=ModuleSetValidator(registry, settings),
            settings=settings,
        )
        result = validator.validate(manifest, "/mnt/card", progress=print)
    """

    def __init__(
        self,
        boot_resolver: BootProviderResolver,
        modules_validator: ModuleSetValidator | None = None,
        settings: ValidationSettings | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize with explicit collaborators.

        Args:
            boot_resolver: Resolves product category -> boot provider
            modules_validator: Validator for modules-bearing packages
            settings: Validator settings (defaults used if None)
            clock: Returns validation time; defaults to current UTC time
        """
        self.boot_resolver = boot_resolver
        self.modules_validator = modules_validator
        self.settings = settings or ValidationSettings()
        self.clock = clock

    def validate(
        self,
        value: PackageManifest | None,
        base_path: Path | str,
        progress: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> ValidationResult:
        context = new_context(
            base_path,
            self.settings,
            total=_declared_file_count(value),
            progress=progress,
            cancel_token=cancel_token,
            now=self.clock() if self.clock else None,
        )

        error = self.check(value, context)
        if error is None:
            logger.info(
                f"Package valid: {context.tracker.completed} file(s) verified under "
                f"{context.base_path}"
            )
        else:
            logger.warning(f"Package rejected: {error}")
        return to_result(error)

    def check(
        self,
        manifest: PackageManifest | None,
        context: ValidationContext,
    ) -> ValidationError | None:
        """Run all checkpoints in order; return the first failure."""
        if manifest is None:
            return missing_field("manifest", "Null manifest")

        error = self._check_fields(manifest, context)
        if error is not None:
            return error

        # Fields passed, so product, category and hash block are present
        category = manifest.product.category
        boot_provider = self.boot_resolver.get_boot_provider(category)
        if boot_provider is None:
            return unknown_provider(category, "boot")

        logger.debug(f"Verifying {len(manifest.hash.values)} {manifest.hash.name} digest(s)")
        error = verify_hash_values(manifest.hash.values, manifest.hash.name, context)
        if error is not None:
            return error

        boot_key = normalize_key(boot_provider.file_name)
        if not any(normalize_key(path) == boot_key for path in manifest.hash.values):
            return missing_boot_file(boot_provider.file_name)

        if manifest.modules is not None:
            return self._check_modules(manifest.modules, context)

        return None

    def _check_fields(
        self,
        manifest: PackageManifest,
        context: ValidationContext,
    ) -> ValidationError | None:
        checks: tuple[Callable[[], ValidationError | None], ...] = (
            lambda: validate_package_version(manifest.version),
            lambda: validate_product(manifest.product, context.earliest_created, context.now),
            lambda: validate_camera(manifest.camera),
            lambda: validate_build(manifest.build),
            lambda: validate_compiler(manifest.compiler),
            lambda: validate_source(manifest.source),
            lambda: validate_encoding(manifest.encoding),
            lambda: validate_hash_block(manifest.hash),
        )
        for check in checks:
            error = check()
            if error is not None:
                return error
        return None

    def _check_modules(self, modules: ModuleSet, context: ValidationContext) -> ValidationError | None:
        if self.modules_validator is None:
            return unknown_provider(modules.product_name or "unnamed", "modules")
        return self.modules_validator.check(modules, context)


def build_package_validator(
    settings: ValidationSettings | None = None,
    boot_resolver: BootProviderResolver | None = None,
    modules_resolver: ModulesProviderResolver | None = None,
    clock: Callable[[], datetime] | None = None,
) -> PackageValidator:
    """Assemble a PackageValidator and its ModuleSetValidator.

    Resolvers default to a ProviderRegistry built from ``settings.providers``.
    """
    settings = settings or ValidationSettings()
    registry = ProviderRegistry.from_config(settings.providers)
    modules_validator = ModuleSetValidator(
        modules_resolver or registry, settings=settings, clock=clock
    )
    return PackageValidator(
        boot_resolver or registry,
        modules_validator=modules_validator,
        settings=settings,
        clock=clock,
    )


def validate_package(
    manifest: PackageManifest | None,
    base_path: Path | str,
    progress: ProgressCallback | None = None,
    cancel_token: CancelToken | None = None,
    settings: ValidationSettings | None = None,
) -> ValidationResult:
    """Validate a package manifest with resolvers built from settings.

    Example:
        >>> result = validate_package(manifest, "/mnt/card")
        >>> result.raise_if_invalid()
    """
    validator = build_package_validator(settings)
    return validator.validate(manifest, base_path, progress=progress, cancel_token=cancel_token)


def validate_module_set(
    module_set: ModuleSet | None,
    base_path: Path | str,
    progress: ProgressCallback | None = None,
    cancel_token: CancelToken | None = None,
    settings: ValidationSettings | None = None,
) -> ValidationResult:
    """Validate a module set with a resolver built from settings."""
    settings = settings or ValidationSettings()
    validator = ModuleSetValidator(ProviderRegistry.from_config(settings.providers), settings)
    return validator.validate(module_set, base_path, progress=progress, cancel_token=cancel_token)
