"""Module set validation.

Checks each module's metadata and files, then cross-checks the provider's
modules directory for files no module declares.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from chdkpkg.core.config.models import ValidationSettings
from chdkpkg.core.models import ModuleInfo, ModuleSet
from chdkpkg.core.providers import ModulesProvider, ModulesProviderResolver
from chdkpkg.core.utils.logging import get_logger
from chdkpkg.core.validation.checks import validate_changeset, validate_created, validate_version
from chdkpkg.core.validation.context import (
    CancelToken,
    ProgressCallback,
    ValidationContext,
    new_context,
)
from chdkpkg.core.validation.errors import (
    ValidationError,
    cancelled,
    invalid_field,
    missing_field,
    missing_file,
    orphan_file,
    unknown_provider,
)
from chdkpkg.core.validation.fields import validate_hash_block
from chdkpkg.core.validation.hashes import verify_hash_values
from chdkpkg.core.validation.paths import (
    list_files_with_extension,
    normalize_key,
    resolve_case_insensitive,
)
from chdkpkg.core.validation.result import ValidationResult, to_result

logger = get_logger(__name__)


class ModuleSetValidator:
    """Validates a ModuleSet against the package tree.

    Steps, stopping at the first failure:
    1. Set version and product name
    2. Per module: name, metadata, hash block, file digests
    3. Pool every declared module file into one lookup
    4. Resolve the product's modules provider
    5. Reject any file in the provider directory that no module declares

    Example:
        validator = ModuleSetValidator(ProviderRegistry.from_config(ProviderConfig()))
        result = validator.validate(module_set, "/mnt/card")
    """

    def __init__(
        self,
        modules_resolver: ModulesProviderResolver,
        settings: ValidationSettings | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize with provider lookup and optional settings.

        Args:
            modules_resolver: Resolves product name -> modules provider
            settings: Validator settings (defaults used if None)
            clock: Returns validation time; defaults to current UTC time
        """
        self.modules_resolver = modules_resolver
        self.settings = settings or ValidationSettings()
        self.clock = clock

    def validate(
        self,
        value: ModuleSet | None,
        base_path: Path | str,
        progress: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> ValidationResult:
        total = value.declared_file_count() if value is not None else 0
        context = new_context(
            base_path,
            self.settings,
            total=total,
            progress=progress,
            cancel_token=cancel_token,
            now=self.clock() if self.clock else None,
        )
        error = self.check(value, context)
        if error is None:
            logger.debug(f"Module set valid under {context.base_path}")
        else:
            logger.warning(f"Module set rejected: {error}")
        return to_result(error)

    def check(self, module_set: ModuleSet | None, context: ValidationContext) -> ValidationError | None:
        """Run all checkpoints using a caller-supplied context.

        Used directly by PackageValidator so boot and module files share one
        progress total.
        """
        if module_set is None:
            return missing_field("modules", "Null modules")

        error = validate_version(
            module_set.version, field="modules.version", subject="modules version"
        )
        if error is not None:
            return error

        if not module_set.product_name:
            return missing_field("modules.product_name", "Missing product name")

        if module_set.modules is None:
            return missing_field("modules.modules", "Null modules")

        pooled: dict[str, str] = {}
        for name, module in module_set.modules.items():
            if context.is_cancelled():
                logger.warning(f"Module validation cancelled before {name!r}")
                return cancelled()

            error = self._check_module(name, module, context)
            if error is not None:
                return error

            for path, digest in module.hash.values.items():
                key = normalize_key(path)
                if key in pooled:
                    return invalid_field(
                        f"modules.{name}.hash.values",
                        f"Duplicate module file {path}",
                        path=path,
                    )
                pooled[key] = digest

        provider = self.modules_resolver.get_modules_provider(module_set.product_name)
        if provider is None:
            return unknown_provider(module_set.product_name, "modules")

        if context.is_cancelled():
            return cancelled()

        return self._check_orphans(provider, pooled, context)

    def _check_module(
        self,
        name: str,
        module: ModuleInfo | None,
        context: ValidationContext,
    ) -> ValidationError | None:
        if not name:
            return missing_field("modules.modules", "Missing module name")

        field = f"modules.{name}"
        subject = f"module {name}"

        if module is None:
            return missing_field(field, f"Null {subject}")

        error = validate_created(
            module.created, f"{field}.created", subject, context.earliest_created, context.now
        )
        if error is not None:
            return error

        error = validate_changeset(module.changeset, f"{field}.changeset", subject)
        if error is not None:
            return error

        error = validate_hash_block(module.hash, field=f"{field}.hash")
        if error is not None:
            return error

        return verify_hash_values(
            module.hash.values, module.hash.name, context, field=f"{field}.hash"
        )

    def _check_orphans(
        self,
        provider: ModulesProvider,
        pooled: dict[str, str],
        context: ValidationContext,
    ) -> ValidationError | None:
        try:
            modules_dir = resolve_case_insensitive(context.base_path, provider.path)
            if modules_dir is None or not modules_dir.is_dir():
                return missing_file(provider.path)
            entries = list_files_with_extension(modules_dir, provider.extension)
        except OSError as e:
            return missing_file(provider.path, detail=e.strerror or str(e))

        for entry in entries:
            key = normalize_key(f"{provider.path}/{entry.name}")
            if key not in pooled:
                return orphan_file(entry.name)

        return None
