"""Field validators, one per manifest substructure.

Stateless, fail-fast checks. Each returns None when the substructure passes or
the ValidationError for the first violated rule. They run in a fixed order
(see FIELD_CHECK_ORDER) so a multiply-broken manifest always reports the same
first failure.

Optional substructures:
- compiler: absent for downloaded builds
- source: absent for manual builds
- encoding: absent when the encoding was not detected
"""

from __future__ import annotations

from datetime import datetime

from chdkpkg.core.hashing import SECURE_HASH_ALGORITHMS, is_secure_algorithm
from chdkpkg.core.models import (
    BuildInfo,
    CameraInfo,
    CompilerInfo,
    EncodingInfo,
    HashInfo,
    ProductInfo,
    SoftwareVersion,
    SourceInfo,
)
from chdkpkg.core.validation.checks import validate_changeset, validate_created, validate_version
from chdkpkg.core.validation.errors import ValidationError, invalid_field, missing_field

FIELD_CHECK_ORDER: tuple[str, ...] = (
    "version",
    "product",
    "camera",
    "build",
    "compiler",
    "source",
    "encoding",
    "hash",
)


def validate_package_version(version: SoftwareVersion | None) -> ValidationError | None:
    return validate_version(version, field="version", subject="version", min_major=1)


def validate_product(
    product: ProductInfo | None,
    earliest: datetime,
    now: datetime,
) -> ValidationError | None:
    if product is None:
        return missing_field("product", "Null product")

    if not product.name:
        return missing_field("product.name", "Missing product name")

    if not product.category:
        return missing_field("product.category", "Missing product category")

    error = validate_version(
        product.version, field="product.version", subject="product version", min_major=0
    )
    if error is not None:
        return error

    error = validate_created(product.created, "product.created", "product", earliest, now)
    if error is not None:
        return error

    if product.language is None:
        return missing_field("product.language", "Missing product language")

    return None


def validate_camera(camera: CameraInfo | None) -> ValidationError | None:
    if camera is None:
        return missing_field("camera", "Null camera")

    if not camera.platform:
        return missing_field("camera.platform", "Missing camera platform")

    if not camera.revision:
        return missing_field("camera.revision", "Missing camera revision")

    return None


def validate_build(build: BuildInfo | None) -> ValidationError | None:
    if build is None:
        return missing_field("build", "Null build")

    # Empty in update
    if build.name is None:
        return missing_field("build.name", "Null build name")

    # Empty in final
    if build.status is None:
        return missing_field("build.status", "Null build status")

    if build.changeset is not None:
        return validate_changeset(build.changeset, "build.changeset", "build")

    return None


def validate_compiler(compiler: CompilerInfo | None) -> ValidationError | None:
    # Unknown in download
    if compiler is None:
        return None

    if not compiler.name:
        return missing_field("compiler.name", "Missing compiler name")

    if compiler.version is None:
        return missing_field("compiler.version", "Null compiler version")

    return None


def validate_source(source: SourceInfo | None) -> ValidationError | None:
    # Missing in manual build
    if source is None:
        return None

    if not source.name:
        return missing_field("source.name", "Missing source name")

    if source.channel is None:
        return missing_field("source.channel", "Missing source channel")

    if source.url is None:
        return missing_field("source.url", "Missing source url")

    return None


def validate_encoding(encoding: EncodingInfo | None) -> ValidationError | None:
    # Missing if undetected
    if encoding is None:
        return None

    if encoding.name is None:
        return missing_field("encoding.name", "Missing encoding name")

    if encoding.name and encoding.data is None:
        return missing_field("encoding.data", "Missing encoding data")

    return None


def validate_hash_block(hash_info: HashInfo | None, field: str = "hash") -> ValidationError | None:
    """Check algorithm and declared entries; files are verified separately.

    Args:
        hash_info: Hash block to check
        field: Field path used in errors (e.g. "modules.ui.hash")
    """
    if hash_info is None:
        return missing_field(field, f"Null {field}")

    if not hash_info.name:
        return missing_field(f"{field}.name", f"Missing {field} name")

    if not is_secure_algorithm(hash_info.name):
        return invalid_field(
            f"{field}.name",
            f"Invalid {field} name {hash_info.name!r}; "
            f"expected one of {', '.join(SECURE_HASH_ALGORITHMS)}",
        )

    if hash_info.values is None:
        return missing_field(f"{field}.values", f"Null {field} values")

    if not hash_info.values:
        return invalid_field(f"{field}.values", f"Empty {field} values")

    for path, digest in hash_info.values.items():
        if not path:
            return invalid_field(f"{field}.values", f"Empty file path in {field} values")
        if not digest:
            return invalid_field(f"{field}.values", f"Empty {field} value for {path}", path=path)

    return None
