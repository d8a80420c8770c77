"""Provider descriptors and their configuration tables."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BootProvider(BaseModel):
    """File-naming convention for a product category's boot file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    file_name: str = Field(min_length=1, description="Boot file name (e.g. 'DISKBOOT.BIN')")

    @field_validator("file_name")
    @classmethod
    def _plain_file_name(cls, value: str) -> str:
        if "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError(f"Boot file name must be a plain file name, got {value!r}")
        return value


class ModulesProvider(BaseModel):
    """Storage convention for a product's add-on modules."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = Field(min_length=1, description="Modules directory relative to the package root")
    extension: str = Field(min_length=1, description="Module file extension (e.g. '.FLT')")

    @field_validator("path")
    @classmethod
    def _normalize_separators(cls, value: str) -> str:
        parts = [part for part in value.replace("\\", "/").split("/") if part and part != "."]
        if not parts:
            raise ValueError(f"Modules path must name a directory, got {value!r}")
        if ".." in parts or ":" in parts[0]:
            raise ValueError(f"Modules path must stay inside the package root, got {value!r}")
        return "/".join(parts)

    @field_validator("extension")
    @classmethod
    def _ensure_leading_dot(cls, value: str) -> str:
        return value if value.startswith(".") else f".{value}"


def _default_boot_providers() -> dict[str, BootProvider]:
    return {
        "PS": BootProvider(file_name="DISKBOOT.BIN"),
        "EOS": BootProvider(file_name="DISKBOOT.BIN"),
    }


def _default_modules_providers() -> dict[str, ModulesProvider]:
    return {
        "CHDK": ModulesProvider(path="CHDK/MODULES", extension=".FLT"),
    }


class ProviderConfig(BaseModel):
    """Provider lookup tables.

    Attributes:
        boot: Product category -> boot provider
        modules: Product name -> modules provider

    Example (YAML):
        providers:
          boot:
            PS: {file_name: DISKBOOT.BIN}
          modules:
            CHDK: {path: CHDK/MODULES, extension: .FLT}
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    boot: dict[str, BootProvider] = Field(default_factory=_default_boot_providers)
    modules: dict[str, ModulesProvider] = Field(default_factory=_default_modules_providers)
