from chdkpkg.core.config.loader import detect_format, load_config, load_settings
from chdkpkg.core.config.models import ValidationSettings

__all__ = [
    "ValidationSettings",
    "detect_format",
    "load_config",
    "load_settings",
]
