from .loader import load_config
from .models import (
    HTTPConfig,
    NavConfig,
    PageHooksConfig,
    SecretsConfig,
)

__all__ = [
    "HTTPConfig",
    "NavConfig",
    "PageHooksConfig",
    "SecretsConfig",
    "load_config",
]
