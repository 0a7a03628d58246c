from .app_settings import Settings
from .config_validator import ConfigValidationResult, validate_config
from .constructionwire_settings import DEFAULT_API_BASE_URL, ConstructionwireSettings
from .server_settings import ServerSettings

__all__ = [
    "ConfigValidationResult",
    "ConstructionwireSettings",
    "DEFAULT_API_BASE_URL",
    "ServerSettings",
    "Settings",
    "validate_config",
]
