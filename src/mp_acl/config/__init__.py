"""Config – engine settings and loaders."""

from mp_acl.config.settings import (
    AclSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
)
from mp_acl.errors import (
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingsError,
)

__all__ = [
    "AclSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingsError",
    "SettingsLoader",
]
