"""Config settings – engine settings and their loaders."""
from mp_acl.config.settings.acl import AclSettings
from mp_acl.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["AclSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
