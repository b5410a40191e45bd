"""Config settings – 12-factor env-based configuration."""
from mp_webhooks.config.settings.base import Settings
from mp_webhooks.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from mp_webhooks.config.settings.webhook_store import WebHookStoreSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "WebHookStoreSettings",
]
