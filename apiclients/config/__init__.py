"""Configuration module for the API clients."""
from .settings import ProviderSettings, load_settings

__all__ = ["ProviderSettings", "load_settings"]
