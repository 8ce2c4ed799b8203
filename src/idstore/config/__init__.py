"""Configuration module using Pydantic Settings.

Usage:
    from idstore.config import StoreSettings

    settings = StoreSettings(id_attribute="_id")
"""

from idstore.config.settings import StoreSettings

__all__ = [
    "StoreSettings",
]
