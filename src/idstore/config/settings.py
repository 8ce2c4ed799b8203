"""Configuration settings using Pydantic Settings.

Provides typed defaults for model-backed collections with environment
variable support.

Usage:
    from idstore.config import StoreSettings

    # Load from environment variables (IDSTORE_*)
    settings = StoreSettings()

    # Or override with explicit values
    settings = StoreSettings(id_attribute="_id", parse=False)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for the config module. "
        "Install with: pip install pydantic-settings"
    ) from e


class StoreSettings(BaseSettings):  # type: ignore[misc]
    """Defaults applied by `Store.collection()` to the models it builds.

    Attributes:
        id_attribute: Field holding the entity id in raw records and models.
        parse: Run `Model.parse()` on incoming attributes.
        strip_unresolved: Drop attributes whose value is `UNRESOLVED` before
            assigning, so a parse hook can leave fields untouched. `None`
            values are always assigned.

    Environment Variables:
        IDSTORE_ID_ATTRIBUTE
        IDSTORE_PARSE
        IDSTORE_STRIP_UNRESOLVED
    """

    model_config = SettingsConfigDict(
        env_prefix="IDSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    id_attribute: str = "id"
    parse: bool = True
    strip_unresolved: bool = True
