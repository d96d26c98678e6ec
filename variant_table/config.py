"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    variant_table_env: str = "development"
    variant_table_log_level: str = "info"

    # Typeface used for labels; falls back to the canvas default when missing
    font_family: str = "Inter"

    # Dark-mode variable lookup defaults
    default_collection_name: str = "General"
    default_light_mode_name: str = "VD"
    default_dark_mode_name: str = "Dark"
    color_tolerance: float = 0.01

    # Derive synthetic "icon" / "properties" axes from layer and variant names
    infer_component_properties: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
