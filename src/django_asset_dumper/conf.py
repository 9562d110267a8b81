"""Configuration and settings for django-asset-dumper."""

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    # Asset manager
    "ASSET_MANAGER": "django_asset_dumper.manager.AssetManager",
    # Named formulae: {"name": {"inputs": [...], "filters": [...], "output": ...}}
    "ASSETS": {},
    # Source and target directories (fall back to BASE_DIR / STATIC_ROOT)
    "SOURCE_ROOT": None,
    "WRITE_TO": None,
    # Variable domains: {"locale": ["en", "fr"]}
    "VARIABLES": {},
    # Debug mode (falls back to settings.DEBUG)
    "DEBUG": None,
    # Filter registry
    "FILTERS": {
        "cssmin": "django_asset_dumper.filters.minify.CssMinFilter",
        "jsmin": "django_asset_dumper.filters.minify.JsMinFilter",
        "terser": "django_asset_dumper.filters.minify.TerserFilter",
    },
    # Terser
    "TERSER_PATH": None,
    "TERSER_OPTIONS": ["-c", "-m"],
}


_UNSET = object()


def get_setting(key: str, default: Any = _UNSET) -> Any:
    """Get a setting from ASSET_DUMPER dict or return default."""
    user_settings: dict[str, Any] = getattr(settings, "ASSET_DUMPER", {})
    fallback = DEFAULTS.get(key) if default is _UNSET else default
    return user_settings.get(key, fallback)
