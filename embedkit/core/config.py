"""Configuration management for embedkit.

Handles loading and caching of the JSON configuration file with environment
variable support (EMBEDKIT_CONFIG_PATH) and provider-specific settings.

The configuration system provides:
- Centralized config loading with caching
- Provider enable/disable toggles
- Per-provider network settings (timeout, TLS verification, headers)
- Default embed placement sizes for the main area and the sidebar
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_CONFIG_CACHE: Optional[Dict[str, Any]] = None


def get_config(force_reload: bool = False) -> Dict[str, Any]:
    """Return the embedkit settings shared by drivers, the transport and the renderer.

    The file named by EMBEDKIT_CONFIG_PATH (default: config.json) is read once
    and kept for the life of the process; pass force_reload=True after editing
    it. A missing or malformed file yields {}, so every provider stays enabled
    and the built-in embed sizes apply.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is None or force_reload:
        _CONFIG_CACHE = _read_config_file(os.environ.get("EMBEDKIT_CONFIG_PATH", "config.json"))
    return _CONFIG_CACHE


def _read_config_file(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        logger.debug("No embedkit config at %s, using defaults", path)
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error("Ignoring unreadable embedkit config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.error("Ignoring embedkit config %s: top level must be an object", path)
        return {}
    return data


def get_provider_setting(provider_key: str, setting: str, default: Any = None) -> Any:
    """Retrieve a provider-specific setting from the configuration.

    Args:
        provider_key: Provider identifier (e.g., 'vimeo', 'youtube')
        setting: Setting name to retrieve
        default: Default value if not found

    Returns:
        The setting value or default
    """
    cfg = get_config()
    ps = cfg.get("provider_settings", {}) or {}
    return (ps.get(provider_key, {}) or {}).get(setting, default)


def is_provider_enabled(provider_key: str) -> bool:
    """Check the 'providers' toggle section; providers not listed are enabled."""
    toggles = get_config().get("providers", {}) or {}
    return bool(toggles.get(provider_key, True))


def get_network_config(provider_key: Optional[str]) -> Dict[str, Any]:
    """Return network policy for a provider, with sensible defaults.

    Args:
        provider_key: Provider identifier (may be None for generic defaults)

    Returns:
        Network configuration dictionary with all fields populated
    """
    net = dict(get_provider_setting(provider_key, "network", {}) or {}) if provider_key else {}

    net.setdefault("timeout_s", 15)
    net.setdefault("verify_ssl", True)

    # Ensure headers is a dict if provided
    if not isinstance(net.get("headers", {}), dict):
        net["headers"] = {}
    net.setdefault("headers", {})

    return net


def get_embed_defaults() -> Dict[str, Any]:
    """Get default embed placement sizes.

    Returns:
        Dictionary with width, height, width_side and height_side populated
    """
    emb = dict(get_config().get("embed", {}) or {})

    emb.setdefault("width", 640)
    emb.setdefault("height", 360)
    emb.setdefault("width_side", 240)
    emb.setdefault("height_side", 135)

    return emb
