"""
Configuration Utility Module

This module provides functions for loading and accessing application configuration.
"""

import os
import logging
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

# Default configuration file path
CONFIG_FILE_PATH = os.getenv("CONFIG_FILE_PATH", "config.yaml")

# Cached configuration
_config_cache: Optional[Dict[str, Any]] = None


def load_yaml_config() -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Returns:
        Dict[str, Any]: Configuration dictionary from YAML file or empty dict if file not found.
    """
    try:
        config_path = Path(CONFIG_FILE_PATH)
        if config_path.exists():
            with open(config_path, "r") as f:
                return yaml.safe_load(f) or {}
        else:
            logging.warning(f"Configuration file not found: {CONFIG_FILE_PATH}")
            return {}
    except (OSError, yaml.YAMLError) as e:
        logging.error(f"Error loading configuration file: {e}")
        return {}


def get_config() -> Dict[str, Any]:
    """
    Get the application configuration from YAML file and environment variables.
    Environment variables for sensitive data take precedence.

    Configuration is cached after first load.

    Returns:
        Dict[str, Any]: A dictionary containing the application configuration.
    """
    global _config_cache
    if _config_cache is not None:
        return _config_cache

    yaml_config = load_yaml_config()

    server_config = yaml_config.get("server", {})
    mcp_config = yaml_config.get("mcp", {})
    calendar_config = yaml_config.get("calendar", {})
    tokens_config = yaml_config.get("tokens", {})
    detection_config = yaml_config.get("conflict_detection", {})

    config = {
        # Server configuration
        "transport": os.getenv("MCP_TRANSPORT", server_config.get("transport", "stdio")),
        "host": server_config.get("host", "127.0.0.1"),
        "port": int(server_config.get("port", 3000)),
        "log_level": server_config.get("log_level", "INFO"),

        # MCP configuration
        "mcp_server_name": mcp_config.get("name", "Google Calendar"),

        # Google OAuth client (only needed to refresh expired access tokens)
        "google_client_id": os.getenv("GOOGLE_CLIENT_ID", ""),
        "google_client_secret": os.getenv("GOOGLE_CLIENT_SECRET", ""),
        "google_token_uri": "https://oauth2.googleapis.com/token",

        # Calendar defaults
        "default_timezone": calendar_config.get("default_timezone", "UTC"),

        # Token storage configuration (path from YAML, encryption key from env vars)
        "token_storage_path": tokens_config.get("storage_path", ""),
        "token_encryption_key": os.getenv("TOKEN_ENCRYPTION_KEY", ""),

        # Conflict & duplicate detection; missing keys fall back to model defaults
        "conflict_detection": dict(detection_config),
    }

    _config_cache = config
    return config


def get_config_value(key: str, default: Optional[Any] = None) -> Any:
    """
    Get a specific configuration value.

    Args:
        key (str): The configuration key to retrieve.
        default (Optional[Any], optional): The default value if the key is not found. Defaults to None.

    Returns:
        Any: The configuration value.
    """
    config = get_config()
    return config.get(key, default)


def clear_config_cache() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_cache
    _config_cache = None
