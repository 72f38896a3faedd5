"""
Configuration loader for the Zoho Creator client
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from zoho_creator.integrations.contracts.interfaces import Credentials

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "creator_config.yml"


class CreatorConfigError(ValueError):
    pass


class CreatorConfig(BaseModel):
    """Zoho endpoints and transport settings"""

    accounts_url: str = "https://accounts.zoho.com"
    api_url: str = "https://creator.zoho.com/api/"
    service_name: str = "ZohoCreator"
    timeout_seconds: float = Field(gt=0.0, default=30.0)
    # Only switch off for hosts with broken certificate chains.
    verify_ssl: bool = True
    application: Optional[str] = None


def load_creator_config(config_path: Optional[Path] = None) -> CreatorConfig:
    """
    Load and validate the client configuration from a YAML file

    Args:
        config_path: Path to config file. Defaults to config/creator_config.yml

    Returns:
        Validated CreatorConfig object. Defaults are used when no path is
        given and the default file does not exist.

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        CreatorConfigError: If the file is not valid YAML or not a mapping
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.info("No creator config file found, using defaults")
            return CreatorConfig()
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CreatorConfigError(f"Invalid YAML in {config_path}: {e}") from e

    section = config_data.get("creator", config_data) if isinstance(config_data, dict) else config_data
    if not isinstance(section, dict):
        raise CreatorConfigError(f"Config in {config_path} must be a mapping, got {type(section).__name__}")

    try:
        config = CreatorConfig(**section)
        logger.info(f"Successfully loaded config from {config_path}")
        return config
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise


def load_credentials_from_env(application: Optional[str] = None) -> Credentials:
    """Build Credentials from ZOHO_CREATOR_* environment variables"""
    values = {
        "login_id": os.getenv("ZOHO_CREATOR_LOGIN_ID", ""),
        "password": os.getenv("ZOHO_CREATOR_PASSWORD", ""),
        "api_key": os.getenv("ZOHO_CREATOR_API_KEY", ""),
    }
    missing = [f"ZOHO_CREATOR_{key.upper()}" for key, value in values.items() if not value]
    if missing:
        raise CreatorConfigError(f"Missing required environment variables: {', '.join(missing)}")

    return Credentials(
        **values,
        application_name=application or os.getenv("ZOHO_CREATOR_APPLICATION") or None,
    )
