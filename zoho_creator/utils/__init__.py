"""
Utility modules for the Zoho Creator client
"""
from .config_loader import (
    CreatorConfig,
    CreatorConfigError,
    load_creator_config,
    load_credentials_from_env,
)

__all__ = [
    'CreatorConfig',
    'CreatorConfigError',
    'load_creator_config',
    'load_credentials_from_env',
]
