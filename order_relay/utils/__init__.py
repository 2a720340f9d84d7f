"""
Utility modules for the order relay
"""
from .config_loader import (
    NotifierConfig,
    NotifierSettings,
    get_notifier_settings,
    load_notifier_config,
)

__all__ = [
    'NotifierConfig',
    'NotifierSettings',
    'get_notifier_settings',
    'load_notifier_config',
]
