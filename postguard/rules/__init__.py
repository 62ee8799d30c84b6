from postguard.rules.configs import password_config, richtext_config, upload_config
from postguard.rules.loader import load_rules
from postguard.rules.models import Rules

__all__ = [
    "Rules",
    "load_rules",
    "password_config",
    "richtext_config",
    "upload_config",
]
