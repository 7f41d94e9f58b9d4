"""
Rule library configuration
Default rule file layout, file encoding and logging settings
"""

from pydantic_settings import BaseSettings
from pydantic import Field

from .access.mask import RuleLayout


class RulesConfig(BaseSettings):
    """Rule store and rule file configuration settings"""

    # Rule file settings
    default_layout: RuleLayout = Field(
        default=RuleLayout.COMPACT,
        description="Layout used by save_rules when none is given"
    )
    file_encoding: str = Field(default="utf-8", description="Rule file text encoding")

    # Logging settings
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True, description="Render log events as JSON")

    model_config = {"env_prefix": "SMACK_RULES_", "case_sensitive": False}


# Global configuration instance
rules_config = RulesConfig()


def get_rules_config() -> RulesConfig:
    """Get the global rules configuration instance"""
    return rules_config


def update_rules_config(**kwargs) -> RulesConfig:
    """Update rules configuration with new values"""
    global rules_config
    for key, value in kwargs.items():
        if hasattr(rules_config, key):
            setattr(rules_config, key, value)
    return rules_config


def reset_rules_config() -> RulesConfig:
    """Rebuild the global configuration from the environment"""
    global rules_config
    rules_config = RulesConfig()
    return rules_config
