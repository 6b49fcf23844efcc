import os
from dataclasses import dataclass

from hair_integration.config import GenerationConfig, load_generation_config


@dataclass
class BotConfig:
    """Bot configuration"""

    # Telegram Bot
    bot_token: str

    # Generation proxy
    generation: GenerationConfig

    # Settings
    log_level: str = "INFO"
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialisation"""
        if not self.bot_token:
            raise ValueError("BOT_TOKEN is not set in the environment")


def load_config() -> BotConfig:
    """Load configuration from environment variables"""
    bot_token = os.getenv("BOT_TOKEN", "").strip()
    return BotConfig(
        bot_token=bot_token,
        generation=load_generation_config(),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        debug=os.getenv("DEBUG", "false").lower() == "true",
    )
