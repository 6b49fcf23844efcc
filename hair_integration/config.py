import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root if present; in Docker variables come from the environment
env_file = Path(__file__).parent.parent / ".env"
if env_file.exists():
    load_dotenv(env_file)
else:
    load_dotenv(override=False)


@dataclass
class GenerationConfig:
    """Settings for the generation proxy and style assets."""

    proxy_base_url: str
    proxy_endpoint: str = "/api/generate"
    style_assets_dir: str = "images"

    # None means no timeout on the generation call
    request_timeout: Optional[float] = None

    def __post_init__(self):
        if not self.proxy_base_url:
            raise ValueError("PROXY_BASE_URL is not set")
        if not self.proxy_endpoint.startswith("/"):
            raise ValueError(f"PROXY_ENDPOINT must start with '/': {self.proxy_endpoint!r}")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be positive")


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


def load_generation_config() -> GenerationConfig:
    """Load generation settings from environment variables."""
    return GenerationConfig(
        proxy_base_url=os.getenv("PROXY_BASE_URL", "").strip(),
        proxy_endpoint=os.getenv("PROXY_ENDPOINT", "/api/generate").strip(),
        style_assets_dir=os.getenv("STYLE_ASSETS_DIR", "images"),
        request_timeout=_optional_float(os.getenv("REQUEST_TIMEOUT")),
    )
