"""Configuration management"""
import os
import yaml
from pathlib import Path
from typing import Dict, Any
from dotenv import load_dotenv

load_dotenv()

# Resolves inside a source checkout only; installed packages set MENTORMATCH_CONFIG
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "config.yaml"


class Config:
    """
    Application configuration manager.

    Reads ``config_path``, else ``$MENTORMATCH_CONFIG``, else
    ``config/config.yaml`` at the repository root. The last default exists
    only when running from a source checkout. A missing file yields the
    built-in defaults of each property.
    """

    def __init__(self, config_path: str = None):
        self.config_path = Path(config_path or os.getenv("MENTORMATCH_CONFIG", DEFAULT_CONFIG_PATH))
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file"""
        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                return yaml.safe_load(f) or {}
        return {}

    @property
    def log_level(self) -> str:
        return os.getenv("MENTORMATCH_LOG_LEVEL") or self.get("logging.level", "INFO")

    @property
    def matching_weights(self) -> Dict[str, float]:
        return self._config.get("matching", {}).get("weights", {}) or {}

    @property
    def default_limit(self) -> int:
        return self.get("matching.default_limit", 10)

    @property
    def instant_match_limit(self) -> int:
        return self.get("matching.instant_limit", 5)

    @property
    def collaborative_boost(self) -> float:
        return self.get("collaborative.boost", 0.1)

    @property
    def similarity_threshold(self) -> float:
        return self.get("collaborative.similarity_threshold", 0.3)

    @property
    def max_similar_users(self) -> int:
        return self.get("collaborative.max_similar_users", 10)

    @property
    def batch_workers(self) -> int:
        return int(os.getenv("MENTORMATCH_BATCH_WORKERS") or self.get("performance.batch_workers", 4))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation"""
        keys = key.split('.')
        value = self._config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

# Global config instance
config = Config()
