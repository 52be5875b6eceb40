import yaml
from pathlib import Path

from gedcomx_converter.core.exceptions import ConfigError

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcomx_converter.yml"


class GXConfig:
    def __init__(self, data):
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}")
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.names = data.get("names", {}) or {}
        self.ids = data.get("ids", {}) or {}
        self.debug = bool(data.get("debug", False))

    @property
    def id_mode(self) -> str:
        return str(self.ids.get("mode", "pointer")).lower()


def load_config(path: Path | None = None) -> 'GXConfig':
    config_path = Path(path) if path else CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GXConfig(data)


_config_cache = None


def get_config() -> 'GXConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
