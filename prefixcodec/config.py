# prefixcodec/config.py
import yaml
from typing import Dict, Any, Optional
from dataclasses import dataclass

from .errors import ConfigError

MODES = ("sf", "hf", "ext2")
BUILDERS = ("sf", "hf")


@dataclass
class CodecConfig:
    mode: str = "hf"
    digram_builder: str = "hf"
    min_symbols: int = 1000
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    def __post_init__(self):
        if self.mode not in MODES:
            raise ConfigError(f"unknown mode {self.mode!r}, expected one of {', '.join(MODES)}")
        if self.digram_builder not in BUILDERS:
            raise ConfigError(f"unknown digram builder {self.digram_builder!r}, expected sf or hf")
        if self.min_symbols < 0:
            raise ConfigError("min_symbols must be >= 0")

    @property
    def builder(self) -> str:
        return self.digram_builder if self.mode == "ext2" else self.mode

    @property
    def digram(self) -> bool:
        return self.mode == "ext2"


class ConfigLoader:
    @staticmethod
    def load_config(p: str) -> Dict[str, Any]:
        with open(p, "r") as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def load_codec_config(p: str) -> CodecConfig:
        try:
            d = ConfigLoader.load_config(p)
        except yaml.YAMLError as e:
            raise ConfigError(f"{p}: not valid YAML ({e})") from None
        if not isinstance(d, dict):
            raise ConfigError(f"{p}: expected a mapping of settings, got {type(d).__name__}")
        return CodecConfig(
            mode=_typed(d, "mode", str, "hf"),
            digram_builder=_typed(d, "digram_builder", str, "hf"),
            min_symbols=_typed(d, "min_symbols", int, 1000),
            log_level=_typed(d, "log_level", str, "INFO"),
            log_dir=_typed(d, "log_dir", str, None, optional=True),
        )


def _typed(d: Dict[str, Any], key: str, kind: type, default, optional: bool = False):
    v = d.get(key, default)
    if v is None and optional:
        return v
    # bool is an int subclass; `min_symbols: yes` is not a count
    if not isinstance(v, kind) or isinstance(v, bool):
        raise ConfigError(f"{key} must be of type {kind.__name__}, got {v!r}")
    return v
