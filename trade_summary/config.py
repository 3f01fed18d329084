import logging
import yaml
from dataclasses import dataclass, fields
from pathlib import Path


@dataclass
class AppConfig:
    input_path: str = "input.csv"
    output_path: str = "output.csv"
    parquet_path: str | None = None
    num_fields: int = 4
    symbol_width: int | None = 3
    strict: bool = True
    log_level: str = "INFO"

    def __post_init__(self):
        if isinstance(self.num_fields, bool) or not isinstance(self.num_fields, int):
            raise ValueError(f"num_fields must be an integer, got {self.num_fields!r}")
        if self.symbol_width is not None and (
            isinstance(self.symbol_width, bool) or not isinstance(self.symbol_width, int)
        ):
            raise ValueError(f"symbol_width must be an integer or null, got {self.symbol_width!r}")
        if self.num_fields < 4:
            raise ValueError(f"num_fields must be at least 4, got {self.num_fields}")
        if self.symbol_width is not None and self.symbol_width < 1:
            raise ValueError(f"symbol_width must be positive, got {self.symbol_width}")
        self.log_level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log_level: {self.log_level}")


def load_config(config_path: str = "config.yaml") -> AppConfig:
    path = Path(config_path)
    if not path.exists():
        return AppConfig()

    with open(path, "r") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{config_path} is not valid YAML: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"{config_path} must contain a mapping")

    known = {f.name for f in fields(AppConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"{config_path} has unknown keys: {', '.join(unknown)}")

    return AppConfig(**raw)
