import os
import yaml
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field, asdict

from balancer.schedulers import POLICIES
from balancer.utils.logging import get_logger

log = get_logger("config")

CONFIG_DIR = Path.home() / ".balancer"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None
    verbose: bool = False


@dataclass
class SchedulerConfig:
    threshold: int = 1
    policy: str = "least_loaded"
    history_size: int = 1000  # max entries kept in TaskScheduler.event_log


@dataclass
class Config:

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    scheduler: SchedulerConfig = field(default_factory=SchedulerConfig)

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: Path = None):
        """Save config to YAML file."""
        path = path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

        log.info(f"Config saved to {path}")


_ENV_MAPPINGS = {
    "BALANCER_LOG_LEVEL": ("logging", "level"),
    "BALANCER_LOG_FILE": ("logging", "file"),
    "BALANCER_LOG_VERBOSE": ("logging", "verbose"),
    "BALANCER_THRESHOLD": ("scheduler", "threshold"),
    "BALANCER_POLICY": ("scheduler", "policy"),
    "BALANCER_HISTORY_SIZE": ("scheduler", "history_size"),
}


def _coerce(current, value, source: str):
    """Convert a raw override to the type of the field's current value."""
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        raise ValueError(f"{source} must be a boolean, got {value!r}")
    if isinstance(current, int):
        if isinstance(value, bool):
            raise ValueError(f"{source} must be an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{source} must be an integer, got {value!r}") from None
    if isinstance(current, str):
        if not isinstance(value, str):
            raise ValueError(f"{source} must be a string, got {value!r}")
        return value
    # Optional[str] fields such as logging.file
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{source} must be a string, got {value!r}")
    return value


def _apply_env_vars(cfg: Config):
    """Apply environment variable overrides (BALANCER_*)."""
    for env_var, (section, key) in _ENV_MAPPINGS.items():
        value = os.environ.get(env_var)
        if value is None:
            continue
        section_obj = getattr(cfg, section)
        value = _coerce(getattr(section_obj, key), value, env_var)

        setattr(section_obj, key, value)
        log.debug(f"Config override from {env_var}: {section}.{key} = {value}")


def _load_from_dict(cfg: Config, data: dict):
    """Copy known keys from a parsed YAML mapping into cfg."""
    for section in ("logging", "scheduler"):
        section_obj = getattr(cfg, section)
        values = data.get(section) or {}
        if not isinstance(values, dict):
            log.warning(f"Ignoring config section {section!r}: expected a mapping, got {type(values).__name__}")
            continue
        for k, v in values.items():
            if hasattr(section_obj, k):
                setattr(section_obj, k, _coerce(getattr(section_obj, k), v, f"{section}.{k}"))
            else:
                log.warning(f"Ignoring unknown config key {section}.{k}")


def load_config(config_path: Path = None) -> Config:
    """Build a Config from defaults, then the YAML file, then BALANCER_* env vars.

    Raises ValueError for values of the wrong type and for unknown policies.
    """
    cfg = Config()

    path = config_path or CONFIG_FILE
    if path.exists():
        data = None
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            log.warning(f"Failed to load config from {path}: {e}")
        if data is not None and not isinstance(data, dict):
            log.warning(f"Failed to load config from {path}: expected a mapping, got {type(data).__name__}")
        elif data is not None:
            _load_from_dict(cfg, data)
            log.debug(f"Loaded config from {path}")

    _apply_env_vars(cfg)

    if cfg.scheduler.policy.lower() not in POLICIES:
        available = ", ".join(POLICIES.keys())
        raise ValueError(f"Unknown scheduler: {cfg.scheduler.policy}. Available: {available}")
    if cfg.scheduler.history_size < 0:
        raise ValueError(f"scheduler.history_size must be >= 0, got {cfg.scheduler.history_size}")

    return cfg
