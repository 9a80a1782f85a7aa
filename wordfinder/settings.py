import logging
import os
from dataclasses import dataclass


@dataclass
class Settings:
    DEFAULT_STRATEGY: str = "brute_force"
    TOP_N: int = 10
    MAX_QUERY_WORDS: int = 100_000

    BENCH_GRID_SIZE: int = 64
    BENCH_ITERATIONS: int = 10
    SAMPLE_SEED: int = 0  # 0 means unseeded

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False
    PORT: int = 10001

    def __post_init__(self):
        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                current = getattr(self, fld)
                if isinstance(current, bool):
                    setattr(self, fld, env_val.lower() in ("1", "true", "yes"))
                elif isinstance(current, int):
                    setattr(self, fld, int(env_val))
                elif isinstance(current, float):
                    setattr(self, fld, float(env_val))
                else:
                    setattr(self, fld, env_val)
        self.LOG_LEVEL = self.LOG_LEVEL.upper()


# Fields that may be changed at runtime through the settings API
EDITABLE_FIELDS: dict[str, type] = {
    "DEFAULT_STRATEGY": str,
    "TOP_N": int,
    "MAX_QUERY_WORDS": int,
    "LOG_LEVEL": str,
    "DEBUG": bool,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def _coerce(value, typ: type):
    if typ is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        raise ValueError(f"expected bool, got {value!r}")
    if typ is int:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise ValueError(f"expected int, got {value!r}")
        return int(value)
    if typ is float:
        return float(value)
    return str(value)


def _log_level(value) -> str:
    level = str(value).upper()
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level {value!r}")
    return level


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to ``cfg``. Returns {field: error} for the ones rejected.

    A new LOG_LEVEL is applied to the ``wordfinder`` logger straight away.
    """
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if name in cfg.__dataclass_fields__:
                errors[name] = "not editable"
            else:
                errors[name] = "unknown field"
            continue
        try:
            if name == "LOG_LEVEL":
                cfg.LOG_LEVEL = _log_level(value)
                logging.getLogger("wordfinder").setLevel(cfg.LOG_LEVEL)
            else:
                setattr(cfg, name, _coerce(value, EDITABLE_FIELDS[name]))
        except (TypeError, ValueError) as e:
            errors[name] = str(e)
    return errors


settings = Settings()
