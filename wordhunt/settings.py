import math
import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)
    TRIE_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 3
    MAX_WORD_LENGTH: int = 16
    ROW_SEPARATOR: str = " "

    TIME_BUDGET: float = 90.0
    MOVEMENT_SPEED: float = 12.5
    SETUP_CONSTANT: float = 0.19
    ALPHA: float = 1.0
    BETA: float = 1.0

    GRID_CELL_SIZE_MM: float = 12.5
    PEN_UP_ANGLE: int = 1000
    PEN_DOWN_ANGLE: int = 1700
    PEN_DOWN_DELAY: float = 0.05
    PEN_UP_DELAY: float = 0.11
    COMMAND_TIMEOUT: float = 5.0

    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"
        self.TRIE_PATH = self.BASE_DIR / "trie.json"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        if str(value).lower() in ("1", "true", "yes"):
            return True
        if str(value).lower() in ("0", "false", "no"):
            return False
        raise ValueError(f"not a boolean: {value!r}")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        number = float(value)
        if not math.isfinite(number):
            raise ValueError(f"must be a finite number, got {value!r}")
        return number
    if isinstance(current, Path):
        return Path(value)
    return str(value)


# Fields that may be changed at runtime through /api/settings
EDITABLE_FIELDS: dict[str, type] = {
    "TIME_BUDGET": float,
    "MOVEMENT_SPEED": float,
    "SETUP_CONSTANT": float,
    "ALPHA": float,
    "BETA": float,
    "ROW_SEPARATOR": str,
    "DEBUG": bool,
}

_POSITIVE_FIELDS = ("MOVEMENT_SPEED",)
_NON_NEGATIVE_FIELDS = ("TIME_BUDGET", "SETUP_CONSTANT")


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply runtime edits. Valid fields are applied even if others fail.

    Returns a mapping of field name to error message for rejected fields.
    """
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            errors[name] = "unknown field" if not hasattr(cfg, name) else "field is not editable"
            continue
        try:
            coerced = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid {EDITABLE_FIELDS[name].__name__}: {e}"
            continue
        if name in _POSITIVE_FIELDS and coerced <= 0:
            errors[name] = "must be positive"
            continue
        if name in _NON_NEGATIVE_FIELDS and coerced < 0:
            errors[name] = "must not be negative"
            continue
        if name == "ROW_SEPARATOR" and not coerced:
            errors[name] = "must not be empty"
            continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()
