import os
from dataclasses import dataclass, field
from pathlib import Path

# Hard cap on board side length; bounds search recursion depth to N*N + 1
BOARD_SIZE_LIMIT = 20


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 4
    MAX_BOARD_SIZE: int = BOARD_SIZE_LIMIT
    MAX_RESULTS: int = 0

    END_TURN: str = "???"
    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                current = getattr(self, fld)
                if isinstance(current, bool):
                    setattr(self, fld, _parse_bool(env_val))
                elif isinstance(current, int):
                    setattr(self, fld, int(env_val))
                elif isinstance(current, Path):
                    setattr(self, fld, Path(env_val))
                else:
                    setattr(self, fld, env_val)

        if not 1 <= self.MAX_BOARD_SIZE <= BOARD_SIZE_LIMIT:
            raise ValueError(
                f"MAX_BOARD_SIZE must be between 1 and {BOARD_SIZE_LIMIT}, got {self.MAX_BOARD_SIZE}"
            )


# Fields that may be changed at runtime through the settings API
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_WORD_LENGTH": int,
    "MAX_RESULTS": int,
    "DEBUG": bool,
}


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes")


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to cfg. Returns a field -> error message map.

    Valid fields are applied even when others in the same call are rejected.
    """
    errors: dict[str, str] = {}
    for name, raw in values.items():
        if name not in EDITABLE_FIELDS:
            if name in cfg.__dataclass_fields__:
                errors[name] = "field is not editable"
            else:
                errors[name] = "unknown field"
            continue

        field_type = EDITABLE_FIELDS[name]
        try:
            if field_type is bool:
                value = _parse_bool(raw)
            else:
                value = field_type(raw)
        except (TypeError, ValueError):
            errors[name] = f"expected {field_type.__name__}, got {raw!r}"
            continue

        if name == "MIN_WORD_LENGTH" and value < 1:
            errors[name] = "must be at least 1"
            continue
        if name == "MAX_RESULTS" and value < 0:
            errors[name] = "must not be negative"
            continue

        setattr(cfg, name, value)
    return errors


settings = Settings()
