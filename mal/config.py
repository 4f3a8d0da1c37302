from __future__ import annotations
import os


# Defaults
_DEFAULT_MAX_DEPTH = 500
_DEFAULT_SLURP_ENCODING = 'utf-8'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_max_depth() -> int:
    return int_from_env('MAL_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_slurp_encoding() -> str:
    return os.environ.get('MAL_SLURP_ENCODING', '').strip() or _DEFAULT_SLURP_ENCODING
