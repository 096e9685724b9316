from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (xlisp package directory)
_XLISP_DIR = Path(__file__).resolve().parent

# Namespace every other namespace falls back to; the standard library lives here.
BASE_NS = 'core'

# Defaults
_DEFAULT_NS = 'user'
_DEFAULT_PRELUDE = _XLISP_DIR / 'prelude' / 'core.xlisp'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_paths() -> List[Path]:
    return paths_from_env('XLISP_PRELUDE_PATH', [_DEFAULT_PRELUDE])


def get_default_namespace() -> str:
    return os.environ.get('XLISP_DEFAULT_NS', '').strip() or _DEFAULT_NS
