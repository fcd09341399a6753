from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional


def parse_env_text(raw: str) -> Dict[str, str]:
    """
    Minimal dotenv parser:
    - Supports `KEY=value` and `export KEY=value` lines
    - Ignores blank lines and `#` comments
    - Strips one pair of matching surrounding quotes; no escape handling
    """
    out: Dict[str, str] = {}
    for line in raw.splitlines():
        s = line.strip()
        if not s or s.startswith("#"):
            continue
        if s.startswith("export "):
            s = s[len("export ") :].lstrip()
        if "=" not in s:
            continue
        key, value = s.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        out[key] = value
    return out


def load_env_file(path: Optional[Path] = None, *, override: bool = False) -> Dict[str, str]:
    """Load `path` (default `./.env`) into os.environ. Missing file is not an error."""
    path = Path(path) if path is not None else Path.cwd() / ".env"
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}

    loaded = parse_env_text(raw)
    for key, value in loaded.items():
        if override or os.environ.get(key) is None:
            os.environ[key] = value
    return loaded
