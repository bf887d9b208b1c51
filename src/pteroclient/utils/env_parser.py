"""Minimal .env reader for panel credentials."""

from __future__ import annotations


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    # Unquoted values may carry a trailing " # comment"
    head, sep, _ = value.partition(" #")
    return head.rstrip() if sep else value


def parse_env(content: str) -> dict[str, str]:
    """Parse dotenv content into a dict of variables.

    Accepts ``KEY=value`` and ``export KEY=value`` lines, quoted values and
    ``#`` comments. Lines without ``=`` are ignored; later keys win.
    """
    result: dict[str, str] = {}
    for raw in content.splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, _, value = line.partition("=")
        key = key.strip()
        if not key:
            continue
        result[key] = _unquote(value.strip())
    return result
