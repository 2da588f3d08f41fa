"""Configuration helpers: config file discovery and settings."""

import os
import pathlib
import sys

DEFAULT_SETTINGS = {"clear_screen": "blank", "show_stats": True}
CLEAR_MODES = ("ansi", "blank", "none")


def get_config_path() -> pathlib.Path:
    env = os.environ.get("FCARD_CONFIG")
    if env:
        return pathlib.Path(env)
    return pathlib.Path.home() / ".config" / "fcard" / "config"


def load_settings(config_path: pathlib.Path | None = None) -> dict:
    if config_path is None:
        config_path = get_config_path()
    settings = dict(DEFAULT_SETTINGS)
    if config_path.exists():
        try:
            settings.update(parse_settings(config_path.read_text()))
        except OSError as e:
            print(f"Warning: cannot read {config_path}: {e}", file=sys.stderr)
    return settings


def parse_settings(text: str) -> dict:
    """Read `clear_screen = ansi|blank|none` and `show_stats = true|false` lines.

    Values may be quoted. Unknown keys and bad values are reported on
    stderr and skipped.
    """
    result = {}
    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        if "=" not in line:
            print(f"Warning: config line {lineno}: expected key = value", file=sys.stderr)
            continue
        k, v = (s.strip() for s in line.split("=", 1))
        if len(v) >= 2 and v[0] == v[-1] and v[0] in "\"'":
            v = v[1:-1]
        if k == "clear_screen":
            if v not in CLEAR_MODES:
                print(f"Warning: unknown clear_screen mode {v!r}, "
                      f"using {DEFAULT_SETTINGS['clear_screen']!r}", file=sys.stderr)
                continue
            result[k] = v
        elif k == "show_stats":
            if v.lower() not in ("true", "false"):
                print(f"Warning: show_stats must be true or false, got {v!r}", file=sys.stderr)
                continue
            result[k] = v.lower() == "true"
        else:
            print(f"Warning: config line {lineno}: unknown setting {k!r}", file=sys.stderr)
    return result
