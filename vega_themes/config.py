"""Engine settings from environment variables.

Variables:

``VEGA_THEMES_STATE_FILE``
    Path of the JSON file holding the persisted theme and color set.
    Defaults to ``$XDG_CONFIG_HOME/vega-themes/state.json`` (or
    ``~/.config/vega-themes/state.json``).
``VEGA_THEMES_DEFAULT_THEME``
    Theme used when nothing has been saved yet.  Defaults to ``light``.
``VEGA_THEMES_REFRESH_DELAY_MS``
    Delay before the refresh broadcast that follows a color-set toggle.
    Defaults to 50.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from vega_themes.events import DEFAULT_REFRESH_DELAY
from vega_themes.names import ThemeName, theme_name

STATE_FILE_VAR = "VEGA_THEMES_STATE_FILE"
DEFAULT_THEME_VAR = "VEGA_THEMES_DEFAULT_THEME"
REFRESH_DELAY_VAR = "VEGA_THEMES_REFRESH_DELAY_MS"


@dataclass
class EngineSettings:
    """Resolved engine settings."""

    state_file: Path
    default_theme: ThemeName = ThemeName.LIGHT
    refresh_delay: float = DEFAULT_REFRESH_DELAY


def default_state_file(environ: Mapping[str, str]) -> Path:
    """Return the default state file location for *environ*."""
    config_home = environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "vega-themes" / "state.json"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> EngineSettings:
    """Build :class:`EngineSettings` from *environ* (default ``os.environ``).

    Raises
    ------
    KeyError
        If the default theme is not a theme name.
    ValueError
        If the refresh delay is not a non-negative number.
    """
    env = os.environ if environ is None else environ

    state_file = env.get(STATE_FILE_VAR)
    path = Path(state_file).expanduser() if state_file else default_state_file(env)

    default_theme = theme_name(env.get(DEFAULT_THEME_VAR) or ThemeName.LIGHT)

    raw_delay = env.get(REFRESH_DELAY_VAR)
    if raw_delay:
        try:
            delay_ms = float(raw_delay)
        except ValueError:
            raise ValueError(
                f"{REFRESH_DELAY_VAR} must be a number of milliseconds, "
                f"got {raw_delay!r}"
            ) from None
        if delay_ms < 0:
            raise ValueError(f"{REFRESH_DELAY_VAR} must be non-negative")
        refresh_delay = delay_ms / 1000.0
    else:
        refresh_delay = DEFAULT_REFRESH_DELAY

    return EngineSettings(
        state_file=path,
        default_theme=default_theme,
        refresh_delay=refresh_delay,
    )
