"""CLI argument parsing and entry point.

Exposes the resolution pipeline from the shell: list themes and color
sets, print a resolved config, annotate a chart spec file, and change
the persisted theme or color set.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

from vega_themes import __version__
from vega_themes.annotate import annotate, annotate_with_color_set, force_annotate
from vega_themes.colors import COLOR_SET_INFO, color_catalog, format_color_set
from vega_themes.config import EngineSettings, load_settings
from vega_themes.names import ColorSetName, ThemeName
from vega_themes.resolver import resolve
from vega_themes.state import PresentationState
from vega_themes.storage import JsonFileStorage
from vega_themes.themes import get_theme, list_themes

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# CLI configuration dataclass
# ---------------------------------------------------------------------------

COMMANDS = (
    "themes",
    "color-sets",
    "resolve",
    "annotate",
    "status",
    "set-theme",
    "set-color-set",
    "toggle-color-set",
    "toggle-theme",
    "cycle-theme",
)

ANNOTATE_MODES = ("merge", "force", "color-set")

# Accepted in place of a color-set name to mean "no color set".
NONE_VALUES = ("none", "off")


@dataclass
class CLIConfig:
    """Parsed CLI configuration passed to the command handlers."""

    command: str = "status"
    theme: Optional[str] = None
    color_set: Optional[str] = None
    mode: str = "merge"
    spec: Optional[str] = None
    state_file: Optional[Path] = None
    verbose: bool = False


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _validate_theme(name: str) -> str:
    """Validate the theme name against available themes.

    Returns the theme name if valid; otherwise prints available themes
    and exits with an error.
    """
    available = list_themes()
    if name not in available:
        print(
            f"Error: Unknown theme '{name}'. "
            f"Available themes: {', '.join(available)}",
            file=sys.stderr,
        )
        sys.exit(2)
    return name


def _validate_color_set(name: str, *, allow_none: bool = False) -> str:
    """Validate the color-set name, exiting with an error if unknown."""
    if allow_none and name.lower() in NONE_VALUES:
        return "none"
    available = [c.value for c in ColorSetName]
    if name not in available:
        print(
            f"Error: Unknown color set '{name}'. "
            f"Available color sets: {', '.join(available)}",
            file=sys.stderr,
        )
        sys.exit(2)
    return name


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vega-themes",
        description="Resolve chart themes and apply them to Vega-Lite specs.",
    )
    parser.add_argument(
        "--state-file",
        type=Path,
        default=None,
        metavar="PATH",
        help="File holding the saved theme and color set "
             "(default: $VEGA_THEMES_STATE_FILE or ~/.config/vega-themes/state.json)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Print debug logging to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    sub.add_parser("themes", help="List available themes")

    p = sub.add_parser("color-sets", help="List color sets for a theme")
    p.add_argument("--theme", metavar="NAME",
                   help="Theme to show (default: the active theme)")

    p = sub.add_parser("resolve", help="Print the resolved Vega-Lite config")
    p.add_argument("--theme", metavar="NAME",
                   help="Theme to resolve (default: the active theme)")
    p.add_argument("--color-set", metavar="NAME",
                   help="Color set override, or 'none' "
                        "(default: the active color set)")

    p = sub.add_parser("annotate", help="Apply the theme to a chart spec")
    p.add_argument("spec", metavar="SPEC",
                   help="Path to a Vega-Lite JSON spec, or '-' for stdin")
    p.add_argument("--mode", choices=ANNOTATE_MODES, default="merge",
                   help="merge fills gaps, force overwrites colors, "
                        "color-set applies a semantic color set "
                        "(default: merge)")
    p.add_argument("--theme", metavar="NAME",
                   help="Theme to apply (default: the active theme)")
    p.add_argument("--color-set", metavar="NAME",
                   help="Color set to apply, or 'none' "
                        "(default: the active color set)")

    sub.add_parser("status", help="Show the active theme and color set")

    p = sub.add_parser("set-theme", help="Change the active theme")
    p.add_argument("theme", metavar="NAME")

    p = sub.add_parser("set-color-set",
                       help="Change the active color set ('none' clears it)")
    p.add_argument("color_set", metavar="NAME")

    p = sub.add_parser("toggle-color-set",
                       help="Select a color set, or deselect it if active")
    p.add_argument("color_set", metavar="NAME")

    sub.add_parser("toggle-theme",
                   help="Switch light to dark, or any other theme to light")

    sub.add_parser("cycle-theme", help="Switch to the next theme in order")

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> CLIConfig:
    """Parse CLI arguments and return a :class:`CLIConfig`.

    Parameters
    ----------
    argv : sequence of str or None
        Command-line arguments to parse.  When ``None``, reads from
        ``sys.argv[1:]``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    command = args.command or "status"

    theme = getattr(args, "theme", None)
    if theme is not None:
        _validate_theme(theme)

    color_set = getattr(args, "color_set", None)
    if color_set is not None:
        color_set = _validate_color_set(
            color_set,
            allow_none=command in ("resolve", "annotate", "set-color-set"),
        )

    mode = getattr(args, "mode", "merge")
    if mode == "color-set" and color_set in (None, "none"):
        print("Error: --mode color-set requires --color-set NAME",
              file=sys.stderr)
        sys.exit(2)

    return CLIConfig(
        command=command,
        theme=theme,
        color_set=color_set,
        mode=mode,
        spec=getattr(args, "spec", None),
        state_file=args.state_file,
        verbose=args.verbose,
    )


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _build_state(config: CLIConfig, settings: EngineSettings) -> PresentationState:
    path = config.state_file or settings.state_file
    return PresentationState(
        storage=JsonFileStorage(path),
        default_theme=settings.default_theme,
        refresh_delay=settings.refresh_delay,
    )


def _selection(
    config: CLIConfig, state: PresentationState
) -> Tuple[ThemeName, Optional[str]]:
    """Return the (theme, color set) chosen by flags, else the active ones."""
    theme = ThemeName(config.theme) if config.theme else state.active_theme
    if config.color_set == "none":
        color_set = None
    elif config.color_set is not None:
        color_set = config.color_set
    else:
        active = state.active_color_set
        color_set = active.value if active is not None else None
    return theme, color_set


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


def _load_spec(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as f:
        return json.load(f)


def _run_annotate(config: CLIConfig, state: PresentationState) -> int:
    try:
        spec = _load_spec(config.spec or "-")
    except (OSError, ValueError) as exc:
        print(f"Error: Cannot read spec '{config.spec}': {exc}", file=sys.stderr)
        return 1
    if not isinstance(spec, dict):
        print("Error: The spec must be a JSON object", file=sys.stderr)
        return 1

    theme, color_set = _selection(config, state)
    if config.mode == "color-set":
        result = annotate_with_color_set(spec, config.color_set, theme)
    elif config.mode == "force":
        result = force_annotate(spec, resolve(theme, color_set))
    else:
        result = annotate(spec, resolve(theme, color_set))
    _print_json(result)
    return 0


def _print_status(state: PresentationState) -> None:
    color_set = state.active_color_set
    print(f"theme: {state.active_theme.value}")
    print(f"color set: {color_set.value if color_set else 'none'}")


def run(config: CLIConfig, settings: Optional[EngineSettings] = None) -> int:
    """Execute the command described by *config*; return the exit code.

    *settings* defaults to :func:`load_settings` on the process
    environment.
    """
    if settings is None:
        settings = load_settings()
    state = _build_state(config, settings)
    command = config.command
    logger.debug("Running %s with %s", command, config)

    if command == "themes":
        for name in list_themes():
            marker = "*" if name == state.active_theme.value else " "
            print(f"{marker} {name:<12} {get_theme(name).description}")
    elif command == "color-sets":
        theme, _ = _selection(config, state)
        active = state.active_color_set
        for name, colors in color_catalog(theme).items():
            info = COLOR_SET_INFO[ColorSetName(name)]
            marker = "*" if active is not None and active.value == name else " "
            print(f"{marker} {name:<12} {info.description}")
            print(f"  {'':<12} {format_color_set(colors)}")
    elif command == "resolve":
        theme, color_set = _selection(config, state)
        _print_json(resolve(theme, color_set))
    elif command == "annotate":
        return _run_annotate(config, state)
    elif command == "set-theme":
        state.set_theme(config.theme)
        _print_status(state)
    elif command == "set-color-set":
        state.set_color_set(None if config.color_set == "none" else config.color_set)
        _print_status(state)
    elif command == "toggle-color-set":
        state.toggle_color_set(config.color_set)
        state.scheduler.run_all()
        _print_status(state)
    elif command == "toggle-theme":
        state.toggle_theme()
        _print_status(state)
    elif command == "cycle-theme":
        state.cycle_theme()
        _print_status(state)
    else:
        _print_status(state)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for vega-themes.

    Parses CLI arguments, configures logging, and runs the command.
    Invalid settings in the environment are reported on stderr with
    exit code 2.

    Parameters
    ----------
    argv : sequence of str or None
        Command-line arguments.  When ``None``, reads from ``sys.argv``.
    """
    config = parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        settings = load_settings()
    except (KeyError, ValueError) as exc:
        message = exc.args[0] if exc.args else exc
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(2)

    code = run(config, settings)
    if code:
        sys.exit(code)
