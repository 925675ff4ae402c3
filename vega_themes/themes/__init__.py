"""Theme registry, discovery, and loading.

Provides the :class:`ThemeRegistry` class for managing themes, plus
module-level convenience functions :func:`get_theme`, :func:`list_themes`
and :func:`theme_config`.

Built-in themes are auto-discovered from Python modules in the
``vega_themes.themes`` package.  Any module that defines a module-level
:class:`Theme` instance will have it registered automatically.

The set of theme names is closed (see :class:`vega_themes.names.ThemeName`).
A module defining a theme is one row of the catalog; registering a theme
under a name outside that set, or with an incomplete color catalog, is
rejected during validation.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from typing import Iterator

from vega_themes.names import ColorSetName, ThemeLike, ThemeName, theme_name
from vega_themes.themes.base import CATEGORY_SIZE, Theme, ThemeConfig

logger = logging.getLogger(__name__)


class ThemeRegistry:
    """Registry that discovers, validates, and serves themes.

    Themes are stored in an internal dictionary keyed by name.  Built-in
    themes are loaded lazily the first time the registry is queried.

    Parameters
    ----------
    auto_discover : bool
        If ``True`` (default), automatically discover built-in themes
        from the ``vega_themes.themes`` package on first access.
    """

    def __init__(self, *, auto_discover: bool = True) -> None:
        self._themes: dict[str, Theme] = {}
        self._auto_discover = auto_discover
        self._discovered = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, theme: Theme) -> None:
        """Register a theme instance.

        A theme registered under an existing name replaces the old one.

        Raises
        ------
        TypeError
            If *theme* is not a :class:`Theme` instance.
        ValueError
            If the theme fails validation.
        """
        if not isinstance(theme, Theme):
            raise TypeError(
                f"Expected a Theme instance, got {type(theme).__name__}"
            )
        self._validate(theme)
        self._themes[theme.name] = theme

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: ThemeLike) -> Theme:
        """Return a theme by name.

        Parameters
        ----------
        name : ThemeName or str
            The theme identifier (e.g. ``"dark"``).

        Raises
        ------
        KeyError
            If no theme with the given name is registered.  The error
            message lists all available theme names.
        """
        self._ensure_discovered()
        key = name.value if isinstance(name, ThemeName) else name
        try:
            return self._themes[key]
        except KeyError:
            available = ", ".join(sorted(self._themes))
            raise KeyError(
                f"Unknown theme '{key}'. Available themes: {available}"
            ) from None

    def list_themes(self) -> list[str]:
        """Return a sorted list of all registered theme names."""
        self._ensure_discovered()
        return sorted(self._themes)

    def __len__(self) -> int:
        self._ensure_discovered()
        return len(self._themes)

    def __iter__(self) -> Iterator[str]:
        self._ensure_discovered()
        return iter(sorted(self._themes))

    def __contains__(self, name: object) -> bool:
        self._ensure_discovered()
        if isinstance(name, ThemeName):
            name = name.value
        return name in self._themes

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def discover_builtin(self) -> None:
        """Scan ``vega_themes.themes`` for modules exporting Theme instances.

        Each module in the package (excluding ``base``) is imported and
        every module-level :class:`Theme` attribute is registered.
        Modules that fail to import are skipped with a warning so that a
        single broken theme file does not take the others down with it;
        the missing theme then surfaces as a ``KeyError`` on lookup.
        """
        import vega_themes.themes as _pkg

        for module_info in pkgutil.iter_modules(_pkg.__path__):
            if module_info.name in ("base",):
                continue
            try:
                mod = importlib.import_module(
                    f"vega_themes.themes.{module_info.name}"
                )
            except Exception:  # noqa: BLE001
                logger.warning(
                    "Skipping theme module %s", module_info.name, exc_info=True
                )
                continue

            for attr_name in dir(mod):
                attr = getattr(mod, attr_name)
                if isinstance(attr, Theme):
                    self.register(attr)

        self._discovered = True

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(theme: Theme) -> None:
        """Validate that a theme has all required data.

        Raises
        ------
        ValueError
            If the name is not a known theme name, the category range does
            not hold exactly ``CATEGORY_SIZE`` colors, or any color set is
            missing or empty.
        """
        try:
            theme_name(theme.name)
        except KeyError as exc:
            raise ValueError(exc.args[0]) from None

        if len(theme.category) != CATEGORY_SIZE:
            raise ValueError(
                f"Theme '{theme.name}' field 'category' must contain "
                f"{CATEGORY_SIZE} colors, got {len(theme.category)}"
            )

        for set_name in ColorSetName:
            colors = theme.color_sets.get(set_name.value)
            if not colors:
                raise ValueError(
                    f"Theme '{theme.name}' is missing color set "
                    f"'{set_name.value}'"
                )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _ensure_discovered(self) -> None:
        """Trigger auto-discovery if it hasn't happened yet."""
        if self._auto_discover and not self._discovered:
            self.discover_builtin()


# ======================================================================
# Module-level singleton and convenience functions
# ======================================================================

_registry = ThemeRegistry()


def get_theme(name: ThemeLike) -> Theme:
    """Return a built-in theme by name.

    Raises
    ------
    KeyError
        If no theme with the given name is registered.
        The error message lists all available theme names.
    """
    return _registry.get(name)


def list_themes() -> list[str]:
    """Return a sorted list of all available theme names."""
    return _registry.list_themes()


def theme_config(name: ThemeLike) -> ThemeConfig:
    """Return a fresh Vega-Lite config object for the named theme."""
    return get_theme(name).build_config()
