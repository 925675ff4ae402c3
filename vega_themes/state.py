"""Active theme and color-set state.

:class:`PresentationState` is the single writer of the two presentation
settings.  Each mutation follows the same order: update the document
mirror, persist to storage, then broadcast.  Anything woken by the
broadcast therefore already sees the new state.

Readers (chart renderers) should not cache what they read across an
event; they call :meth:`PresentationState.current_config` or one of the
annotate methods at the moment they render.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Set

from vega_themes import annotate as _annotate
from vega_themes.colors import color_catalog
from vega_themes.events import (
    COLOR_SET_CHANGED,
    DEFAULT_REFRESH_DELAY,
    REFRESH_REQUESTED,
    THEME_CHANGED,
    ChangeBroadcaster,
    DeferredCallbacks,
)
from vega_themes.names import (
    ColorSetLike,
    ColorSetName,
    ThemeLike,
    ThemeName,
    color_set_name,
    theme_name,
)
from vega_themes.resolver import resolve
from vega_themes.storage import COLOR_SET_KEY, THEME_KEY, MemoryStorage
from vega_themes.themes.base import ThemeConfig

logger = logging.getLogger(__name__)

THEME_ATTRIBUTE = "data-theme"
COLOR_SET_ATTRIBUTE = "data-color-set"

THEME_PROPERTY = "--theme-mode"
COLOR_SET_PROPERTY = "--selected-color-set"


def theme_class(name: ThemeName) -> str:
    """Return the document class marking *name* as active."""
    return f"{name.value}-theme"


class DocumentRoot:
    """Attributes, classes and style properties mirrored onto the document root.

    Styling consumers read ``data-theme`` / ``data-color-set``, the
    ``<theme>-theme`` class and the ``--theme-mode`` /
    ``--selected-color-set`` custom properties; this object is the
    engine's side of that contract.
    """

    def __init__(self) -> None:
        self.attributes: Dict[str, str] = {}
        self.classes: Set[str] = set()
        self.style: Dict[str, str] = {}

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name, None)

    def get_property(self, name: str) -> Optional[str]:
        return self.style.get(name)

    def set_property(self, name: str, value: str) -> None:
        self.style[name] = value

    def remove_property(self, name: str) -> None:
        self.style.pop(name, None)


class PresentationState:
    """The active theme and color set, with their mirrors and broadcasts.

    Parameters
    ----------
    storage : object with ``get``/``set``/``remove``, optional
        Durable storage.  Defaults to a fresh :class:`MemoryStorage`.
    document : DocumentRoot, optional
        Document mirror.  Defaults to a fresh :class:`DocumentRoot`.
    broadcaster : ChangeBroadcaster, optional
        Channel for change events.
    scheduler : DeferredCallbacks, optional
        Queue for the deferred refresh after :meth:`toggle_color_set`.
    default_theme : ThemeName or str
        Theme used when storage holds no valid theme.
    refresh_delay : float
        Seconds between a toggle and its refresh broadcast.
    """

    def __init__(
        self,
        storage: Any = None,
        document: Optional[DocumentRoot] = None,
        broadcaster: Optional[ChangeBroadcaster] = None,
        scheduler: Optional[DeferredCallbacks] = None,
        default_theme: ThemeLike = ThemeName.LIGHT,
        refresh_delay: float = DEFAULT_REFRESH_DELAY,
    ) -> None:
        self.storage = storage if storage is not None else MemoryStorage()
        self.document = document if document is not None else DocumentRoot()
        self.broadcaster = broadcaster or ChangeBroadcaster()
        self.scheduler = scheduler or DeferredCallbacks()
        self.refresh_delay = refresh_delay

        self._theme: ThemeName = (
            self._stored(THEME_KEY, theme_name) or theme_name(default_theme)
        )
        self._color_set: Optional[ColorSetName] = self._stored(
            COLOR_SET_KEY, color_set_name
        )

        self._mirror_theme()
        self._mirror_color_set()

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    @property
    def active_theme(self) -> ThemeName:
        return self._theme

    @property
    def active_color_set(self) -> Optional[ColorSetName]:
        return self._color_set

    def current_config(self) -> ThemeConfig:
        """Resolve the config for the current theme and color set."""
        return resolve(self._theme, self._color_set)

    def color_catalog(self) -> Dict[str, List[str]]:
        """Return every color set as defined by the current theme."""
        return color_catalog(self._theme)

    def annotate(self, spec: Mapping[str, Any]) -> Dict[str, Any]:
        return _annotate.annotate(spec, self.current_config())

    def force_annotate(self, spec: Mapping[str, Any]) -> Dict[str, Any]:
        return _annotate.force_annotate(spec, self.current_config())

    def annotate_with_color_set(
        self, spec: Mapping[str, Any], name: ColorSetLike
    ) -> Dict[str, Any]:
        return _annotate.annotate_with_color_set(spec, name, self._theme)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_theme(self, name: ThemeLike) -> ThemeName:
        """Make *name* the active theme.

        Raises
        ------
        KeyError
            If *name* is not a theme name.
        """
        new = theme_name(name)
        previous = self._theme
        self._theme = new
        self._mirror_theme()
        self._persist(THEME_KEY, new.value)
        logger.info("Theme changed from %s to %s", previous.value, new.value)
        self.broadcaster.emit(THEME_CHANGED, theme=new.value)
        return new

    def toggle_theme(self) -> ThemeName:
        """Switch light to dark; any other theme goes back to light."""
        if self._theme is ThemeName.LIGHT:
            return self.set_theme(ThemeName.DARK)
        return self.set_theme(ThemeName.LIGHT)

    def cycle_theme(self) -> ThemeName:
        """Advance to the next theme in :class:`ThemeName` order.

        Wraps after the last one.  Unlike :meth:`toggle_theme` this visits
        every theme.
        """
        order = list(ThemeName)
        index = order.index(self._theme)
        return self.set_theme(order[(index + 1) % len(order)])

    def set_color_set(self, name: Optional[ColorSetLike]) -> Optional[ColorSetName]:
        """Make *name* the active color set, or clear it with ``None``.

        Raises
        ------
        KeyError
            If *name* is not a color-set name.
        """
        new = color_set_name(name) if name is not None else None
        self._color_set = new
        self._mirror_color_set()
        self._persist(COLOR_SET_KEY, new.value if new is not None else None)
        logger.info("Color set changed to %s", new.value if new else None)
        self.broadcaster.emit(
            COLOR_SET_CHANGED, colorSet=new.value if new is not None else None
        )
        return new

    def toggle_color_set(self, name: ColorSetLike) -> Optional[ColorSetName]:
        """Select *name*, or deselect it if it is already active.

        A refresh broadcast is scheduled after :attr:`refresh_delay`.
        """
        requested = color_set_name(name)
        if self._color_set is requested:
            result = self.set_color_set(None)
        else:
            result = self.set_color_set(requested)
        self.scheduler.schedule(self.refresh_delay, self.request_refresh)
        return result

    def request_refresh(self) -> None:
        """Ask every renderer to re-resolve and re-annotate now."""
        self.broadcaster.emit(
            REFRESH_REQUESTED,
            selectedColorSet=self.document.get_attribute(COLOR_SET_ATTRIBUTE),
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _mirror_theme(self) -> None:
        # Exactly one theme class may be present on the document.
        for name in ThemeName:
            self.document.classes.discard(theme_class(name))
        self.document.classes.add(theme_class(self._theme))
        self.document.set_attribute(THEME_ATTRIBUTE, self._theme.value)
        self.document.set_property(THEME_PROPERTY, self._theme.value)

    def _mirror_color_set(self) -> None:
        if self._color_set is None:
            self.document.remove_attribute(COLOR_SET_ATTRIBUTE)
            self.document.remove_property(COLOR_SET_PROPERTY)
        else:
            self.document.set_attribute(COLOR_SET_ATTRIBUTE, self._color_set.value)
            self.document.set_property(COLOR_SET_PROPERTY, self._color_set.value)

    def _stored(self, key: str, coerce: Any) -> Any:
        try:
            value = self.storage.get(key)
        except OSError:
            logger.warning("Could not read %s from storage", key, exc_info=True)
            return None
        if value is None:
            return None
        try:
            return coerce(value)
        except KeyError:
            logger.warning("Ignoring stored %s %r", key, value)
            return None

    def _persist(self, key: str, value: Optional[str]) -> None:
        try:
            if value is None:
                self.storage.remove(key)
            else:
                self.storage.set(key, value)
        except OSError:
            logger.warning(
                "Could not save %s; the change applies to this session only",
                key,
                exc_info=True,
            )
