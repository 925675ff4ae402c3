"""Merge a resolved theme config into a Vega-Lite chart spec.

Three entry points with different precedence:

* :func:`annotate` fills gaps.  The theme wins for top-level config keys,
  but inside ``axis``, ``legend``, ``title``, ``view``, ``mark`` and
  ``range`` the caller's own sub-fields win.  Mark colors and categorical
  scale ranges are only added where the spec has none.
* :func:`force_annotate` overwrites color ranges, the config mark color,
  categorical scale ranges and the spec's own mark color.
* :func:`annotate_with_color_set` swaps in a semantic color set for the
  category range and categorical scales, but keeps an explicit mark
  color.

All three return a deep copy and never modify the spec passed in.  Specs
come from free-form editor input, so a field with the wrong type (a
``mark`` that is a number, an ``encoding`` that is a list) is left as it
is and only that field's injection is skipped.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from vega_themes.colors import color_set
from vega_themes.names import ColorSetLike, ThemeLike
from vega_themes.resolver import DEFAULT_PRIMARY
from vega_themes.themes.base import ThemeConfig

logger = logging.getLogger(__name__)

ChartSpec = Dict[str, Any]

#: Config sub-records in which the caller's fields take precedence.
CALLER_WINS_KEYS = ("axis", "legend", "title", "view", "mark", "range")

#: Color encoding types that take a category range.
CATEGORICAL_TYPES = ("nominal", "ordinal")


def annotate(spec: Mapping[str, Any], theme: ThemeConfig) -> ChartSpec:
    """Merge *theme* into *spec* without overriding the caller's settings."""
    result = _copy_spec(spec)
    theme = copy.deepcopy(theme)

    config = result.get("config")
    if config is None:
        config = {}
    if isinstance(config, dict):
        merged = {**config, **theme}
        for key in CALLER_WINS_KEYS:
            theme_sub = theme.get(key)
            caller_sub = config.get(key)
            if not isinstance(caller_sub, dict):
                continue
            base = theme_sub if isinstance(theme_sub, dict) else {}
            merged[key] = {**base, **caller_sub}
        result["config"] = merged
    else:
        logger.debug("Leaving non-object config untouched: %r", config)

    encoding = _encoding(result)
    if encoding is None:
        return result

    category = _category(theme)
    color_enc = encoding.get("color")
    if color_enc is None:
        mark_config = theme.get("mark")
        fill = None
        if isinstance(mark_config, dict):
            fill = mark_config.get("color")
        if not fill and category:
            fill = category[0]
        if fill:
            _fill_mark_color(result, fill, overwrite=False)
    elif _is_categorical(color_enc) and category:
        scale = _scale(color_enc)
        if scale is not None and not scale.get("range"):
            scale["range"] = list(category)

    return result


def force_annotate(spec: Mapping[str, Any], theme: ThemeConfig) -> ChartSpec:
    """Apply *theme* colors to *spec*, overwriting existing color settings."""
    result = _copy_spec(spec)
    ranges = theme.get("range") or {}
    category = _category(theme)
    primary = category[0] if category else DEFAULT_PRIMARY

    config = result.get("config")
    if config is None:
        config = result["config"] = {}
    if isinstance(config, dict):
        config["range"] = {
            key: list(ranges[key])
            for key in ("category", "diverging", "heatmap", "ordinal")
            if ranges.get(key) is not None
        }
        mark_config = config.get("mark")
        if not isinstance(mark_config, dict):
            mark_config = config["mark"] = {}
        mark_config["color"] = primary
    else:
        logger.debug("Leaving non-object config untouched: %r", config)

    encoding = _encoding(result)
    if encoding is None:
        return result

    color_enc = encoding.get("color")
    if color_enc is None:
        _fill_mark_color(result, primary, overwrite=True)
    elif isinstance(color_enc, dict):
        scale = _scale(color_enc)
        if scale is not None:
            scale["range"] = list(category)

    logger.debug("Forced theme colors %s onto spec", category)
    return result


def annotate_with_color_set(
    spec: Mapping[str, Any],
    color_set_name: ColorSetLike,
    theme: ThemeLike,
) -> ChartSpec:
    """Apply the *color_set_name* colors of *theme* to *spec*.

    Raises
    ------
    KeyError
        If the theme or color-set name is unknown.
    """
    colors = color_set(theme, color_set_name)
    result = _copy_spec(spec)

    config = result.get("config")
    if config is None:
        config = result["config"] = {}
    if isinstance(config, dict):
        ranges = config.get("range")
        if ranges is None:
            ranges = config["range"] = {}
        if isinstance(ranges, dict):
            ranges["category"] = list(colors)
        else:
            logger.debug("Leaving non-object config.range untouched: %r", ranges)
    else:
        logger.debug("Leaving non-object config untouched: %r", config)

    encoding = _encoding(result)
    if encoding is None:
        return result

    color_enc = encoding.get("color")
    if color_enc is None:
        _fill_mark_color(result, colors[0], overwrite=False)
    elif _is_categorical(color_enc):
        scale = _scale(color_enc)
        if scale is not None:
            scale["range"] = list(colors)

    logger.debug("Applied color set %s: %s", color_set_name, colors)
    return result


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------


def _copy_spec(spec: Mapping[str, Any]) -> ChartSpec:
    if not isinstance(spec, Mapping):
        raise TypeError(
            f"Expected a chart spec mapping, got {type(spec).__name__}"
        )
    return copy.deepcopy(dict(spec))


def _encoding(spec: ChartSpec) -> Optional[Dict[str, Any]]:
    """Return the spec's encoding, ``{}`` when absent, ``None`` if malformed."""
    encoding = spec.get("encoding")
    if encoding is None:
        return {}
    if isinstance(encoding, dict):
        return encoding
    logger.debug("Skipping color injection for encoding %r", encoding)
    return None


def _category(theme: ThemeConfig) -> List[str]:
    ranges = theme.get("range")
    if not isinstance(ranges, dict):
        return []
    category = ranges.get("category")
    if not isinstance(category, Sequence) or isinstance(category, str):
        return []
    return list(category)


def _is_categorical(color_enc: Any) -> bool:
    return (
        isinstance(color_enc, dict)
        and color_enc.get("type") in CATEGORICAL_TYPES
    )


def _scale(color_enc: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    scale = color_enc.get("scale")
    if scale is None:
        scale = color_enc["scale"] = {}
    if not isinstance(scale, dict):
        return None
    return scale


def _fill_mark_color(spec: ChartSpec, color: str, *, overwrite: bool) -> None:
    """Put *color* on the spec's mark, promoting a bare type string."""
    mark = spec.get("mark")
    if isinstance(mark, str):
        spec["mark"] = {"type": mark, "color": color}
    elif isinstance(mark, dict):
        if overwrite or not mark.get("color"):
            mark["color"] = color
