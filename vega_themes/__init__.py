"""Theme and color-set resolution for Vega-Lite chart specifications."""

__version__ = "0.1.0"
