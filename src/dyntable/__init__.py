"""Schema-driven dynamic table: decode typed UI rows from JSON and render them."""

__version__ = "0.1.0"
