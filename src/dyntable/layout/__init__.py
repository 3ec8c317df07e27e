"""Layout system: content boxes and row stacking."""

from .box import container_size, content_box
from .table import stack_rows, table_height

__all__ = ["container_size", "content_box", "stack_rows", "table_height"]
