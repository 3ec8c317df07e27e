"""Viewer module for displaying rendered tables."""

from .qt_viewer import ViewerWindow, image_to_pixmap, run_viewer

__all__ = ["ViewerWindow", "image_to_pixmap", "run_viewer"]
