"""UI components for slug-studio."""

from slug_studio.components.log_panel import LogPanel
from slug_studio.components.preview_panel import PreviewPanel
from slug_studio.components.slug_form import SlugForm

__all__ = [
    "LogPanel",
    "PreviewPanel",
    "SlugForm",
]
