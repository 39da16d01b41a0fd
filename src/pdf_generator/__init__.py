"""PDF rendering and output."""

from src.pdf_generator.finalizer import PDFFinalizer, ViewerLauncher
from src.pdf_generator.formatter import format_currency
from src.pdf_generator.renderer import RenderResult, StatementRenderer

__all__ = [
    "PDFFinalizer",
    "RenderResult",
    "StatementRenderer",
    "ViewerLauncher",
    "format_currency",
]
