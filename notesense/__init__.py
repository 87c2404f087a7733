"""notesense: body issue detection for free-text workout notes."""
__version__ = "0.1.0"

from .detector import detect  # noqa: E402

__all__ = ["detect", "__version__"]
