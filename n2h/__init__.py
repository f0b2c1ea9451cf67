"""N2H - Export tagged notes to Hugo content pages."""

__version__ = "0.2.0"
__title__ = "N2H"
__license__ = "MIT"

from .config import ConfigurationError, load_config
from .converter import ExportError, NoteExporter
from .models import ExportResult, Page, PublishTag, SiteConfig
from .utils import note_id_from_filename, slug_from_title, tags_from_file

__all__ = [
    "ConfigurationError",
    "ExportError",
    "ExportResult",
    "NoteExporter",
    "Page",
    "PublishTag",
    "SiteConfig",
    "load_config",
    "note_id_from_filename",
    "slug_from_title",
    "tags_from_file",
    "__version__",
    "__title__",
]
