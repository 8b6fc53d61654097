"""Document persistence exports."""

from .document_store import DocumentError, load_document, save_document
from .openapi_document import DocumentStructureError, OpenApiDocument

__all__ = [
    "DocumentError",
    "DocumentStructureError",
    "OpenApiDocument",
    "load_document",
    "save_document",
]
