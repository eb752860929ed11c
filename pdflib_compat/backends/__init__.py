"""Backend abstractions for pdflib-compat."""

from .base import DocumentStore, DrawingSurface
from .pypdf_backend import PypdfDocumentStore, describe_pdf
from .reportlab_backend import ReportlabSurface

__all__ = [
    "DocumentStore",
    "DrawingSurface",
    "PypdfDocumentStore",
    "ReportlabSurface",
    "describe_pdf",
]
