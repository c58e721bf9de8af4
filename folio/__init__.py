"""Academic Folio: a single-page academic portfolio with a self-service admin panel."""

__version__ = "0.1.0"
