from gettext_extractor.catalog import Catalog
from gettext_extractor.entry import CatalogEntry, EntryKind, build_entry, escape
from gettext_extractor.errors import ExtractionError, NestingTooDeepError
from gettext_extractor.extractor import Extractor, extract, extract_file
from gettext_extractor.literals import resolve
from gettext_extractor.markers import MARKERS, Marker, recognize

__all__ = [
  "Catalog",
  "CatalogEntry",
  "EntryKind",
  "ExtractionError",
  "Extractor",
  "MARKERS",
  "Marker",
  "NestingTooDeepError",
  "build_entry",
  "escape",
  "extract",
  "extract_file",
  "recognize",
  "resolve",
]
