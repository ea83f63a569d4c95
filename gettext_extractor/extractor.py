"""Marker-call extraction over Python syntax trees.

Walks an `ast` tree depth-first, turns every recognized marker call
(`_`, `N_`, `s_`, `p_`, `pgettext`, `n_`) into a catalog entry and merges
repeated messages. Parsing is left to `ast.parse`; a SyntaxError reaches the
caller untouched.
"""

import ast
import logging
from collections.abc import Iterable
from pathlib import Path

from gettext_extractor.catalog import Catalog
from gettext_extractor.entry import CatalogEntry
from gettext_extractor.errors import NestingTooDeepError
from gettext_extractor.markers import recognize

logger = logging.getLogger("gettext_extractor")

DEFAULT_ENCODING = "utf-8"
DEFAULT_MAX_DEPTH: int | None = None


class Extractor(ast.NodeVisitor):
  def __init__(self, filename: str, seed_keys: Iterable[str] = (), max_depth: int | None = DEFAULT_MAX_DEPTH):
    self.filename = filename
    self.catalog = Catalog(seed_keys)
    self.max_depth = max_depth
    self._depth = 0

  @property
  def results(self) -> list[CatalogEntry]:
    return self.catalog.entries

  def visit(self, node: ast.AST):
    """Visit a node, counting syntax tree levels against max_depth.

    Load/Store/Del context markers are leaves without source of their own and
    don't count as a level.
    """
    if isinstance(node, ast.expr_context):
      return None
    self._depth += 1
    try:
      if self.max_depth is not None and self._depth > self.max_depth:
        raise NestingTooDeepError(self.filename, getattr(node, 'lineno', 0), self.max_depth)
      return super().visit(node)
    finally:
      self._depth -= 1

  def visit_Call(self, node: ast.Call) -> None:
    # receiver first, then the marker itself, then its arguments
    self.visit(node.func)
    candidate = recognize(node, self.filename)
    if candidate is not None:
      self.catalog.store(candidate)
    for arg in node.args:
      self.visit(arg)
    for keyword in node.keywords:
      self.visit(keyword)


def extract(source: str, filename: str, seed_keys: Iterable[str] = (),
            max_depth: int | None = DEFAULT_MAX_DEPTH) -> list[CatalogEntry]:
  """Extract catalog entries from Python source text."""
  tree = ast.parse(source, filename=filename)

  extractor = Extractor(filename, seed_keys, max_depth=max_depth)
  extractor.visit(tree)

  logger.debug(f"Extracted {len(extractor.catalog)} entries from {filename}")
  return extractor.results


def extract_file(path: str | Path, seed_keys: Iterable[str] = (), encoding: str = DEFAULT_ENCODING,
                 max_depth: int | None = DEFAULT_MAX_DEPTH) -> list[CatalogEntry]:
  """Extract catalog entries from a source file, using its path in references."""
  logger.debug(f"Extracting messages from {path}")
  with open(path, encoding=encoding) as f:
    source = f.read()
  return extract(source, str(path), seed_keys, max_depth=max_depth)
