import ast
from enum import Enum

from gettext_extractor.entry import CatalogEntry, EntryKind, build_entry
from gettext_extractor.literals import resolve


class Marker(Enum):
  SIMPLE = "simple"    # _("msg", "comment")
  CONTEXT = "context"  # p_("ctx", "msg", "comment")
  PLURAL = "plural"    # n_("singular", "plural", count, "comment")


# np_ (context + plural) is reserved but not extracted yet
MARKERS: dict[str, Marker] = {
  '_': Marker.SIMPLE,
  'N_': Marker.SIMPLE,
  's_': Marker.SIMPLE,
  'p_': Marker.CONTEXT,
  'pgettext': Marker.CONTEXT,
  'n_': Marker.PLURAL,
}


def call_name(node: ast.Call) -> str | None:
  """Name of the called function, ignoring any receiver (`obj._` -> `_`)."""
  func = node.func
  if isinstance(func, ast.Name):
    return func.id
  if isinstance(func, ast.Attribute):
    return func.attr
  return None


def _arg(args: list[ast.expr], idx: int) -> str | None:
  return resolve(args[idx]) if idx < len(args) else None


def _simple(node: ast.Call, filename: str) -> CatalogEntry | None:
  args = node.args
  if not args:
    return None

  # accept both _("msg") and _(("msg",))
  first = args[0]
  if isinstance(first, (ast.Tuple, ast.List)) and len(first.elts) == 1:
    first = first.elts[0]

  msgid = resolve(first)
  if msgid is None:
    return None
  return build_entry(EntryKind.NORMAL, msgid, None, filename, node.lineno, _arg(args, 1))


def _context(node: ast.Call, filename: str) -> CatalogEntry | None:
  args = node.args
  msgctxt, msgid = _arg(args, 0), _arg(args, 1)
  if msgctxt is None or msgid is None:
    return None
  return build_entry(EntryKind.CONTEXT, msgid, msgctxt, filename, node.lineno, _arg(args, 2))


def _plural(node: ast.Call, filename: str) -> CatalogEntry | None:
  args = node.args
  singular, plural = _arg(args, 0), _arg(args, 1)
  if singular is None or plural is None:
    return None
  # args[2] is the count expression, never resolved
  return build_entry(EntryKind.PLURAL, (singular, plural), None, filename, node.lineno, _arg(args, 3))


_RULES = {
  Marker.SIMPLE: _simple,
  Marker.CONTEXT: _context,
  Marker.PLURAL: _plural,
}


def recognize(node: ast.Call, filename: str) -> CatalogEntry | None:
  """Turn a marker call into a candidate entry.

  Returns None for calls that aren't markers and for marker calls whose
  arguments can't be resolved statically. The node is only read, never
  modified.
  """
  name = call_name(node)
  marker = MARKERS.get(name)
  if marker is None:
    return None
  return _RULES[marker](node, filename)
