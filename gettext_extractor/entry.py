from dataclasses import dataclass, field
from enum import Enum


class EntryKind(Enum):
  NORMAL = "normal"
  CONTEXT = "msgctxt"
  PLURAL = "plural"


# Control characters that can't appear raw in a catalog string
_ESCAPES = {
  "\n": "\\n",
  "\t": "\\t",
  "\0": "\\0",
}


def escape(s: str) -> str:
  for raw, escaped in _ESCAPES.items():
    s = s.replace(raw, escaped)
  return s


@dataclass
class CatalogEntry:
  kind: EntryKind
  msgid: str
  msgid_plural: str | None = None
  msgctxt: str | None = None
  references: list[str] = field(default_factory=list)
  comment: str | None = None

  @property
  def is_plural(self) -> bool:
    return self.msgid_plural is not None

  @property
  def has_context(self) -> bool:
    return self.msgctxt is not None

  @property
  def merge_key(self) -> tuple[EntryKind, str, str | None]:
    return self.kind, self.msgid, self.msgctxt

  def mergeable(self, other: "CatalogEntry") -> bool:
    """Two entries describe the same message if kind, msgid and context match."""
    return self.merge_key == other.merge_key

  def add_comment(self, comment: str | None) -> None:
    if not comment:
      return
    if self.comment:
      self.comment += "\n" + comment
    else:
      self.comment = comment


def build_entry(kind: EntryKind, msgid: str | tuple[str, str], msgctxt: str | None,
                filename: str, line: int, comment: str | None = None) -> CatalogEntry:
  """Build a single-reference entry for one marker call.

  For plural entries msgid may be a (singular, plural) pair. Every string field
  is escaped here, so nothing downstream sees raw control characters.
  """
  msgid_plural = None
  if kind == EntryKind.PLURAL and isinstance(msgid, tuple):
    msgid, msgid_plural = msgid
    msgid_plural = escape(msgid_plural)

  entry = CatalogEntry(
    kind=kind,
    msgid=escape(msgid),
    msgid_plural=msgid_plural,
    msgctxt=escape(msgctxt) if msgctxt is not None else None,
    references=[f"{filename}:{line}"],
  )
  if comment is not None:
    entry.add_comment(escape(comment))
  return entry
