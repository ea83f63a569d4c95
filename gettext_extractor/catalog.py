from collections.abc import Iterable, Iterator

from gettext_extractor.entry import CatalogEntry, EntryKind


class Catalog:
  """Ordered, deduplicated collection of extracted entries.

  Entries keep the order in which their message was first seen. Seed keys are
  added up front as plain entries without references.
  """

  def __init__(self, seed_keys: Iterable[str] = ()):
    self._entries: list[CatalogEntry] = []
    self._keys: dict[str, CatalogEntry] = {}

    for key in seed_keys:
      # a repeated seed key would overwrite its lookup; keep the first one
      if key in self._keys:
        continue
      entry = CatalogEntry(kind=EntryKind.NORMAL, msgid=key)
      self._keys[key] = entry
      self._entries.append(entry)

  @property
  def entries(self) -> list[CatalogEntry]:
    return self._entries

  def __iter__(self) -> Iterator[CatalogEntry]:
    return iter(self._entries)

  def __len__(self) -> int:
    return len(self._entries)

  def find(self, candidate: CatalogEntry) -> CatalogEntry | None:
    return next((e for e in self._entries if e.mergeable(candidate)), None)

  def store(self, candidate: CatalogEntry) -> CatalogEntry:
    """Add a candidate, or fold it into the entry with the same merge key."""
    existing = self.find(candidate)
    if existing is None:
      self._entries.append(candidate)
      return candidate

    existing.references.extend(candidate.references)

    # merge comments by hand: never repeat text that's already there
    comment = candidate.comment
    if comment and existing.comment and comment in existing.comment:
      return existing
    existing.add_comment(comment)
    return existing

  def store_key(self, key: str, location: str) -> CatalogEntry:
    """Record a bare key with a "file:line" marker, creating it on first sight.

    Best-effort path for callers that track seed keys themselves; marker calls
    go through store() instead.
    """
    entry = self._keys.get(key)
    if entry is None:
      probe = CatalogEntry(kind=EntryKind.NORMAL, msgid=key)
      entry = self.find(probe)
      if entry is None:
        entry = probe
        self._entries.append(entry)
      self._keys[key] = entry
    entry.references.append(location)
    return entry
