import ast

import pytest

from gettext_extractor.entry import EntryKind
from gettext_extractor.markers import MARKERS, Marker, call_name, recognize


def call(src: str) -> ast.Call:
  node = ast.parse(src, mode='eval').body
  assert isinstance(node, ast.Call)
  return node


class TestCallName:
  @pytest.mark.parametrize("src, expected", [
    ('_("x")', '_'),
    ('self._("x")', '_'),
    ('gettext.pgettext("c", "x")', 'pgettext'),
    ('handlers[0]("x")', None),
    ('(lambda s: s)("x")', None),
  ])
  def test_call_name(self, src, expected):
    assert call_name(call(src)) == expected

  def test_marker_table(self):
    assert {name for name, marker in MARKERS.items() if marker == Marker.SIMPLE} == {'_', 'N_', 's_'}
    assert {name for name, marker in MARKERS.items() if marker == Marker.CONTEXT} == {'p_', 'pgettext'}
    assert {name for name, marker in MARKERS.items() if marker == Marker.PLURAL} == {'n_'}
    assert 'np_' not in MARKERS


class TestSimple:
  @pytest.mark.parametrize("name", ['_', 'N_', 's_'])
  def test_all_simple_names(self, name):
    entry = recognize(call(f'{name}("Save")'), "app.py")
    assert entry.kind == EntryKind.NORMAL
    assert entry.msgid == "Save"
    assert entry.comment is None

  @pytest.mark.parametrize("src", ['_(("Save",))', '_(["Save"])'])
  def test_wrapped_argument(self, src):
    assert recognize(call(src), "app.py").msgid == "Save"

  def test_comment(self):
    entry = recognize(call('_("Save", "toolbar button")'), "app.py")
    assert entry.comment == "toolbar button"

  def test_non_literal_comment_ignored(self):
    entry = recognize(call('_("Save", hint)'), "app.py")
    assert entry.msgid == "Save"
    assert entry.comment is None

  def test_concatenated_message(self):
    assert recognize(call('_("Hello " + "world")'), "app.py").msgid == "Hello world"

  def test_location(self):
    node = ast.parse('\n\nx = _("Save")').body[0].value
    assert recognize(node, "ui/app.py").references == ["ui/app.py:3"]

  @pytest.mark.parametrize("src", [
    '_()',
    '_(name)',
    '_("Hello " + name)',
    '_(f"Hello {name}")',
    '_(("a", "b"))',
    '_(msgid="Save")',
  ])
  def test_skipped(self, src):
    assert recognize(call(src), "app.py") is None


class TestContext:
  @pytest.mark.parametrize("name", ['p_', 'pgettext'])
  def test_context(self, name):
    entry = recognize(call(f'{name}("menu", "Open", "file menu item")'), "app.py")
    assert entry.kind == EntryKind.CONTEXT
    assert entry.msgctxt == "menu"
    assert entry.msgid == "Open"
    assert entry.comment == "file menu item"

  def test_concatenated_context(self):
    entry = recognize(call('p_("main " + "menu", "Open")'), "app.py")
    assert entry.msgctxt == "main menu"
    assert entry.comment is None

  @pytest.mark.parametrize("src", [
    'p_("menu")',
    'p_(ctx, "Open")',
    'p_("menu", label)',
  ])
  def test_skipped(self, src):
    assert recognize(call(src), "app.py") is None


class TestPlural:
  def test_plural(self):
    entry = recognize(call('n_("1 item", "%d items", count)'), "app.py")
    assert entry.kind == EntryKind.PLURAL
    assert entry.msgid == "1 item"
    assert entry.msgid_plural == "%d items"
    assert entry.msgctxt is None
    assert entry.comment is None

  def test_comment_is_fourth_argument(self):
    entry = recognize(call('n_("1 item", "%d items", len(items), "cart size")'), "app.py")
    assert entry.comment == "cart size"

  def test_count_never_resolved(self):
    entry = recognize(call('n_("1 item", "%d items", "not a count")'), "app.py")
    assert entry.comment is None

  @pytest.mark.parametrize("src", [
    'n_("1 item")',
    'n_(one, "%d items", n)',
    'n_("1 item", many, n)',
  ])
  def test_skipped(self, src):
    assert recognize(call(src), "app.py") is None


class TestNotAMarker:
  @pytest.mark.parametrize("src", ['print("Save")', 'np_("c", "a", "b", n)', 'gettext("Save")'])
  def test_unrecognized(self, src):
    assert recognize(call(src), "app.py") is None
