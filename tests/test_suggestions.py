import subprocess
import sys

import pytest

from l10n_merge.suggestions import (
    GlossarySource, HelperProcessSource, MappingSource, annotate,
    parse_helper_output
)
from l10n_merge.translation import Translation

HELPER = """
import sys
lang = sys.argv[1]
known = {"A": "Hello", "B": "Bye"}
for key in sys.stdin.read().split("\\n"):
    if key in known:
        print("%s\\t%s (%s)" % (key, known[key], lang))
"""

TBX = """<?xml version="1.0" encoding="UTF-8"?>
<martif type="TBX" xml:lang="en">
  <text><body>
    <termEntry>
      <langSet xml:lang="en"><tig><term>Cancel</term></tig></langSet>
      <langSet xml:lang="es"><tig><term>Cancelar</term></tig></langSet>
      <langSet xml:lang="es-MX"><tig><term>Anular</term></tig></langSet>
      <langSet xml:lang="sv"><tig><term>Avbryt</term></tig></langSet>
    </termEntry>
    <termEntry>
      <langSet xml:lang="en"><tig><term>Save</term></tig></langSet>
      <langSet xml:lang="sv"><tig><term>Spara</term></tig></langSet>
    </termEntry>
  </body></text>
</martif>
"""


def test_parse_helper_output():
    assert parse_helper_output("A\tHello\nB\tBye\n") == {"A": "Hello", "B": "Bye"}
    assert parse_helper_output("A\tone\nnoise\nA\ttwo\tthree") == {
        "A": "two\tthree"}


def test_annotate_with_mapping():
    translations = [Translation("A", ""), Translation("B", ""), Translation("C", "")]
    source = MappingSource(parse_helper_output("A\tHello\nB\tBye\n"))
    a, b, c = annotate(translations, "es", source)
    assert a.suggestions == "Hello"
    assert b.suggestions == "Bye"
    assert c.suggestions is None
    assert translations[0].suggestions is None


def test_helper_process():
    translations = [Translation("A", ""), Translation("B", ""), Translation("C", "")]
    source = HelperProcessSource([sys.executable, "-c", HELPER])
    a, b, c = annotate(translations, "es", source)
    assert a.suggestions == "Hello (es)"
    assert b.suggestions == "Bye (es)"
    assert c.suggestions is None


def test_helper_failure_propagates():
    source = HelperProcessSource([sys.executable, "-c", "import sys; sys.exit(3)"])
    with pytest.raises(subprocess.CalledProcessError):
        annotate([Translation("A", "")], "es", source)


def test_missing_helper_propagates(tmp_path):
    source = HelperProcessSource([str(tmp_path / "no-such-helper")])
    with pytest.raises(OSError):
        source.lookup(["A"], "es")


def test_glossary_source(tmp_path):
    path = tmp_path / "glossary.tbx"
    path.write_text(TBX, encoding="utf-8")
    source = GlossarySource(str(path))
    assert source.lookup(["Cancel", "Save", "Other"], "es") == {
        "Cancel": "Cancelar, Anular"}
    assert source.lookup(["Cancel", "Save"], "sv") == {
        "Cancel": "Avbryt", "Save": "Spara"}
    assert source.lookup(["Cancel"], "es-MX") == {"Cancel": "Anular"}
