#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Suggested translations, added to the comment of each entry.

A suggestion source answers one question: given a batch of keys and a
language code, which keys have a suggestion and what is it.  The default
source is an external helper program speaking a line protocol:

    stdin:  one key per line
    stdout: one ``<key>\\t<suggestion>`` per line

The whole batch is sent at once and the helper is awaited to completion.
"""

import gettext
import logging
import subprocess

from lxml import etree

_ = gettext.gettext

log = logging.getLogger(__name__)

DEFAULT_HELPER = ["./translation_helper.swift"]

XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"


def parse_helper_output(text):
    """Parse ``key<TAB>suggestion`` lines. The last occurrence of a key wins."""
    lookup = {}
    for line in text.split("\n"):
        if "\t" not in line:
            continue
        key, suggestion = line.split("\t", 1)
        lookup[key] = suggestion
    return lookup


class HelperProcessSource:
    """Suggestions from an external helper, given the language as argument."""

    def __init__(self, command=None):
        self.command = list(command or DEFAULT_HELPER)

    def lookup(self, keys, language):
        args = self.command + [language]
        log.debug("Running %s with %d keys", " ".join(args), len(keys))
        # No timeout: a hung helper blocks the run
        result = subprocess.run(
            args, input="\n".join(keys), stdout=subprocess.PIPE,
            encoding="utf-8", check=True)
        return parse_helper_output(result.stdout)


class MappingSource:
    """Suggestions from an in-memory mapping of key to suggestion."""

    def __init__(self, mapping):
        self.mapping = dict(mapping)

    def lookup(self, keys, language):
        return {k: self.mapping[k] for k in keys if k in self.mapping}


def _lang_matches(lang, language):
    lang = lang.replace("_", "-").lower()
    language = language.replace("_", "-").lower()
    if lang == language:
        return True
    return "-" not in language and lang.split("-")[0] == language


def _localname(el):
    return etree.QName(el).localname


class GlossarySource:
    """Suggestions from a TBX glossary.

    Each term entry maps its source-language term to the terms of the
    requested language. The source language is taken from the document's
    xml:lang, defaulting to English.
    """

    def __init__(self, path):
        self.path = path

    def _entries(self):
        tree = etree.parse(self.path)
        root = tree.getroot()
        source_lang = root.get(XML_LANG) or "en"
        for entry in root.iter(tag=etree.Element):
            if _localname(entry) not in ("termEntry", "conceptEntry"):
                continue
            terms = {}
            for lang_set in entry.iterchildren(tag=etree.Element):
                if _localname(lang_set) not in ("langSet", "langSec"):
                    continue
                lang = lang_set.get(XML_LANG, "")
                for term in lang_set.iter(tag=etree.Element):
                    if _localname(term) == "term" and term.text:
                        terms.setdefault(lang, []).append(term.text.strip())
            yield source_lang, terms

    def lookup(self, keys, language):
        wanted = set(keys)
        found = {}
        for source_lang, terms in self._entries():
            sources = [t for lang, ts in terms.items()
                       if _lang_matches(lang, source_lang) for t in ts]
            targets = [t for lang, ts in terms.items()
                       if _lang_matches(lang, language) for t in ts]
            if not targets:
                continue
            for source in sources:
                if source in wanted:
                    found.setdefault(source, [])
                    found[source].extend(
                        t for t in targets if t not in found[source])
        log.debug("Glossary %s has suggestions for %d of %d keys",
                  self.path, len(found), len(wanted))
        return {k: ", ".join(v) for k, v in found.items()}


def annotate(translations, language, source=None):
    """Return the translations with suggestions from ``source`` attached.

    Keys without a suggestion are returned unchanged.
    """
    if source is None:
        source = HelperProcessSource()
    lookup = source.lookup([t.key for t in translations], language)
    return [t.with_suggestions(lookup[t.key]) if t.key in lookup else t
            for t in translations]
