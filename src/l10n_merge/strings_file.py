#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Reader and writer for Apple .strings files."""

import gettext
import logging
import re

from l10n_merge.translation import Translation

_ = gettext.gettext

log = logging.getLogger(__name__)

# No escape handling: fields cannot contain '"' or '*/'.
ENTRY_RE = re.compile(r'/\* (.*?) \*/\n"(.*?)" = "(.*?)";')


class StringsFormatError(ValueError):
    """Raised in strict mode when a strings file has no recognizable entries."""


def parse(text):
    """Parse strings file content into a list of Translation."""
    return [Translation(key, value, comment)
            for comment, key, value in ENTRY_RE.findall(text)]


def format_translation(translation):
    return '/* {} */\n"{}" = "{}";'.format(
        translation.comment_with_suggestions,
        translation.key, translation.value)


def serialize(translations):
    """Render translations as strings file content, blank-line separated."""
    return "\n\n".join(format_translation(t) for t in translations)


class StringsFile:
    """A Localizable.strings file on disk."""

    def __init__(self, filename):
        self.filename = filename

    def get_translations(self, strict=False):
        with open(self.filename, "r", encoding="utf-8") as f:
            content = f.read()

        translations = parse(content)
        log.debug("Parsed %d entries from %s",
                  len(translations), self.filename)
        if strict and not translations and content.strip():
            raise StringsFormatError(
                _("No translations found in {}").format(self.filename))
        return translations

    def write_translations(self, translations):
        # Full overwrite, no backup
        with open(self.filename, "w", encoding="utf-8") as f:
            f.write(serialize(translations))
