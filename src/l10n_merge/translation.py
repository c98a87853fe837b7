#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Translation data model."""

import gettext
from dataclasses import dataclass, replace
from typing import Optional

_ = gettext.gettext

SUGGESTION_SEP = ";"


class TranslationMismatchError(ValueError):
    """Raised when a translation is updated from one with another key."""


@dataclass(frozen=True)
class Translation:
    """A single key/value/comment entry of a strings file.

    Only the first ``;``-separated segment of the comment is kept, so
    suggestions written by an earlier run are dropped on load.
    """
    key: str
    value: str = ""
    comment: str = ""
    suggestions: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(
            self, "comment", self.comment.split(SUGGESTION_SEP)[0])

    @property
    def comment_with_suggestions(self):
        if self.suggestions is not None:
            return "{}{} Suggestions: {}".format(
                self.comment, SUGGESTION_SEP, self.suggestions)
        return self.comment

    def with_prior_translation(self, other):
        """Return a copy carrying the value of ``other``.

        Comment and suggestions stay those of ``self``.
        """
        if other.key != self.key:
            raise TranslationMismatchError(
                _("Refuse to update non-equal translations: {!r} != {!r}")
                .format(self.key, other.key))
        return replace(self, value=other.value)

    def with_suggestions(self, suggestions):
        return replace(self, suggestions=suggestions)
