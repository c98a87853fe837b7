#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Merge freshly extracted strings with existing translations."""


def merge_translations(old, new):
    """Merge two translation lists, unsorted.

    Keys from both lists survive. Where a key is in both, the entry from
    ``new`` is kept with the value from ``old``; entries only in ``old``
    are kept as they are.
    """
    unique = {}
    for t in new:
        unique[t.key] = t

    for t in old:
        if t.key in unique:
            unique[t.key] = unique[t.key].with_prior_translation(t)
        else:
            unique[t.key] = t

    return list(unique.values())


def merge_sorted(old, new):
    """Like merge_translations, sorted by key."""
    return sorted(merge_translations(old, new), key=lambda t: t.key)
