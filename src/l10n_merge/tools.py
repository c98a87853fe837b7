#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Wrappers around genstrings and iconv."""

import glob
import gettext
import logging
import os
from subprocess import run

_ = gettext.gettext

log = logging.getLogger(__name__)


def extract_strings(code_dir, output_dir, genstrings="genstrings"):
    """Run genstrings over the .m files of code_dir into output_dir."""
    sources = sorted(glob.glob(os.path.join(code_dir, "*.m")))
    if not sources:
        raise FileNotFoundError(
            _("No .m source files in {}").format(code_dir))
    log.debug("Extracting strings from %d files", len(sources))
    run([genstrings] + sources + ["-o", output_dir], check=True)


def convert_to_utf8(source, target, iconv="iconv"):
    """Convert the UTF-16 genstrings output to UTF-8."""
    with open(target, "wb") as out:
        run([iconv, "-f", "UTF-16", "-t", "UTF-8", source],
            stdout=out, check=True)
