#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Main entry point for l10n-merge."""

import argparse
import gettext
import logging
import os
import shutil
import sys

# i18n setup
LOCALE_DIR = os.path.join(os.path.dirname(__file__), '..', '..', 'po')
if not os.path.isdir(LOCALE_DIR):
    LOCALE_DIR = '/usr/share/locale'
gettext.bindtextdomain('l10n-merge', LOCALE_DIR)
gettext.textdomain('l10n-merge')
_ = gettext.gettext

from l10n_merge import tools
from l10n_merge.config import Config, load_settings
from l10n_merge.merger import merge_sorted
from l10n_merge.strings_file import StringsFile
from l10n_merge.suggestions import (
    GlossarySource, HelperProcessSource, annotate
)

log = logging.getLogger("l10n_merge")


def _suggestion_source(config):
    if config.glossary:
        return GlossarySource(config.glossary)
    return HelperProcessSource(config.helper)


def run(config, source=None):
    """Extract, merge, annotate and write the strings file of one language.

    Returns the list of translations written.
    """
    log.info(_("Inferred language: %s"), config.language)

    # Generate new strings
    os.makedirs(config.tmp_dir, exist_ok=True)
    tools.extract_strings(config.code_dir, config.tmp_dir, config.genstrings)
    tools.convert_to_utf8(config.extracted_file, config.converted_file,
                          config.iconv)

    old_file = StringsFile(config.strings_file)
    old = old_file.get_translations(strict=config.strict)
    log.info(_("Got %d existing translations"), len(old))

    new = StringsFile(config.converted_file).get_translations(
        strict=config.strict)
    log.info(_("Got %d new translations"), len(new))

    merged = merge_sorted(old, new)
    log.info(_("Merged set has %d entries"), len(merged))

    if source is None:
        source = _suggestion_source(config)
    merged = annotate(merged, config.language, source)

    old_file.write_translations(merged)
    log.info(_("Wrote to disk"))

    if config.keep_tmp:
        log.debug("Keeping %s", config.tmp_dir)
    else:
        shutil.rmtree(config.tmp_dir)
    return merged


def build_parser():
    parser = argparse.ArgumentParser(
        prog="l10n-merge",
        description=_("Merge newly extracted strings into an existing "
                      "Localizable.strings, keeping prior translations."))
    parser.add_argument("code_dir", help=_("directory with the .m sources"))
    parser.add_argument("lproj_dir",
                        help=_("language directory, e.g. es.lproj"))
    parser.add_argument("--helper",
                        help=_("suggestion helper command "
                               "(default: ./translation_helper.swift)"))
    parser.add_argument("--glossary", metavar="FILE",
                        help=_("take suggestions from a TBX glossary"))
    parser.add_argument("--strict", action="store_true",
                        help=_("fail when a strings file has no entries"))
    parser.add_argument("--keep-tmp", action="store_true",
                        help=_("keep the scratch directory"))
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")
    return parser


def setup_logging(level):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    log.handlers[:] = [handler]
    log.setLevel(level)
    log.propagate = False


def log_level(value):
    """Level from settings: a number or a name such as "debug"."""
    if isinstance(value, int):
        return value
    level = getattr(logging, str(value).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def main(argv=None):
    """Entry point."""
    args = build_parser().parse_args(argv)
    settings = load_settings()

    level = log_level(settings.get("log_level", "INFO"))
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    setup_logging(level)

    run(Config.from_args(args, settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
