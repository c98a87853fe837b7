#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Run configuration and user settings."""

import json
import os
import shlex
from dataclasses import dataclass, field
from typing import List, Optional

from l10n_merge.suggestions import DEFAULT_HELPER

APP_NAME = "l10n-merge"
STRINGS_NAME = "Localizable.strings"


def settings_path():
    xdg = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return os.path.join(xdg, APP_NAME, "settings.json")


def load_settings():
    """Read the user settings file. A missing file gives an empty dict."""
    p = settings_path()
    if os.path.exists(p):
        with open(p) as f:
            return json.load(f)
    return {}


def infer_language(lproj_dir):
    """Language code of a resource directory: es.lproj -> es."""
    name = os.path.basename(os.path.normpath(lproj_dir))
    return name.split(".")[0]


def _command(value):
    if isinstance(value, str):
        return shlex.split(value)
    return list(value)


@dataclass
class Config:
    """Everything one run needs."""
    code_dir: str
    lproj_dir: str
    language: str = ""
    helper: List[str] = field(default_factory=lambda: list(DEFAULT_HELPER))
    genstrings: str = "genstrings"
    iconv: str = "iconv"
    glossary: Optional[str] = None
    strict: bool = False
    keep_tmp: bool = False

    def __post_init__(self):
        if not self.language:
            self.language = infer_language(self.lproj_dir)

    @property
    def tmp_dir(self):
        return os.path.join(self.lproj_dir, "tmp")

    @property
    def strings_file(self):
        return os.path.join(self.lproj_dir, STRINGS_NAME)

    @property
    def extracted_file(self):
        return os.path.join(self.tmp_dir, STRINGS_NAME)

    @property
    def converted_file(self):
        return self.extracted_file + ".utf8"

    @classmethod
    def from_args(cls, args, settings=None):
        """Build a Config from parsed CLI args; args win over settings."""
        settings = settings or {}
        helper = args.helper or settings.get("helper") or DEFAULT_HELPER
        return cls(
            code_dir=args.code_dir,
            lproj_dir=args.lproj_dir,
            helper=_command(helper),
            genstrings=settings.get("genstrings", "genstrings"),
            iconv=settings.get("iconv", "iconv"),
            glossary=args.glossary,
            strict=args.strict,
            keep_tmp=args.keep_tmp,
        )
