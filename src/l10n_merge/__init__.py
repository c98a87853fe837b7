# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Merge extracted strings into existing Localizable.strings files."""

__version__ = "0.1.0"
