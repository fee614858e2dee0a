"""Tests for package metadata."""

from __future__ import annotations

from pathlib import Path

import mdapi

SOURCES = sorted(Path(mdapi.__file__).parent.rglob('*.py'))


def test_sources_carry_license_header() -> None:
    assert SOURCES
    for path in SOURCES:
        lines = path.read_text(encoding='utf8').splitlines()
        assert lines[0] == '# Copyright 2026 The mdapi Authors', path
        assert '# Licensed under the Apache License, Version 2.0 (the "License");' in lines[:4], path
