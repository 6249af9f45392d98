"""Pytest fixtures for jflexwrap tests."""

from pathlib import Path

import pytest

from jflexwrap.config import JFlexSettings


@pytest.fixture
def jflex_home(tmp_path: Path) -> Path:
    """Create a fake JFlex installation with both launcher scripts."""
    home = tmp_path / "jflex"
    bin_dir = home / "bin"
    bin_dir.mkdir(parents=True)
    (bin_dir / "jflex.sh").write_text("#!/bin/sh\n")
    (bin_dir / "jflex.bat").write_text("@echo off\n")
    return home


@pytest.fixture
def settings(jflex_home: Path) -> JFlexSettings:
    return JFlexSettings(home=jflex_home)


@pytest.fixture
def sample_flex_file(tmp_path: Path) -> Path:
    """Create a small JFlex grammar."""
    flex_file = tmp_path / "grammar" / "Sample.flex"
    flex_file.parent.mkdir()
    flex_file.write_text(
        """\
%%
%class SampleLexer
%unicode
%%
[a-z]+    { return 1; }
"""
    )
    return flex_file
