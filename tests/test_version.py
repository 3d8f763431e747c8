"""Tests for tagdebug._version — PEP 440 compliance and version parsing."""

import re

import tagdebug
from tagdebug._version import (
    MAJOR, MINOR, PATCH, PHASE,
    PIP_VERSION,
    get_pip_version,
    get_version,
)


def test_version_format():
    """Version should be MAJOR.MINOR.PATCH[-PHASE]."""
    assert re.match(r"^\d+\.\d+\.\d+(-\w+)?$", get_version())


def test_version_matches_components():
    assert get_version().startswith(f"{MAJOR}.{MINOR}.{PATCH}")


def test_pip_version_pep440():
    """PIP version must be PEP 440 compliant (no hyphens)."""
    pip_ver = get_pip_version()
    assert "-" not in pip_ver
    assert re.match(r"^\d+\.\d+\.\d+((a|b|rc)\d+)?$", pip_ver), pip_ver


def test_pip_version_alpha_mapping():
    if PHASE == "alpha":
        assert PIP_VERSION.endswith("a0")


def test_package_exports_version():
    assert tagdebug.__version__ == get_version()
    assert tagdebug.__app_name__ == "tagdebug"
