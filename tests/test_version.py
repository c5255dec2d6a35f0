"""Tests for version reporting."""
from unittest.mock import patch

from gitcommitlint import __version__
from gitcommitlint.version import get_current_version, get_installation_path, get_version_summary


def test_current_version():
    assert get_current_version() == __version__


def test_installation_path_is_package_dir():
    assert (get_installation_path() / "cli.py").exists()


def test_version_summary_when_installed_version_matches():
    with patch('gitcommitlint.version.get_installed_version', return_value=__version__):
        assert get_version_summary() == f"git-commit-lint {__version__}"


def test_version_summary_when_not_installed():
    with patch('gitcommitlint.version.get_installed_version', return_value="unknown"):
        assert get_version_summary() == f"git-commit-lint {__version__} (installed: unknown)"
