"""Tests for package archive filename parsing."""

import pytest
from packaging.version import Version

from versioning.models import IgnoredFile, Package
from versioning.parser import (
    is_signature_path,
    parse_package_path,
    signature_base,
    split_segments,
)


class TestParsePackagePath:
    """Tests for parse_package_path()."""

    def test_simple_package(self):
        pkg = parse_package_path("/mnt/archlinux/foo-1.0-1-x86_64.pkg.tar.xz")
        assert isinstance(pkg, Package)
        assert pkg.path == "/mnt/archlinux/foo-1.0-1-x86_64.pkg.tar.xz"
        assert pkg.name == "foo"
        assert pkg.version_string == "1.0-1"
        assert pkg.arch == "x86_64"
        assert pkg.extension == ".pkg.tar.xz"
        assert pkg.version_components.epoch == 0
        assert pkg.version_components.segments == (1, 0)
        assert pkg.version_components.release == Version("1")

    def test_hyphenated_name_is_split_from_the_right(self):
        pkg = parse_package_path("python-requests-2.31.0-2-any.pkg.tar.zst")
        assert pkg.name == "python-requests"
        assert pkg.version_string == "2.31.0-2"
        assert pkg.arch == "any"
        assert pkg.extension == ".pkg.tar.zst"

    def test_alphanumeric_version(self):
        pkg = parse_package_path("/mnt/archlinux/linux-5.3.arch1-1-x86_64.pkg.tar.xz")
        assert pkg.name == "linux"
        assert pkg.version_components.segments == (5, 3, "arch", 1)

    def test_git_describe_version(self):
        pkg = parse_package_path("/mnt/archlinux/zeitgeist-1.0+1+g1bcc8585-1-x86_64.pkg.tar.xz")
        assert pkg.name == "zeitgeist"
        assert pkg.version_string == "1.0+1+g1bcc8585-1"
        assert pkg.version_components.segments == (1, 0, 1, "g", 1, "bcc", 8585)

    def test_epoch(self):
        pkg = parse_package_path("vim-2:9.0.1000-1-x86_64.pkg.tar.zst")
        assert pkg.version_string == "2:9.0.1000-1"
        assert pkg.version_components.epoch == 2
        assert pkg.version_components.segments == (9, 0, 1000)

    def test_dotted_release(self):
        pkg = parse_package_path("foo-1.0-1.1-x86_64.pkg.tar.xz")
        assert pkg.version_components.release == Version("1.1")

    def test_uncompressed_archive(self):
        pkg = parse_package_path("foo-1.0-1-any.pkg.tar")
        assert isinstance(pkg, Package)
        assert pkg.extension == ".pkg.tar"

    def test_packages_are_hashable(self):
        pkg = parse_package_path("foo-1.0-1-any.pkg.tar.xz")
        assert pkg in {pkg}


class TestParseFailures:
    """Unparseable names are reported, never raised."""

    @pytest.mark.parametrize(
        "filename, reason",
        [
            ("README.md", "not a package archive"),
            ("foo-1.0-1-x86_64.tar.gz", "not a package archive"),
            ("foo-1.0-1.pkg.tar.xz", "missing"),
            ("foo--1-x86_64.pkg.tar.xz", "missing"),
            ("lib-foo-1.0-1.pkg.tar.xz", "invalid architecture"),
            ("foo-1.0-x-x86_64.pkg.tar.xz", "invalid release number"),
            ("foo-1.0-1a-x86_64.pkg.tar.xz", "invalid release number"),
            ("foo-abc-1-x86_64.pkg.tar.xz", "invalid version"),
            ("foo-1.0$-1-x86_64.pkg.tar.xz", "invalid version"),
            ("foo-x:1.0-1-x86_64.pkg.tar.xz", "invalid epoch"),
        ],
    )
    def test_ignored_with_reason(self, filename, reason):
        result = parse_package_path("/cache/" + filename)
        assert isinstance(result, IgnoredFile)
        assert result.path == "/cache/" + filename
        assert reason in result.reason


class TestHelpers:
    """Tests for signature and segment helpers."""

    def test_is_signature_path(self):
        assert is_signature_path("/c/foo-1.0-1-x86_64.pkg.tar.xz.sig") is True
        assert is_signature_path("/c/foo-1.0-1-x86_64.pkg.tar.xz") is False

    def test_signature_base(self):
        assert signature_base("/c/foo.pkg.tar.xz.sig") == "/c/foo.pkg.tar.xz"

    def test_split_segments_drops_separators(self):
        assert split_segments("1.2_3+rc4") == (1, 2, 3, "rc", 4)

    def test_split_segments_keeps_leading_zeros_numeric(self):
        assert split_segments("1.01") == (1, 1)
