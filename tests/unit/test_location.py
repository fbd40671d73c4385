"""Unit tests for storage location routing."""

import pytest

from rpmsnap.host.location import (
    DEFAULT_LOCATION_RULES,
    FEDORA_RELEASE_MARKERS,
    LocationRule,
    resolve_storage_dir,
    resolve_suffix,
)


@pytest.fixture
def issue_file(temp_dir):
    return temp_dir / "issue"


@pytest.fixture
def fedora_rule(issue_file):
    return LocationRule(host="dual.example.org", probe_path=issue_file, markers=FEDORA_RELEASE_MARKERS)


class TestResolveSuffix:
    """Tests for resolve_suffix."""

    def test_no_rules(self):
        assert resolve_suffix("host.example.org", []) == ""

    def test_other_host_gets_no_suffix(self, fedora_rule, issue_file):
        issue_file.write_text("Fedora release 20 (Heisenbug)\n")

        assert resolve_suffix("other.example.org", [fedora_rule]) == ""

    @pytest.mark.parametrize("issue,suffix", [
        ("Fedora release 20 (Heisenbug)\nKernel \\r on an \\m\n", ".f20"),
        ("Fedora release 19 (Schrödinger’s Cat)\n", ".f19"),
        ("Fedora release 18 (Spherical Cow)\n", ".f18"),
        ("Fedora release 17 (Beefy Miracle)\n", ".f17"),
        ("Fedora release 21 (Twenty One)\n", ""),
    ])
    def test_fedora_markers(self, fedora_rule, issue_file, issue, suffix):
        issue_file.write_text(issue, encoding="utf-8")

        assert resolve_suffix("dual.example.org", [fedora_rule]) == suffix

    def test_first_marker_wins(self, issue_file):
        issue_file.write_text("Heisenbug and Beefy Miracle\n")
        rule = LocationRule(host="h", probe_path=issue_file, markers=(("Beefy Miracle", ".f17"), ("Heisenbug", ".f20")))

        assert resolve_suffix("h", [rule]) == ".f17"

    def test_first_matching_rule_wins(self, issue_file):
        issue_file.write_text("alpha beta\n")
        first = LocationRule(host="h", probe_path=issue_file, markers=(("gamma", ".g"),))
        second = LocationRule(host="h", probe_path=issue_file, markers=(("alpha", ".a"),))

        assert resolve_suffix("h", [first, second]) == ""

    def test_unreadable_probe_gives_no_suffix(self, temp_dir):
        rule = LocationRule(host="h", probe_path=temp_dir / "missing", markers=(("x", ".x"),))

        assert resolve_suffix("h", [rule]) == ""


class TestResolveStorageDir:
    """Tests for resolve_storage_dir."""

    def test_plain_host(self, temp_dir):
        assert resolve_storage_dir(temp_dir, "host.example.org", []) == temp_dir / "host.example.org"

    def test_suffixed_host(self, temp_dir, fedora_rule, issue_file):
        issue_file.write_text("Fedora release 18 (Spherical Cow)\n")

        assert resolve_storage_dir(temp_dir, "dual.example.org", [fedora_rule]) == temp_dir / "dual.example.org.f18"


class TestLocationRule:
    """Tests for LocationRule configuration parsing."""

    def test_from_dict(self):
        rule = LocationRule.from_dict({
            'host': "dual.example.org",
            'probe': "/etc/os-release",
            'markers': [{'marker': "Heisenbug", 'suffix': ".f20"}],
        })

        assert rule.host == "dual.example.org"
        assert str(rule.probe_path) == "/etc/os-release"
        assert rule.markers == (("Heisenbug", ".f20"),)

    def test_from_dict_default_probe(self):
        rule = LocationRule.from_dict({'host': "h"})

        assert str(rule.probe_path) == "/etc/issue"
        assert rule.markers == ()

    def test_from_dict_requires_host(self):
        with pytest.raises(ValueError, match="requires a 'host'"):
            LocationRule.from_dict({'markers': []})

    def test_from_dict_incomplete_marker(self):
        with pytest.raises(ValueError, match="needs 'marker' and 'suffix'"):
            LocationRule.from_dict({'host': "h", 'markers': [{'marker': "x"}]})

    def test_default_rules_cover_one_host(self):
        assert [r.host for r in DEFAULT_LOCATION_RULES] == ["some.random.host.org"]
