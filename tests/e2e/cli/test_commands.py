"""End-to-end tests for the helper subcommands of `rzl-utils`.

Each command is invoked through the top-level group so that logging is
configured exactly as in a real shell session. Results are read from
stdout only; messages and logs go to stderr.
"""

import re
import uuid

import pytest

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "args, expected",
    [
        (["format-number", "1234567.89"], "1,234,567.89"),
        (["format-number", "1234567.89", "-s", "."], "1.234.567,89"),
        (["format-currency", "1234567.555", "--decimal", "--currency", "Rp "], "Rp 1.234.567,56"),
        (["format-currency", "--negative", "brackets", "--currency", "Rp ", "--", "-1000"], "(Rp 1.000)"),
        (["parse-currency", "Rp 15.000,10"], "15000.1"),
        (["case", "kebab", "  Hello, big_WORLD! "], "hello-big-world"),
        (["case", "snake", "use", "API", "key", "-i", "API"], "use_API_key"),
        (["slugify", "Hello, big_WORLD!"], "hello-big-world"),
        (["normalize-path", "https://example.com//foo///bar/?q=1#top"], "/foo/bar?q=1#top"),
        (["normalize-path", "/foo/bar/", "--keep-trailing-slash"], "/foo/bar/"),
        (["normalize-path", "  "], "/"),
        (["base-url"], "http://localhost:3000"),
        (["base-url", "dashboard/"], "http://localhost:3000/dashboard"),
        (["base-url", "--api", "/api/"], "http://localhost:8000/api"),
    ],
)
def test_command_prints_result(invoke, args, expected):
    result = invoke(*args)
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == expected


def test_base_url_reads_environment(invoke):
    result = invoke("base-url", env={"RZL_BASE_URL": "https://example.com:443"})
    assert result.exit_code == 0
    assert result.stdout.strip() == "https://example.com"


def test_base_url_reports_invalid_environment(invoke):
    result = invoke("base-url", env={"RZL_BASE_URL": "ftp://example.com"})
    assert result.exit_code == 1
    assert result.stdout == ""
    assert "RZL_BASE_URL" in result.output


def test_censor_email(invoke):
    result = invoke("censor-email", "john.doe@example.com")
    assert result.exit_code == 0
    local, domain = result.stdout.strip().split("@")
    assert len(local) == 8 and "*" in local
    assert domain.count(".") == 1


def test_censor_email_rejects_invalid_address(invoke):
    result = invoke("censor-email", "not-an-email")
    assert result.exit_code == 1
    assert result.stdout == ""
    assert "Not a valid email address" in result.output


def test_unknown_case_style_is_a_usage_error(invoke):
    result = invoke("case", "shouting", "hello")
    assert result.exit_code == 2


class TestRandomStr:
    """The random-str command."""

    def test_fixed_length(self, invoke):
        result = invoke("random-str", "--min-length", "12")
        assert result.exit_code == 0
        assert len(result.stdout.strip()) == 12

    def test_length_range(self, invoke):
        result = invoke("random-str", "--min-length", "5", "--max-length", "9")
        assert result.exit_code == 0
        assert 5 <= len(result.stdout.strip()) <= 9

    def test_custom_charset(self, invoke):
        result = invoke("random-str", "--min-length", "30", "--charset", "ab")
        assert result.exit_code == 0
        assert set(result.stdout.strip()) <= {"a", "b"}

    def test_number_kind(self, invoke):
        result = invoke("random-str", "--min-length", "10", "--kind", "number")
        assert result.exit_code == 0
        assert re.fullmatch(r"\d{10}", result.stdout.strip())

    def test_number_kind_warns_about_letters_charset(self, invoke):
        result = invoke(
            "random-str", "--min-length", "10", "--kind", "number", "--charset", "abc"
        )
        assert result.exit_code == 0
        assert "--charset is ignored" in result.output
        assert re.fullmatch(r"\d{10}", result.stdout.strip())

    def test_min_above_max_is_reported(self, invoke):
        result = invoke("random-str", "--min-length", "9", "--max-length", "5")
        assert result.exit_code == 1
        assert result.stdout == ""


class TestIdentifiers:
    """The uuid and ulid commands."""

    def test_uuid_v4_by_default(self, invoke):
        result = invoke("uuid")
        assert result.exit_code == 0
        assert uuid.UUID(result.stdout.strip()).version == 4

    def test_monotonic_v7_are_increasing(self, invoke):
        result = invoke("uuid", "--uuid-version", "v7", "--monotonic", "-n", "5")
        assert result.exit_code == 0
        ids = result.stdout.split()
        assert len(ids) == 5
        assert all(uuid.UUID(value).version == 7 for value in ids)
        assert ids == sorted(ids)
        assert len(set(ids)) == 5

    def test_monotonic_ulids_are_increasing(self, invoke):
        result = invoke("ulid", "--monotonic", "-n", "4")
        assert result.exit_code == 0
        ids = result.stdout.split()
        assert len(ids) == 4
        assert all(re.fullmatch(r"[0-9A-HJKMNP-TV-Z]{26}", value) for value in ids)
        assert ids == sorted(ids)
