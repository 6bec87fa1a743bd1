import re

import pytest

from nexusprover import ui


def test_extract_version_from_update_message():
    msg = "🚀 New version v0.9.1 available! Current: 0.9.0 → Release: x"
    assert ui.extract_version_from_message(msg) == "v0.9.1"


@pytest.mark.parametrize(
    "msg",
    ["✅ Version 0.9.1 is up to date\n", "no marker here", "version v1 without end"],
)
def test_extract_version_missing(msg):
    assert ui.extract_version_from_message(msg) is None


def test_compact_timestamp_drops_year():
    assert ui.format_compact_timestamp("2024-01-01 12:34:56") == "01-01 12:34:56"


@pytest.mark.parametrize("ts", ["2024-01-01T00:00:00Z", "2024 12:00", ""])
def test_compact_timestamp_unchanged(ts):
    assert ui.format_compact_timestamp(ts) == ts


@pytest.mark.parametrize(
    "code, expected",
    [
        ("502", "❌ HTTP 502 Bad Gateway"),
        ("503", "❌ HTTP 503 Service Unavailable"),
        ("504", "❌ HTTP 504 Gateway Timeout"),
        ("500", "❌ HTTP 500 Internal Server Error"),
        ("429", "⏳ HTTP 429 Rate Limited"),
    ],
)
def test_clean_html_errors(code, expected):
    msg = f"Failed: <html><body>{code}</body></html>"
    assert ui.clean_http_error_message(msg) == expected


def test_clean_html_generic():
    msg = "<!DOCTYPE html><html>oops</html>"
    assert ui.clean_http_error_message(msg) == "❌ HTTP Error (server returned HTML)"


def test_clean_status_without_error_word():
    msg = "Request failed with status 404: not found"
    assert ui.clean_http_error_message(msg) == "❌ HTTP " + "status 404"


def test_clean_status_with_error_word():
    msg = "Http error status 418: teapot"
    assert ui.clean_http_error_message(msg) == "❌ " + "error status 418"


@pytest.mark.parametrize("msg", ["Proof completed", "status 5 without colon"])
def test_clean_plain_message_unchanged(msg):
    assert ui.clean_http_error_message(msg) == msg


def test_uptime_zero():
    assert ui.format_uptime(0) == "UPTIME: 0d 0h 0m 0s"


@pytest.mark.parametrize("seconds", [1, 59, 60, 3599, 3600, 86399, 86400, 1234567])
def test_uptime_components_add_up(seconds):
    text = ui.format_uptime(seconds)
    match = re.fullmatch(r"UPTIME: (\d+)d (\d+)h (\d+)m (\d+)s", text)
    assert match is not None
    d, h, m, s = (int(g) for g in match.groups())
    assert d * 86400 + h * 3600 + m * 60 + s == seconds
    assert h < 24 and m < 60 and s < 60


def test_title_without_update():
    title = ui.title_text("0.9.7", False, "v1.0.0")
    assert title.startswith("=== NEXUS PROVER v0.9.7")
    assert "UPDATE AVAILABLE" not in title


def test_title_with_latest():
    title = ui.title_text("0.9.7", True, "v1.0.0")
    assert "v1.0.0 UPDATE AVAILABLE ===" in title
    assert title.startswith("=== NEXUS PROVER v0.9.7 → 🚀")


def test_title_update_unknown_latest():
    title = ui.title_text("0.9.7", True, None)
    assert title.endswith("🚀 UPDATE AVAILABLE ===")


def test_footer():
    assert ui.footer_text(False) == "[Q] Quit"
    with_update = ui.footer_text(True)
    assert with_update.startswith("[Q] Quit | 🚀 New version available!")


def test_splash_lines():
    lines = ui.splash_lines("1.2.3")
    assert lines[-1] == "Version 1.2.3"
    assert lines[-2] == " "
    assert len(lines) == 8
    assert "███╗" in lines[0]
    assert all(line.strip() for line in lines[:-2])


def test_login_text():
    assert ui.login_text() == "Press Enter to login\nPress Esc to exit"