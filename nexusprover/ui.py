"""Text content for the terminal screens: splash, login and dashboard."""

from __future__ import annotations

LOGO_NAME = """
  ███╗   ██╗  ███████╗  ██╗  ██╗  ██╗   ██╗  ███████╗
  ████╗  ██║  ██╔════╝  ╚██╗██╔╝  ██║   ██║  ██╔════╝
  ██╔██╗ ██║  █████╗     ╚███╔╝   ██║   ██║  ███████╗
  ██║╚██╗██║  ██╔══╝     ██╔██╗   ██║   ██║  ╚════██║
  ██║ ╚████║  ███████╗  ██╔╝ ██╗  ╚██████╔╝  ███████║
  ╚═╝  ╚═══╝  ╚══════╝  ╚═╝  ╚═╝   ╚═════╝   ╚══════╝
"""

_HTML_STATUS_MESSAGES = (
    ("502", "❌ HTTP 502 Bad Gateway"),
    ("503", "❌ HTTP 503 Service Unavailable"),
    ("504", "❌ HTTP 504 Gateway Timeout"),
    ("500", "❌ HTTP 500 Internal Server Error"),
    ("429", "⏳ HTTP 429 Rate Limited"),
)


def extract_version_from_message(message: str) -> str | None:
    """Pull the version out of a "New version X available!" message."""
    start = message.find("version ")
    if start == -1:
        return None
    after_version = message[start + len("version "):]
    end = after_version.find(" available")
    if end == -1:
        return None
    return after_version[:end]


def format_compact_timestamp(timestamp: str) -> str:
    """Turn "YYYY-MM-DD HH:MM:SS" into "MM-DD HH:MM:SS"; otherwise return it unchanged."""
    date_part, sep, time_part = timestamp.partition(" ")
    if not sep:
        return timestamp
    raw = date_part.encode("utf-8")
    if len(raw) < 5:
        return timestamp
    try:
        month_day = raw[5:].decode("utf-8")
        raw[:5].decode("utf-8")
    except UnicodeDecodeError:
        return timestamp
    return f"{month_day} {time_part}"


def clean_http_error_message(msg: str) -> str:
    """Reduce HTTP error messages (including HTML bodies) to their essentials."""
    if "<html>" in msg or "<!DOCTYPE" in msg:
        for code, text in _HTML_STATUS_MESSAGES:
            if code in msg:
                return text
        return "❌ HTTP Error (server returned HTML)"

    status_pos = msg.find("status ")
    if status_pos != -1:
        rest = msg[status_pos:]
        status_end = rest.find(":")
        if status_end == -1:
            status_end = rest.find("<")
        if status_end != -1:
            status_part = msg[: status_pos + status_end]
            error_start = status_part.rfind("error")
            if error_start == -1:
                error_start = status_part.rfind("Error")
            if error_start != -1:
                return f"❌ {status_part[error_start:]}"
            return f"❌ HTTP {status_part[status_pos:]}"

    return msg


def format_uptime(seconds: float) -> str:
    """Format an uptime as days, hours, minutes and seconds."""
    total = int(seconds)
    days, rem = divmod(total, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, secs = divmod(rem, 60)
    return f"UPTIME: {days}d {hours}h {minutes}m {secs}s"


def title_text(version: str, update_available: bool, latest_version: str | None) -> str:
    """Dashboard title, announcing an update when one is available."""
    if update_available:
        if latest_version is not None:
            return (
                f"=== NEXUS PROVER v{version} → 🚀 {latest_version} "
                "UPDATE AVAILABLE ==="
            )
        return f"=== NEXUS PROVER v{version} → 🚀 UPDATE AVAILABLE ==="
    return f"=== NEXUS PROVER v{version} ==="


def footer_text(update_available: bool) -> str:
    """Dashboard footer with the quit hint."""
    if update_available:
        return (
            "[Q] Quit | 🚀 New version available! "
            "Check release notes at github.com/nexus-xyz/nexus-cli"
        )
    return "[Q] Quit"


def splash_lines(version: str) -> list[str]:
    """Lines of the splash screen: the logo, a spacer and the version."""
    lines = LOGO_NAME.strip("\n").splitlines()
    lines.append(" ")
    lines.append(f"Version {version}")
    return lines


def login_text() -> str:
    """Instructions shown on the login screen."""
    return "Press Enter to login\nPress Esc to exit"