"""Helper utilities for U-King Mod Manager."""
from typing import Union

import requests  # type: ignore
from bs4 import BeautifulSoup  # type: ignore


def format_version(version: Union[str, float, int, None]) -> str:
    """
    Format a mod version for display.

    Args:
        version: Version as given by the catalog (string or number)

    Returns:
        Display string (e.g., '1.2', '1.0.3')
    """
    if version is None:
        return ""
    if isinstance(version, bool):
        return str(version)
    if isinstance(version, (int, float)):
        text = f"{float(version):.1f}" if float(version).is_integer() else f"{version:g}"
        return text
    return str(version).strip()


def strip_markup(text: str) -> str:
    """
    Reduce an HTML or plain-text mod description to readable text.

    Args:
        text: Description as provided by the mod author

    Returns:
        Text with tags removed and blank runs collapsed
    """
    if not text:
        return ""
    if "<" not in text:
        return text.strip()
    soup = BeautifulSoup(text, "html.parser")
    for br in soup.find_all("br"):
        br.replace_with("\n")
    lines = [line.strip() for line in soup.get_text().splitlines()]
    result = []
    for line in lines:
        if line or (result and result[-1]):
            result.append(line)
    return "\n".join(result).strip()


def check_host_status(base_url: str, timeout: float = 5) -> tuple[bool, str]:
    """
    Check if the mod manager host is accessible and responding.

    Args:
        base_url: Root URL of the host

    Returns:
        Tuple of (is_accessible: bool, status_message: str)
    """
    try:
        response = requests.head(base_url, timeout=timeout)
        if response.status_code < 500:
            return True, "Host is online"
        else:
            return False, f"Host returned status {response.status_code}"
    except requests.exceptions.ConnectionError:
        return False, "Cannot connect to mod manager host - network error"
    except requests.exceptions.Timeout:
        return False, "Connection to mod manager host timed out"
    except Exception as e:
        return False, f"Host check failed: {str(e)}"
