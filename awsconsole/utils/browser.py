import subprocess
import sys
from typing import List, Optional

from ..errors import BrowserError

def browser_command(url: str, platform: Optional[str] = None) -> List[str]:
    """
    Get the command that opens a URL with the platform's default application.

    Args:
        url: The URL to open
        platform: Platform name as reported by sys.platform (default: current)

    Returns:
        List[str]: Command and arguments
    """
    platform = platform or sys.platform
    if platform == "darwin":
        return ["open", url]
    if platform.startswith("linux"):
        return ["xdg-open", url]
    if platform == "win32":
        return ["rundll32", "url.dll,FileProtocolHandler", url]
    raise BrowserError(f"unsupported platform: {platform}")

def open_browser(url: str, platform: Optional[str] = None) -> None:
    """
    Open a URL in the user's default browser without waiting for it.

    Args:
        url: The URL to open
        platform: Platform name as reported by sys.platform (default: current)
    """
    cmd = browser_command(url, platform)
    try:
        subprocess.Popen(cmd)
    except OSError as e:
        raise BrowserError(f"failed to open browser with {cmd[0]}: {e}") from e
