"""Network helpers used when starting the HTTP server."""
import socket
from typing import Dict


def get_local_ip() -> str:
    """Return the LAN address the OS would route outbound traffic through, or '127.0.0.1'.

    Connecting a UDP socket only selects a route; nothing is sent.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("10.255.255.255", 1))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def server_urls(port: int) -> Dict[str, str]:
    """Local URL plus, when a LAN address exists, the URL other devices can use."""
    urls = {"local": f"http://localhost:{port}"}
    local_ip = get_local_ip()
    if local_ip not in ("127.0.0.1", "localhost"):
        urls["lan"] = f"http://{local_ip}:{port}"
    return urls
