"""Launch the FSResolver Streamlit app on a folder and open it in the browser.

Usage:
    python run.py [ROOT] [--port PORT] [--dotfiles]
"""

from __future__ import annotations

import argparse
import os
import sys
import threading
import time
import webbrowser
from pathlib import Path
from urllib.parse import urlencode

import requests


DEFAULT_PORT = 8501


def app_url(port: int, root: str | None = None, dotfiles: bool = False) -> str:
    """Return the app URL with the scan defaults the app reads from its query string."""
    url = f"http://localhost:{port}"
    params = {}
    if root:
        params["root"] = os.path.abspath(root)
    if dotfiles:
        params["dotfiles"] = "1"
    return f"{url}/?{urlencode(params)}" if params else url


def _wait_and_open_browser(health_url: str, open_url: str, attempts: int = 30) -> bool:
    """Poll *health_url* once a second, then open *open_url* when it answers."""
    for _ in range(attempts):
        try:
            resp = requests.get(health_url, timeout=2)
            if resp.status_code == 200:
                webbrowser.open(open_url)
                return True
        except requests.RequestException:
            pass
        time.sleep(1)
    return False


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Open the FSResolver app on a folder.")
    parser.add_argument("root", nargs="?", default=None, help="Folder to pre-fill (default: none)")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Server port")
    parser.add_argument("--dotfiles", action="store_true", help="Pre-check 'Include dotfiles'")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    src_dir = Path(__file__).resolve().parent / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from streamlit.web import bootstrap

    base_url = app_url(args.port)
    threading.Thread(
        target=_wait_and_open_browser,
        args=(base_url, app_url(args.port, args.root, args.dotfiles)),
        daemon=True,
    ).start()

    bootstrap.run(
        str(src_dir / "FSResolver" / "app.py"),
        is_hello=False,
        args=[],
        flag_options={
            "server.headless": True,
            "server.port": args.port,
            "browser.gatherUsageStats": False,
        },
    )


if __name__ == "__main__":
    main()
