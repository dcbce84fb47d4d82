"""Converter launcher — starts the server and opens the browser on the view."""

from __future__ import annotations

import logging
import socket
import threading
import time
import webbrowser

import uvicorn

from app.config import settings


def open_browser(host: str, port: int) -> None:
    """Wait for the server to start, then open the browser."""
    for _ in range(50):
        try:
            with socket.create_connection((host, port), timeout=0.1):
                break
        except OSError:
            time.sleep(0.1)
    webbrowser.open(f"http://{host}:{port}/api/view")


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(f"Starting {settings.app_name} on http://{settings.host}:{settings.port}")
    print(f"Conversion service: {settings.backend_url}")
    print("Press Ctrl+C to stop.\n")

    threading.Thread(target=open_browser, args=(settings.host, settings.port), daemon=True).start()

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
