"""
Resolve the site the browser suites run against.

Priority:
1. ``TEST_BASE_URL`` (an already running replica, waited on until healthy).
2. The hosted site when the suite configuration names one (staging).
3. The local ``demo_hr`` replica, started in a background thread for the
   duration of the session.
"""

from __future__ import annotations

import logging
import os
import threading
import time
from collections.abc import Generator
from dataclasses import dataclass

import requests
from werkzeug.serving import make_server

from config import SuiteConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteUrls:
    """Base URLs of the three hosts the HR product is split across."""

    login: str
    marketing: str
    hr: str

    @classmethod
    def single(cls, base_url: str) -> "SiteUrls":
        """All three hosts served from one origin (the local replica)."""
        base_url = base_url.rstrip("/")
        return cls(login=base_url, marketing=base_url, hr=base_url)


def is_site_ready(url: str, timeout: int = 2) -> bool:
    """Return True when the replica health endpoint responds with 200."""
    try:
        response = requests.get(f"{url}/api/health", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_healthy(url: str, timeout: int = 60, interval: float = 0.5) -> None:
    """Poll the health endpoint until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_ready(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Demo HR site at {url} not healthy after {timeout}s")


def serve_demo_app(
    config_name: str = "testing",
    host: str = "127.0.0.1",
    overrides: dict | None = None,
) -> Generator[str, None, None]:
    """Run the demo app on a free port in a daemon thread and yield its URL."""
    from demo_hr import create_app

    app = create_app(config_name, overrides)
    server = make_server(host, 0, app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    base_url = f"http://{host}:{server.server_port}"
    logger.info("Started demo HR site at %s", base_url)

    try:
        wait_for_healthy(base_url)
        yield base_url
    finally:
        server.shutdown()
        thread.join(timeout=5)
        logger.info("Stopped demo HR site at %s", base_url)


def live_site_urls(
    suite: type[SuiteConfig],
    *,
    base_url_env: str = "TEST_BASE_URL",
) -> Generator[SiteUrls, None, None]:
    """Yield the URLs to drive, starting the local replica when needed."""
    provided_base_url = os.getenv(base_url_env)
    if provided_base_url:
        wait_for_healthy(provided_base_url)
        yield SiteUrls.single(provided_base_url)
        return

    if suite.HR_BASE_URL:
        logger.info("Running against hosted site %s", suite.HR_BASE_URL)
        yield SiteUrls(
            login=suite.LOGIN_BASE_URL or suite.HR_BASE_URL,
            marketing=suite.MARKETING_BASE_URL or suite.HR_BASE_URL,
            hr=suite.HR_BASE_URL,
        )
        return

    for base_url in serve_demo_app(overrides={"DEFAULT_OVERLAYS": suite.DEMO_OVERLAYS}):
        yield SiteUrls.single(base_url)
