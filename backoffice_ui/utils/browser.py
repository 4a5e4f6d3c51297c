"""Browser helper: isolated contexts, tabs and their download directories.

A :class:`BrowserSession` owns one Playwright ``BrowserContext`` and at most
one live tab.  Each session gets a private download directory so two
scenarios saving the same artifact never collide.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from playwright.sync_api import Browser, BrowserContext, Page
from playwright.sync_api import Error as PlaywrightError

from .config import UIConfig, get_config

logger = logging.getLogger("backoffice-ui.browser")

# BrowserContext -> BrowserSession, so page objects can find a tab's download dir.
_SESSIONS: dict[BrowserContext, "BrowserSession"] = {}


@dataclass
class BrowserSession:
    """One browser context plus its active tab."""

    context: BrowserContext
    download_dir: Path
    default_timeout_ms: int
    tab: Page | None = None
    closed: bool = False


def create_session(browser: Browser, config: UIConfig | None = None) -> BrowserSession:
    """Open an isolated context with downloads enabled and HTTPS errors ignored."""
    config = config or get_config()
    context = browser.new_context(
        viewport=dict(config.viewport),
        locale=config.locale,
        ignore_https_errors=True,
        accept_downloads=True,
    )
    context.set_default_timeout(config.default_timeout_ms)

    config.download_dir.mkdir(parents=True, exist_ok=True)
    download_dir = Path(tempfile.mkdtemp(prefix="session-", dir=config.download_dir))

    session = BrowserSession(
        context=context,
        download_dir=download_dir,
        default_timeout_ms=config.default_timeout_ms,
    )
    _SESSIONS[context] = session
    logger.info("Created browser session (downloads in %s)", download_dir)
    return session


def new_tab(session: BrowserSession) -> Page:
    """Open a fresh tab in *session*, replacing any previous live tab."""
    if session.closed:
        raise RuntimeError("Cannot open a tab on a closed browser session")

    if session.tab is not None and not session.tab.is_closed():
        logger.debug("Closing previous tab before opening a new one")
        session.tab.close()

    tab = session.context.new_page()
    tab.set_default_timeout(session.default_timeout_ms)
    session.tab = tab
    return tab


def close_session(session: BrowserSession) -> None:
    """Close the tab and context, then drop the download directory.

    Safe to call twice and safe to call after the browser has crashed.
    """
    if session.closed:
        return
    session.closed = True
    _SESSIONS.pop(session.context, None)

    if session.tab is not None:
        try:
            session.tab.close()
        except PlaywrightError as exc:
            logger.warning("Ignoring error while closing tab: %s", exc)
        session.tab = None

    try:
        session.context.close()
    except PlaywrightError as exc:
        logger.warning("Ignoring error while closing browser context: %s", exc)

    shutil.rmtree(session.download_dir, ignore_errors=True)
    logger.info("Closed browser session (%s)", session.download_dir)


def session_for_tab(tab: Page) -> BrowserSession | None:
    return _SESSIONS.get(tab.context)


def download_dir_for_tab(tab: Page) -> Path:
    """Return the download directory of the session owning *tab*."""
    session = session_for_tab(tab)
    if session is not None:
        return session.download_dir
    return get_config().download_dir


def go_to(tab: Page, url: str) -> None:
    """Navigate *tab* to *url* and wait for the load event."""
    logger.info("Navigating to %s", url)
    tab.goto(url, wait_until="load")
