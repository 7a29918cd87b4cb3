"""Playwright fixtures for the HR site E2E tests."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page
from playwright.sync_api import Error as PlaywrightError

from config import SuiteConfig, get_suite_config
from shared.live_stack import SiteUrls
from tests.e2e.pages.login_page import LoginPage
from tests.e2e.pages.profile_page import ProfilePage
from tests.e2e.pages.signup_page import SignupPage
from tests.e2e.pages.summary_page import SummaryPage

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: dict, suite_config: type[SuiteConfig]):
    if not suite_config.SLOW_MO_MS:
        return browser_type_launch_args
    return {**browser_type_launch_args, "slow_mo": suite_config.SLOW_MO_MS}


@pytest.fixture(scope="session")
def browser_context_args(suite_config: type[SuiteConfig]):
    return {
        "viewport": suite_config.VIEWPORT,
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(
    browser: Browser, browser_context_args: dict, suite_config: type[SuiteConfig]
) -> Generator[BrowserContext, None, None]:
    context = browser.new_context(**browser_context_args)
    context.set_default_timeout(suite_config.ACTION_TIMEOUT_MS)
    context.set_default_navigation_timeout(suite_config.NAVIGATION_TIMEOUT_MS)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def admin_credentials(suite_config: type[SuiteConfig]) -> dict[str, str]:
    return {"email": suite_config.ADMIN_EMAIL, "password": suite_config.ADMIN_PASSWORD}


@pytest.fixture
def login_page(page: Page, site_urls: SiteUrls) -> LoginPage:
    return LoginPage(page, site_urls.login)


@pytest.fixture
def signup_page(page: Page, site_urls: SiteUrls) -> SignupPage:
    return SignupPage(page, site_urls.marketing)


@pytest.fixture
def logged_in_admin(login_page: LoginPage, admin_credentials: dict[str, str]) -> dict[str, str]:
    """Log the admin in within the current browser context."""
    login_page.navigate()
    login_page.login(admin_credentials["email"], admin_credentials["password"])
    login_page.expect_successful_login()
    return admin_credentials


@pytest.fixture
def profile_page(
    page: Page, site_urls: SiteUrls, suite_config: type[SuiteConfig], logged_in_admin
) -> ProfilePage:
    return ProfilePage(page, site_urls.hr, suite_config.EMPLOYEE_ID)


@pytest.fixture
def summary_page(
    page: Page, site_urls: SiteUrls, suite_config: type[SuiteConfig], logged_in_admin
) -> SummaryPage:
    return SummaryPage(page, site_urls.hr, suite_config.EMPLOYEE_ID)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Save a screenshot of the page a failed journey ended on."""
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or not report.failed:
        return

    page = item.funcargs.get("page")
    if page is None or page.is_closed():
        return

    screenshot_dir = get_suite_config().SCREENSHOT_DIR
    os.makedirs(screenshot_dir, exist_ok=True)
    safe_name = re.sub(r"[^\w.-]+", "_", item.name)
    path = f"{screenshot_dir}/{safe_name}.png"
    try:
        page.screenshot(path=path, full_page=True)
    except PlaywrightError as exc:
        logger.warning("Failed to capture screenshot for %s: %s", item.nodeid, exc)
        return
    logger.info("Screenshot saved: %s", path)
    report.sections.append(("screenshot", path))
