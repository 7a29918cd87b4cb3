"""
Configuration module.

Two families of settings live here:

- Demo app configuration (development, testing, production) for the local
  replica of the HR site served by ``demo_hr``.
- Suite configuration (local, staging) telling the regression suite which
  site to drive and how the browser should behave.

Values are loaded from environment variables with sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

DEFAULT_ADMIN_EMAIL = "admin@playwrightautomation.com"
DEFAULT_ADMIN_PASSWORD = "Password1!"
DEFAULT_EMPLOYEE_ID = 41279


# -----------------------------------------------------------------------------
# Demo app configuration
# -----------------------------------------------------------------------------

class Config:
    """Base configuration for the demo HR app."""

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'demo_hr.db'}"
    )

    # Seed an admin account and one employee on startup
    SEED_DATA: bool = True
    ADMIN_EMAIL: str = os.environ.get("HR_ADMIN_EMAIL", DEFAULT_ADMIN_EMAIL)
    ADMIN_PASSWORD: str = os.environ.get("HR_ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD)
    EMPLOYEE_ID: int = int(os.environ.get("HR_EMPLOYEE_ID", DEFAULT_EMPLOYEE_ID))

    # Comma separated overlays rendered on every page unless a request overrides it
    DEFAULT_OVERLAYS: str = os.environ.get("DEMO_OVERLAYS", "")


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False
    DEFAULT_OVERLAYS: str = os.environ.get("DEMO_OVERLAYS", "cookie,leadin,sticky")


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    # The live server runs in a separate thread from the test session
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "TEST_DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'test_demo_hr.db'}?check_same_thread=False"
    )

    SQLALCHEMY_ENGINE_OPTIONS: dict = {
        "pool_pre_ping": True,
    }

    # Start every session from a clean database
    RESET_DATABASE: bool = True


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False
    SEED_DATA: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the demo app configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])


# -----------------------------------------------------------------------------
# Suite configuration
# -----------------------------------------------------------------------------

class SuiteConfig:
    """
    Settings for the browser regression suite.

    Empty base URLs mean the suite starts the local demo app and points
    every page object at it.
    """

    LOGIN_BASE_URL: str = os.environ.get("HR_LOGIN_BASE_URL", "")
    MARKETING_BASE_URL: str = os.environ.get("HR_MARKETING_BASE_URL", "")
    HR_BASE_URL: str = os.environ.get("HR_APP_BASE_URL", "")

    EMPLOYEE_ID: int = int(os.environ.get("HR_EMPLOYEE_ID", DEFAULT_EMPLOYEE_ID))
    ADMIN_EMAIL: str = os.environ.get("HR_ADMIN_EMAIL", DEFAULT_ADMIN_EMAIL)
    ADMIN_PASSWORD: str = os.environ.get("HR_ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD)

    VIEWPORT: dict = {"width": 1920, "height": 1080}
    ACTION_TIMEOUT_MS: int = 10000
    NAVIGATION_TIMEOUT_MS: int = 30000
    SLOW_MO_MS: int = int(os.environ.get("HR_SLOW_MO_MS", "0"))

    SCREENSHOT_DIR: str = "test-results/screenshots"

    # Overlays the locally started replica renders on every page
    DEMO_OVERLAYS: str = os.environ.get("HR_DEMO_OVERLAYS", "cookie,leadin,sticky")


class LocalSuiteConfig(SuiteConfig):
    """Drive the demo app started by the test session."""


class StagingSuiteConfig(SuiteConfig):
    """Drive the hosted staging environment."""

    LOGIN_BASE_URL: str = os.environ.get(
        "HR_LOGIN_BASE_URL", "https://login.breathehrstaging.com"
    )
    MARKETING_BASE_URL: str = os.environ.get(
        "HR_MARKETING_BASE_URL", "https://www.breathehrstaging.com"
    )
    HR_BASE_URL: str = os.environ.get(
        "HR_APP_BASE_URL", "https://hr.breathehrstaging.com"
    )
    SLOW_MO_MS: int = int(os.environ.get("HR_SLOW_MO_MS", "100"))


suite_config = {
    "local": LocalSuiteConfig,
    "staging": StagingSuiteConfig,
    "default": LocalSuiteConfig,
}


def get_suite_config(env: str | None = None) -> type[SuiteConfig]:
    """
    Get the suite configuration class.

    Args:
        env: Suite environment name (local, staging).
             If None, uses HR_SUITE_ENV environment variable.

    Returns:
        Suite configuration class for the environment.
    """
    if env is None:
        env = os.environ.get("HR_SUITE_ENV", "local")
    return suite_config.get(env, suite_config["default"])
