"""
Regression suite for the HR web application.

This package contains:
- unit/: interaction helpers against in-process fakes, demo site via the Flask test client
- integration/: interaction helpers against real Chromium pages
- e2e/: login, sign-up and profile journeys driven through page objects
- smoke/: plain HTTP checks that the site is being served
"""
