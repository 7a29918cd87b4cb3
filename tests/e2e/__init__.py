"""
Browser journeys against the HR site.

This package contains Playwright-based browser tests and demonstrates:
- Page Object Model (POM) pattern
- Ordered selector fallbacks for screens that change between releases
- Overlay suppression before and after every interaction
- User flow testing
"""
