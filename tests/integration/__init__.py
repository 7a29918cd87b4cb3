"""
Interaction helper tests against a real browser.

Tests render small documents with ``page.set_content`` and demonstrate:
- Visibility-aware selector fallback
- Scroll compensation under a sticky header
- Popup dismissal and its safeguards
- Native and server-rendered validation message detection
"""
