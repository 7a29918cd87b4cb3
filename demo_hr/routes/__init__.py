"""
Routes package for the demo HR site.

This package contains route blueprints:
- api: health endpoint used to wait for the live server
- auth: login, sign-up and post-login landing pages
- profile: employee profile overview and section edit forms
"""
