"""
JSON endpoints for the demo HR site.

Endpoints:
    GET /api/health - Readiness probe polled before browser tests start
"""

from flask import Blueprint, jsonify
from sqlalchemy import text

from demo_hr import db

api_bp = Blueprint("api", __name__)


@api_bp.route("/health")
def health():
    """Report service and database health."""
    db.session.execute(text("SELECT 1"))
    return jsonify({"status": "healthy", "service": "demo-hr"}), 200
