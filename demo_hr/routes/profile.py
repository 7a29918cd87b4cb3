"""
Employee profile routes.

Routes:
    GET  /employees/<id>                          - Profile overview with tabs
    GET  /employees/<id>/profile/<section>/edit   - Section edit form
    POST /employees/<id>/profile/<section>/edit   - Save a section
"""

import logging

from flask import Blueprint, abort, flash, redirect, render_template, request, url_for

from demo_hr import db
from demo_hr.models import Employee
from demo_hr.profile_fields import SECTIONS, validate_section
from demo_hr.routes.auth import login_required

logger = logging.getLogger(__name__)

profile_bp = Blueprint("profile", __name__)


def get_employee_or_404(employee_id: int) -> Employee:
    """Fetch employee by ID or raise 404."""
    employee = db.session.get(Employee, employee_id)
    if not employee:
        abort(404)
    return employee


def read_section_form(section: str) -> dict:
    """Collect a section's values from the submitted form."""
    values = {}
    for field in SECTIONS[section]:
        key = f"employee[{field.name}]"
        if field.kind == "checkbox":
            values[field.name] = key in request.form
        else:
            values[field.name] = request.form.get(key, "")
    return values


@profile_bp.route("/employees/<int:employee_id>")
@login_required
def overview(employee_id: int):
    employee = get_employee_or_404(employee_id)
    return render_template("employee.html", employee=employee, sections=SECTIONS)


@profile_bp.route(
    "/employees/<int:employee_id>/profile/<section>/edit", methods=["GET", "POST"]
)
@login_required
def edit_section(employee_id: int, section: str):
    """Render or save one profile section."""
    if section not in SECTIONS:
        abort(404)
    employee = get_employee_or_404(employee_id)

    if request.method == "GET":
        return render_template(
            "profile_edit.html",
            employee=employee,
            section=section,
            fields=SECTIONS[section],
            values=employee.section(section),
            errors={},
        )

    values = read_section_form(section)
    errors = validate_section(section, values)
    if errors:
        logger.info("Profile %s/%s rejected: %s", employee_id, section, sorted(errors))
        return render_template(
            "profile_edit.html",
            employee=employee,
            section=section,
            fields=SECTIONS[section],
            values=values,
            errors=errors,
        ), 422

    employee.update_section(section, values)
    db.session.commit()
    logger.info("Profile %s/%s updated", employee_id, section)
    flash("Profile updated", "success")
    return redirect(url_for("profile.overview", employee_id=employee_id))
