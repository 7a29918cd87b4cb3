"""
Authentication and landing page routes.

Routes:
    GET/POST /login            - Login form
    GET/POST /en-gb/sign-up    - Company sign-up form
    GET      /welcome          - Post sign-up landing page
    GET      /dashboard        - Post login landing page
    GET      /forgot-password  - Password reset request page
    GET      /logout           - Clear the session
"""

import logging
from functools import wraps

from flask import (
    Blueprint,
    flash,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from demo_hr import db
from demo_hr.models import User
from demo_hr.validation import (
    EMPLOYEE_COUNTS,
    HEAR_ABOUT_OPTIONS,
    validate_login,
    validate_signup,
)

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


def login_required(view):
    """Redirect anonymous visitors to the login page."""

    @wraps(view)
    def wrapped(*args, **kwargs):
        if not session.get("user_id"):
            return redirect(url_for("auth.login"))
        return view(*args, **kwargs)

    return wrapped


@auth_bp.route("/")
def index():
    return redirect(url_for("auth.login"))


@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    """Render the login form and authenticate submissions."""
    if request.method == "GET":
        return render_template("login.html", form={}, errors={})

    form = request.form.to_dict()
    errors = validate_login(form)
    if errors:
        logger.info("POST /login - validation failed: %s", sorted(errors))
        return render_template("login.html", form=form, errors=errors), 422

    stmt = db.select(User).filter_by(email=form["email"].strip().lower())
    user = db.session.execute(stmt).scalar_one_or_none()
    if user is None or not user.check_password(form["password"]):
        logger.info("POST /login - bad credentials for %s", form["email"])
        return render_template(
            "login.html",
            form=form,
            errors={},
            alert="Incorrect email or password",
        ), 401

    session["user_id"] = user.id
    logger.info("POST /login - user %s logged in", user.id)
    return redirect(url_for("auth.dashboard"))


@auth_bp.route("/en-gb/sign-up", methods=["GET", "POST"])
def signup():
    """Render the sign-up form and create an account on valid submissions."""
    context = {"employee_counts": EMPLOYEE_COUNTS, "hear_about_options": HEAR_ABOUT_OPTIONS}
    if request.method == "GET":
        return render_template("signup.html", form={}, errors={}, **context)

    form = request.form.to_dict()
    errors = validate_signup(form)

    email = form.get("email", "").strip().lower()
    if not errors and db.session.execute(
        db.select(User).filter_by(email=email)
    ).scalar_one_or_none():
        errors["email"] = "An account with this email address already exists"

    if errors:
        logger.info("POST /en-gb/sign-up - validation failed: %s", sorted(errors))
        return render_template(
            "signup.html",
            form=form,
            errors=errors,
            alert="Please correct the highlighted fields",
            **context,
        ), 422

    user = User(
        email=email,
        first_name=form["first_name"],
        last_name=form["last_name"],
        company_name=form["company_name"],
    )
    user.set_password(form["password"])
    db.session.add(user)
    db.session.commit()

    session["user_id"] = user.id
    logger.info("POST /en-gb/sign-up - created account %s", user.id)
    return redirect(url_for("auth.welcome"))


@auth_bp.route("/welcome")
@login_required
def welcome():
    return render_template("welcome.html")


@auth_bp.route("/dashboard")
@login_required
def dashboard():
    user = db.session.get(User, session["user_id"])
    return render_template("dashboard.html", user=user)


@auth_bp.route("/forgot-password")
def forgot_password():
    return render_template("forgot_password.html")


@auth_bp.route("/logout")
def logout():
    session.clear()
    flash("You have been signed out", "success")
    return redirect(url_for("auth.login"))
