from flask import Blueprint, render_template, redirect, url_for, flash, request, session
from flask_login import login_user, logout_user, current_user
from todos.forms import SignInForm
from todos.models import SignedInUser
from todos.store import get_store
import logging

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


def _safe_next_page(next_page):
    """Only follow relative redirects back into this site."""
    if next_page and next_page.startswith("/") and not next_page.startswith("//"):
        return next_page
    return None


@auth_bp.route("/signin", methods=["GET", "POST"])
def signin():
    # Redirect if already signed in
    if current_user.is_authenticated:
        return redirect(url_for("lists.index"))

    form = SignInForm()
    if request.method == "GET":
        flash("Please sign in", "info")
        return render_template("auth/signin.html", form=form)

    if form.validate_on_submit():
        username = form.username.data
        if get_store().authenticate(username, form.password.data):
            session.permanent = True
            login_user(SignedInUser(username))
            logger.info(f"Successful sign-in for {username}")
            flash("Welcome!", "success")

            next_page = _safe_next_page(request.args.get("next"))
            return redirect(next_page or url_for("lists.index"))

        logger.info(f"Failed sign-in attempt for {username}")

    flash("Invalid credentials.", "error")
    return render_template("auth/signin.html", form=form)


@auth_bp.route("/signout", methods=["POST"])
def signout():
    if current_user.is_authenticated:
        logger.info(f"{current_user.username} signed out")
    logout_user()
    return redirect(url_for("auth.signin"))
