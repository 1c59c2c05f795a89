from flask import Blueprint, render_template, redirect, url_for
import logging

logger = logging.getLogger(__name__)

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    return redirect(url_for('lists.index'))


@main_bp.app_errorhandler(404)
def page_not_found(e):
    return render_template('errors/404.html'), 404


@main_bp.app_errorhandler(500)
def internal_error(e):
    logger.exception("Unhandled error", exc_info=getattr(e, 'original_exception', e))
    return render_template('errors/500.html'), 500
