from flask import Blueprint

from .analysis import peek_session
from ..views.render import render_index

ui_bp = Blueprint('ui', __name__)


@ui_bp.get("/")
def index():
    """Main index page"""
    return render_index(peek_session().snapshot())


@ui_bp.get("/health")
def health():
    """Health check endpoint"""
    return {"ok": True}, 200
