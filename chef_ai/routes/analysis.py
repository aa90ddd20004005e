import logging
from flask import Blueprint, request, jsonify, redirect, url_for, current_app, flash, session as flask_session
from werkzeug.exceptions import RequestEntityTooLarge

from ..services.analysis_service import AnalysisService
from ..services.errors import StateTransitionError, AnalysisInProgressError
from ..services.session.analysis_session import AnalysisSession
from ..utils.helpers import gather_image, upload_to_data_url

logger = logging.getLogger(__name__)

analysis_bp = Blueprint('analysis', __name__)

BAD_IMAGE_MESSAGE = "That file is not a supported photo. Please upload a JPG, PNG, GIF or WEBP image."


def current_session():
    """AnalysisSession for this browser, keyed by the signed session cookie"""
    registry = current_app.extensions["chef_ai.sessions"]
    sid, sess = registry.get_or_create(flask_session.get("sid"))
    flask_session["sid"] = sid
    return sess


def peek_session():
    """Existing session for this browser, or a blank one that is not registered"""
    registry = current_app.extensions["chef_ai.sessions"]
    return registry.get(flask_session.get("sid")) or AnalysisSession()


def _from_page() -> bool:
    return request.args.get("ui") == "1" or request.form.get("ui") == "1"


def _respond(sess, status: int = 200):
    if _from_page():
        return redirect(url_for("ui.index"))
    snap = sess.snapshot(include_image=False)
    return jsonify(snap.model_dump(mode="json")), status


def _error(sess, code: str, msg: str, status: int, from_page=None):
    if from_page is None:
        from_page = _from_page()
    if from_page:
        flash(msg, "error")
        return redirect(url_for("ui.index"))
    return jsonify({"error": code, "msg": msg, "state": sess.state.value}), status


@analysis_bp.app_errorhandler(RequestEntityTooLarge)
def upload_too_large(e):
    limit_mb = current_app.config["MAX_CONTENT_LENGTH"] // (1024 * 1024)
    logger.info("[upload] rejected request over %sMB", limit_mb)
    msg = f"That photo is too large. Please choose one under {limit_mb}MB."
    # the body is over the limit, so only the query string can say where the post came from
    return _error(peek_session(), "too_large", msg, 413, from_page=request.args.get("ui") == "1")


@analysis_bp.post("/upload")
def upload():
    """Load a photo into the session (-> IDLE, clears prior result/error)"""
    sess = current_session()
    f = gather_image(request.files)
    if f is None:
        return _error(sess, "missing_file", "Please choose a photo to upload.", 400)

    try:
        data_url = upload_to_data_url(f)
    except ValueError as ve:
        logger.info("[upload] rejected %s: %s", f.filename, ve)
        return _error(sess, "bad_image", BAD_IMAGE_MESSAGE, 400)

    sess.load_image(data_url)
    return _respond(sess)


@analysis_bp.post("/analyze")
def analyze():
    """Run the analysis for the loaded photo"""
    sess = current_session()
    model = request.form.get("model") or request.args.get("model")
    try:
        AnalysisService.from_app().analyze(sess, model=model)
    except AnalysisInProgressError as e:
        return _error(sess, e.code, e.user_message, 409)
    except StateTransitionError as e:
        return _error(sess, e.code, e.user_message, 400)
    return _respond(sess)


@analysis_bp.post("/reset")
def reset():
    """Clear image, result and error (-> IDLE)"""
    sess = current_session()
    sess.reset()
    return _respond(sess)


@analysis_bp.get("/state")
def state():
    """Current session snapshot (image omitted)"""
    return _respond(peek_session())
