import logging
from typing import Optional

from flask import current_app

from .errors import GENERIC_RETRY_MESSAGE
from .session.analysis_session import AnalysisSession
from ..graphs import run_recipe_analysis
from ..models.analysis import AppState

logger = logging.getLogger(__name__)


class AnalysisService:
    """Runs one photo analysis and applies the outcome to a session"""

    def __init__(self, api_key: Optional[str], model: str):
        self.api_key = api_key
        self.model = model

    @classmethod
    def from_app(cls, app=None) -> "AnalysisService":
        app = app or current_app
        return cls(app.config.get('GEMINI_API_KEY'), app.config['DEFAULT_MODEL'])

    def analyze(self, session: AnalysisSession, model: Optional[str] = None) -> AppState:
        """
        IDLE -> LOADING -> SUCCESS | ERROR for the session's current image.
        Raises StateTransitionError / AnalysisInProgressError before anything is sent.
        Returns the session state after the attempt (a stale reply leaves it untouched).
        """
        token = session.begin_analysis()
        image = session.image
        model = model or self.model

        try:
            res = run_recipe_analysis(image, self.api_key, model)
        except Exception:
            logger.exception("[analysis] pipeline exception (session %s)", session.session_id[:8])
            session.fail(token, GENERIC_RETRY_MESSAGE)
            return session.state

        result = res.get("result")
        if result is not None:
            # content errors arrive as a result with `error` set
            applied = session.complete(token, result)
        else:
            logger.warning("[analysis] failed code=%s", res.get("error_code"))
            applied = session.fail(token, res.get("error") or GENERIC_RETRY_MESSAGE)

        if applied:
            logger.info("[analysis] session %s -> %s in %s ms",
                        session.session_id[:8], session.state.value, res.get("total_ms"))
        return session.state
