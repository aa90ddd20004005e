import logging
import threading
from typing import Optional

from ..errors import StateTransitionError, AnalysisInProgressError
from ...models.analysis import AppState, AnalysisResult
from ...models.session import SessionSnapshot, AnalysisOut

logger = logging.getLogger(__name__)


class AnalysisSession:
    """
    Upload -> analyze -> success/error state machine for one browser session.

    Each analysis request gets a token from a monotonic counter. load_image,
    reset and begin_analysis move the counter forward, so a reply that lands
    after any of them no longer matches and is dropped.
    """

    def __init__(self, session_id: str = ""):
        self.session_id = session_id
        self._lock = threading.Lock()
        self._token = 0
        self.state = AppState.IDLE
        self.image: Optional[str] = None
        self.result: Optional[AnalysisResult] = None
        self.error: Optional[str] = None

    @property
    def current_token(self) -> int:
        return self._token

    def load_image(self, data_url: str) -> None:
        with self._lock:
            self._token += 1
            self.image = data_url
            self.result = None
            self.error = None
            self.state = AppState.IDLE

    def begin_analysis(self) -> int:
        with self._lock:
            if not self.image:
                raise StateTransitionError()
            if self.state is AppState.LOADING:
                raise AnalysisInProgressError()
            self._token += 1
            self.error = None
            self.state = AppState.LOADING
            return self._token

    def complete(self, token: int, result: AnalysisResult) -> bool:
        """Apply a finished analysis; False when the token is stale."""
        with self._lock:
            if not self._accepts(token):
                return False
            if result.error:
                self.result = None
                self.error = result.error
                self.state = AppState.ERROR
            else:
                self.result = result
                self.error = None
                self.state = AppState.SUCCESS
            return True

    def fail(self, token: int, message: str) -> bool:
        with self._lock:
            if not self._accepts(token):
                return False
            self.result = None
            self.error = message or "An unexpected error occurred. Please try again."
            self.state = AppState.ERROR
            return True

    def reset(self) -> None:
        with self._lock:
            self._token += 1
            self.image = None
            self.result = None
            self.error = None
            self.state = AppState.IDLE

    def snapshot(self, include_image: bool = True) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                state=self.state,
                has_image=bool(self.image),
                image=self.image if include_image else None,
                result=AnalysisOut.from_result(self.result) if self.result is not None else None,
                error=self.error,
            )

    def _accepts(self, token: int) -> bool:
        if token != self._token or self.state is not AppState.LOADING:
            logger.info("[session %s] discarding stale analysis (token %s, current %s)",
                        self.session_id[:8], token, self._token)
            return False
        return True
