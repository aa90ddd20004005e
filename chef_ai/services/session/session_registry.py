import uuid
import threading
from collections import OrderedDict
from typing import Optional, Tuple

from .analysis_session import AnalysisSession


class SessionRegistry:
    """In-memory map of browser-session id -> AnalysisSession (LRU, nothing persisted)."""

    def __init__(self, max_sessions: int = 32):
        self.max_sessions = max(1, int(max_sessions))
        self._sessions: "OrderedDict[str, AnalysisSession]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, session_id: Optional[str]) -> Optional[AnalysisSession]:
        if not session_id:
            return None
        with self._lock:
            sess = self._sessions.get(session_id)
            if sess is not None:
                self._sessions.move_to_end(session_id)
            return sess

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, AnalysisSession]:
        with self._lock:
            if session_id and session_id in self._sessions:
                self._sessions.move_to_end(session_id)
                return session_id, self._sessions[session_id]
            sid = session_id or uuid.uuid4().hex
            sess = AnalysisSession(sid)
            self._sessions[sid] = sess
            while len(self._sessions) > self.max_sessions:
                self._sessions.popitem(last=False)
            return sid, sess
