"""
Хранилище сессий чатов
Один калькулятор и его карточка результатов на пользователя и чат
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from calculator import PagoMovilCalculator, ResultsCard
from services.ads import ExpiringMessage

logger = logging.getLogger(__name__)

@dataclass
class ChatSession:
    """Состояние чата"""
    card: ResultsCard = field(default_factory=ResultsCard)
    calculator: Optional[PagoMovilCalculator] = None
    # Input message id -> results message id, only for the latest input
    last_input_id: Optional[int] = None
    last_result_id: Optional[int] = None
    install_prompt_shown: bool = False
    interstitial_due: bool = False
    interstitial: Optional[ExpiringMessage] = None
    # Держать на время расчёта и снимка карточки
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def __post_init__(self):
        if self.calculator is None:
            self.calculator = PagoMovilCalculator.for_card(self.card)

    def calculate(self, text: str) -> Tuple[str, bool]:
        """
        Пересчитать сумму и снять карточку под блокировкой сессии

        Returns:
            Results text and whether an interstitial is due
        """
        with self.lock:
            self.calculator.handle_amount_change(text)
            results = self.card.as_text()
            show_ad = self.interstitial_due
            self.interstitial_due = False
        return results, show_ad

    def snapshot(self) -> str:
        with self.lock:
            return self.card.as_text()

    def result_for(self, input_id: int) -> Optional[int]:
        """Results message sent for the given input message, if known"""
        with self.lock:
            if input_id == self.last_input_id:
                return self.last_result_id
            return None

    def remember_result(self, input_id: int, result_id: int):
        with self.lock:
            self.last_input_id = input_id
            self.last_result_id = result_id

class SessionStore:
    """Потокобезопасное хранилище сессий"""

    def __init__(self):
        # {(user_id, chat_id): ChatSession}
        self._sessions: Dict[Tuple[int, int], ChatSession] = {}
        self._lock = threading.Lock()
        self._listeners = []

    def on_new_session(self, callback):
        """Callback(user_id, chat_id, session) run once per new session"""
        self._listeners.append(callback)

    def get(self, user_id: int, chat_id: int) -> ChatSession:
        """Получить или создать сессию"""
        key = (user_id, chat_id)
        created = False
        with self._lock:
            session = self._sessions.get(key)
            if session is None:
                session = ChatSession()
                self._sessions[key] = session
                created = True

        if created:
            logger.info(f"New calculator session for user {user_id} in chat {chat_id}")
            for callback in self._listeners:
                callback(user_id, chat_id, session)
        return session

    def reset(self, user_id: int, chat_id: int):
        """Удалить сессию пользователя"""
        with self._lock:
            session = self._sessions.pop((user_id, chat_id), None)
        if session is not None and session.interstitial is not None:
            session.interstitial.cancel()
        logger.info(f"Cleared session for user {user_id} in chat {chat_id}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

# Глобальный экземпляр хранилища
sessions = SessionStore()
