"""ActionListener(continuation) 구현체.

Usage:
    >>> listener = ActionListener.wrap(
    ...     lambda df: print(len(df)),
    ...     lambda e: print(f"실패: {e}"),
    ... )
    >>> handler.parse_search_query_input(dataset, listener)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future
from typing import Generic, TypeVar

from core.protocols import ActionListenerProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ActionListener(Generic[T]):
    """두 개의 콜백(성공/실패)으로 만드는 listener."""

    def __init__(
        self,
        on_response: Callable[[T], None],
        on_failure: Callable[[Exception], None],
    ) -> None:
        self._on_response = on_response
        self._on_failure = on_failure

    @classmethod
    def wrap(
        cls,
        on_response: Callable[[T], None],
        on_failure: Callable[[Exception], None],
    ) -> ActionListener[T]:
        return cls(on_response, on_failure)

    def on_response(self, response: T) -> None:
        self._on_response(response)

    def on_failure(self, exc: Exception) -> None:
        self._on_failure(exc)


class FutureActionListener(Generic[T]):
    """결과를 concurrent.futures.Future로 전달하는 listener.

    블로킹 호출자용:
        >>> listener = FutureActionListener()
        >>> handler.parse_search_query_input(dataset, listener)
        >>> df = listener.future.result(timeout=30)
    """

    def __init__(self, future: Future[T] | None = None) -> None:
        self.future: Future[T] = future if future is not None else Future()

    def on_response(self, response: T) -> None:
        self.future.set_result(response)

    def on_failure(self, exc: Exception) -> None:
        self.future.set_exception(exc)


class NotifyOnceListener(Generic[T]):
    """첫 번째 결과만 전달하고 이후 호출은 로그만 남기고 버리는 listener.

    콜백을 두 번 부를 수 있는 클라이언트를 감쌀 때 사용.
    """

    def __init__(self, delegate: ActionListenerProtocol[T]) -> None:
        self._delegate = delegate
        self._lock = threading.Lock()
        self._notified = False

    @property
    def notified(self) -> bool:
        """결과가 이미 전달되었는지 여부."""
        with self._lock:
            return self._notified

    def _acquire(self) -> bool:
        with self._lock:
            if self._notified:
                return False
            self._notified = True
            return True

    def on_response(self, response: T) -> None:
        if not self._acquire():
            logger.warning("이미 완료된 listener에 대한 on_response 호출을 무시합니다.")
            return
        self._delegate.on_response(response)

    def on_failure(self, exc: Exception) -> None:
        if not self._acquire():
            logger.warning(f"이미 완료된 listener에 대한 on_failure 호출을 무시합니다: {exc!r}")
            return
        self._delegate.on_failure(exc)
