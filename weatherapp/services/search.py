"""Search controller that bridges background weather lookups into UI state."""
from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from threading import Lock
from typing import Callable, List, Optional

from ..abstractions import WeatherClient
from ..entities import SearchState, WeatherRecord
from ..providers.base import WeatherError


Listener = Callable[[SearchState], None]
Dispatch = Callable[[Callable[[], None]], None]


def _run_inline(fn: Callable[[], None]) -> None:
    fn()


class WeatherSearchController:
    """Own the search state and run lookups off the presentation thread.

    Completions are handed to ``dispatch`` before they touch the state, so a
    GUI adapter can pass something like ``lambda fn: widget.after(0, fn)`` to
    apply them on its own thread. Every search gets a generation number and
    only the completion of the most recently issued search is applied; older
    completions are dropped.
    """

    def __init__(
        self,
        client: WeatherClient,
        *,
        dispatch: Optional[Dispatch] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        self._client = client
        self._dispatch = dispatch or _run_inline
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=2, thread_name_prefix="weather-search")
        self._state = SearchState()
        self._listeners: List[Listener] = []
        self._generation = 0
        self._lock = Lock()
        self._log = logging.getLogger(self.__class__.__name__)

    # State --------------------------------------------------------------
    @property
    def state(self) -> SearchState:
        with self._lock:
            return self._state.snapshot()

    @property
    def query(self) -> str:
        return self._state.query

    @query.setter
    def query(self, value: str) -> None:
        with self._lock:
            self._state.query = value or ""
            snapshot = self._state.snapshot()
        self._notify(snapshot)

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def weather(self) -> Optional[WeatherRecord]:
        return self._state.weather

    @property
    def last_error(self) -> Optional[WeatherError]:
        return self._state.last_error

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for state snapshots; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Actions ------------------------------------------------------------
    def trigger_search(self) -> Optional[Future]:
        city = self._state.query.strip()
        if not city:
            return None

        with self._lock:
            self._generation += 1
            generation = self._generation
            self._state.is_loading = True
            snapshot = self._state.snapshot()
        self._notify(snapshot)

        self._log.info("Searching weather for %r", city)
        try:
            future = self._executor.submit(self._client.fetch_weather, city)
        except RuntimeError as exc:
            self._log.error("Could not schedule weather lookup: %s", exc)
            error = WeatherError("search could not be scheduled")
            error.__cause__ = exc
            self._apply(generation, None, error)
            return None
        future.add_done_callback(lambda done: self._dispatch(lambda: self._complete(generation, done)))
        return future

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False)

    # Helpers ------------------------------------------------------------
    def _complete(self, generation: int, future: Future) -> None:
        error = future.exception()
        if error is None:
            self._apply(generation, future.result(), None)
        else:
            self._apply(generation, None, self._as_weather_error(error))

    def _apply(self, generation: int, record: Optional[WeatherRecord], error: Optional[WeatherError]) -> None:
        with self._lock:
            if generation != self._generation:
                self._log.debug("Dropping stale result for search #%s", generation)
                return
            self._state.is_loading = False
            self._state.weather = record
            self._state.last_error = error
            snapshot = self._state.snapshot()
        self._notify(snapshot)

    def _as_weather_error(self, error: BaseException) -> WeatherError:
        if isinstance(error, WeatherError):
            self._log.warning("Weather lookup failed: %s", error)
            return error
        self._log.error("Unexpected error during weather lookup", exc_info=error)
        wrapped = WeatherError(f"unexpected error: {error!r}")
        wrapped.__cause__ = error
        return wrapped

    def _notify(self, snapshot: SearchState) -> None:
        for listener in list(self._listeners):
            listener(snapshot)


__all__ = ["WeatherSearchController"]
