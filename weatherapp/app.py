"""Tk front-end that renders the search state and triggers lookups."""
from __future__ import annotations

import logging
import tkinter as tk

from weatherapp.entities import SearchState
from weatherapp.providers.base import RequestConfig
from weatherapp.providers.weatherapi import WeatherAPIClient
from weatherapp.services.search import WeatherSearchController
from weatherapp.settings import configure_logging, load_settings
from weatherapp.views import describe_state


logger = logging.getLogger(__name__)


class WeatherWindow(tk.Tk):
    def __init__(self, controller_factory) -> None:
        super().__init__()
        self.title("Weather Search")
        self.controller: WeatherSearchController = controller_factory(lambda fn: self.after(0, fn))

        self.city_var = tk.StringVar()
        self.city_var.trace_add("write", lambda *_: setattr(self.controller, "query", self.city_var.get()))

        bar = tk.Frame(self, padx=12, pady=12)
        bar.pack(fill="x")
        entry = tk.Entry(bar, textvariable=self.city_var)
        entry.pack(side="left", fill="x", expand=True)
        entry.bind("<Return>", lambda _event: self._search())
        tk.Button(bar, text="Search", command=self._search).pack(side="left", padx=(8, 0))

        self.status = tk.Label(self, justify="center", padx=12, pady=12)
        self.status.pack(fill="both", expand=True)

        self.controller.subscribe(self._render)
        self._render(self.controller.state)
        self.protocol("WM_DELETE_WINDOW", self._on_close)
        entry.focus_set()

    def _search(self) -> None:
        self.controller.trigger_search()

    def _render(self, state: SearchState) -> None:
        self.status.configure(text=describe_state(state))

    def _on_close(self) -> None:
        self.controller.close()
        self.destroy()


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Starting weather app against %s", settings.base_url)

    client = WeatherAPIClient(
        api_key=settings.api_key,
        base_url=settings.base_url,
        request_config=RequestConfig(timeout=settings.timeout),
    )
    window = WeatherWindow(lambda dispatch: WeatherSearchController(client, dispatch=dispatch))
    window.mainloop()


if __name__ == "__main__":
    main()
