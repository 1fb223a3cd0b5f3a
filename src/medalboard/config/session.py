"""Session-scoped ranking state with an explicit change hook."""

from __future__ import annotations

import logging
import urllib.parse
from typing import Callable, List

from .query import decode_config, to_query_string
from .ranking import DEFAULT_CONFIG, RankingConfig


logger = logging.getLogger(__name__)

ConfigListener = Callable[[RankingConfig, str], None]


class RankingSession:
    """Holds the current config and tells subscribers when it changes.

    Listeners receive the new config and its query string, e.g. to mirror it
    into the address bar.
    """

    def __init__(self, config: RankingConfig = DEFAULT_CONFIG, defaults: RankingConfig = DEFAULT_CONFIG) -> None:
        self._config = config
        self.defaults = defaults
        self._listeners: List[ConfigListener] = []

    @classmethod
    def from_url(cls, url: str, defaults: RankingConfig = DEFAULT_CONFIG) -> "RankingSession":
        query = urllib.parse.urlsplit(url).query
        params = dict(urllib.parse.parse_qsl(query, keep_blank_values=True))
        return cls(decode_config(params, defaults), defaults)

    @property
    def config(self) -> RankingConfig:
        return self._config

    @property
    def query_string(self) -> str:
        return to_query_string(self._config, self.defaults)

    def subscribe(self, listener: ConfigListener) -> Callable[[], None]:
        """Register ``listener``; the returned callable unregisters it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, **changes: object) -> RankingConfig:
        new_config = self._config.with_changes(**changes)
        if new_config == self._config:
            return self._config
        self._config = new_config
        query = self.query_string
        logger.debug("Ranking config changed to %s (query=%r)", new_config, query)
        for listener in list(self._listeners):
            listener(new_config, query)
        return new_config
