"""
Base Service
=============

Foundation for the engine's service classes: a per-module logger and a
millisecond timer.
"""

import logging
import time


class BaseService:
    """
    Service classes inherit from this.

    Subclass example::

        class IntentEnhancer(BaseService):
            def enhance(self, query, local_intent):
                self.logger.info("Enhancing %r", query)

    Features:
        - ``cls.logger``: logger named after the subclass module
        - ``cls.elapsed_ms(start)``: milliseconds since a ``time.perf_counter()`` mark
    """

    logger: logging.Logger = logging.getLogger(__name__)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Each subclass gets its own logger named after its module
        cls.logger = logging.getLogger(cls.__module__)

    @staticmethod
    def elapsed_ms(start: float) -> float:
        """Milliseconds since ``start`` (a ``time.perf_counter()`` value)."""
        return round((time.perf_counter() - start) * 1000, 2)
