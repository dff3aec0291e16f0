"""BaseService — shared foundation for drillkit services.

Services receive the frozen :class:`DrillSettings` at construction time
and read their tunables (rating threshold, square delay) from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from drillkit.config.settings import DrillSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class DrillService(BaseService):
            def filter_by_rating(self, items) -> ServiceResult:
                threshold = self._settings.ratings.threshold
                ...
    """

    def __init__(self, settings: DrillSettings) -> None:
        self._settings = settings
