"""BaseService — shared foundation for gradectl services.

Every service receives the frozen :class:`GradeSettings` at construction
time and builds whatever collaborators it needs from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gradectl.config.settings import GradeSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class GradeService(BaseService):
            def evaluate(self, score: float) -> ServiceResult:
                ...
    """

    def __init__(self, settings: GradeSettings | None = None) -> None:
        if settings is None:
            from gradectl.config.settings import GradeSettings

            settings = GradeSettings()
        self._settings = settings

    @property
    def settings(self) -> GradeSettings:
        return self._settings
