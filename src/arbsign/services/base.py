"""BaseService — shared foundation for arbsign services.

Every service receives a :data:`~arbsign.domain.parsing.ConfigSource` at
construction time and never reads the process environment itself.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from arbsign.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from arbsign.domain.errors import OpportunityError
    from arbsign.domain.parsing import ConfigSource

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class SigningService(BaseService):
            def sign(self) -> ServiceResult:
                try:
                    ...
                except OpportunityError as exc:
                    return self._failure("sign_opportunity", exc)
    """

    def __init__(self, source: ConfigSource) -> None:
        self._source = source

    def _failure(self, op: str, exc: OpportunityError) -> ServiceResult:
        """Convert a pipeline error into a failed result, logging it once."""
        logger.info("%s aborted: %s [%s]", op, exc.message, exc.code)
        return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc))
