from logging import getLogger

from starlette.status import HTTP_404_NOT_FOUND

from bloglist.configs import file_logger
from bloglist.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class EmptyCollectionError(BaseAppError):
    """Raised when a max-style statistic is asked of an empty blog collection."""

    def __init__(self, statistic: str = "statistic") -> None:
        super().__init__(f"Cannot compute {statistic} of an empty blog collection", HTTP_404_NOT_FOUND)
        self.statistic = statistic


analytics_exception_handler = create_exception_handler(logger)
