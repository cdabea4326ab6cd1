from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler
import structlog

from ..domain.errors import SchedulerError

logger = structlog.get_logger()


def scheduler_exception_handler(exc, context):
    if isinstance(exc, SchedulerError):
        logger.warning("scheduler_error", error=str(exc), error_type=type(exc).__name__)
        return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
    return exception_handler(exc, context)
