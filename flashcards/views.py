from django.core.management import CommandError, call_command
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
import structlog

from .serializers import SeedInSerializer

logger = structlog.get_logger()


@api_view(["POST"])
def initialize_data(request):
    s = SeedInSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    file_name = s.validated_data["file"]
    reset = s.validated_data["reset"]

    logger.info("seed_requested", file=file_name, reset=reset)
    try:
        call_command("seed_data", file=file_name, reset=reset)
    except CommandError as e:
        return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return Response(
        {"message": f"Data initialized successfully from {file_name}"},
        status=status.HTTP_200_OK,
    )
