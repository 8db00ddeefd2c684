"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import structlog
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from hotels.authentication import BearerTokenAuthentication
from hotels.domain import UserId
from hotels.domain.errors import DomainError, ErrorCode
from hotels.handlers.serializers import HotelSerializer, HotelWithRoomsSerializer
from hotels.services import HotelService
from hotels.stores import DjangoEnrollmentStore, DjangoHotelStore, DjangoTicketStore

logger = structlog.get_logger(__name__)

STATUS_BY_ERROR_CODE = {
    ErrorCode.ENROLLMENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.HOTEL_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PAYMENT_REQUIRED: status.HTTP_402_PAYMENT_REQUIRED,
}


def build_hotel_service() -> HotelService:
    return HotelService(
        enrollment_store=DjangoEnrollmentStore(),
        ticket_store=DjangoTicketStore(),
        hotel_store=DjangoHotelStore(),
    )


def error_response(error: Exception) -> Response:
    """Translate a service failure into a response without leaking internals."""
    if isinstance(error, DomainError):
        return Response(
            {"code": error.code.value, "detail": error.message},
            status=STATUS_BY_ERROR_CODE[error.code],
        )
    logger.exception("hotel_request_failed", error_type=type(error).__name__)
    return Response(
        {"code": "BAD_REQUEST", "detail": "Bad request"},
        status=status.HTTP_400_BAD_REQUEST,
    )


class HotelListView(APIView):
    """Handler for GET /hotels"""

    authentication_classes = [BearerTokenAuthentication]
    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        try:
            hotels = build_hotel_service().get_hotels(UserId(request.user.pk))
        except Exception as error:
            return error_response(error)
        return Response(HotelSerializer(hotels, many=True).data)


class HotelDetailView(APIView):
    """Handler for GET /hotels/{hotel_id}"""

    authentication_classes = [BearerTokenAuthentication]
    permission_classes = [IsAuthenticated]

    def get(self, request: Request, hotel_id: str) -> Response:
        try:
            hotels = build_hotel_service().get_hotel_rooms(hotel_id)
        except Exception as error:
            return error_response(error)
        return Response(HotelWithRoomsSerializer(hotels, many=True).data)
