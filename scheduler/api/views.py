from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from ..data.models import Card
from ..domain.enums import Action, RATING_LABELS
from ..services.cards import create_card, folder_stats
from ..services.reviews import record_review, start_session
from ..utils.time import to_cst_iso
from .serializers import CardSerializer, CardStateSerializer, ReviewInSerializer

base_logger = structlog.get_logger()


class ReviewView(views.APIView):
    def post(self, request):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        card_id = s.validated_data["card_id"]
        outcome = record_review(card_id, s.validated_data["rating"])

        body = {
            "card_id": outcome.card_id,
            "action": outcome.action.value,
            "rating": outcome.rating.value,
            "rating_label": RATING_LABELS[outcome.rating],
        }
        if outcome.action is Action.UPDATE:
            body["card"] = CardStateSerializer(outcome.card).data
            body["next_review_cst"] = to_cst_iso(outcome.card.next_review_time)

        logger.info(
            "review_api_response",
            card_id=outcome.card_id,
            rating=outcome.rating.value,
            action=outcome.action.value,
            status=status.HTTP_200_OK,
        )
        return Response(body, status=status.HTTP_200_OK)


class DueCardsView(views.APIView):
    def get(self, request, folder_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        session = start_session(folder_id)
        order = session.card_ids()
        by_id = Card.objects.in_bulk(order)
        cards = [by_id[card_id] for card_id in order if card_id in by_id]

        logger.info(
            "due_cards_api_response",
            folder_id=folder_id,
            card_count=len(cards),
        )
        return Response(
            {
                "folder_id": folder_id,
                "remaining": session.remaining_count(),
                "cards": CardSerializer(cards, many=True).data,
            }
        )


class FolderStatsView(views.APIView):
    def get(self, request, folder_id):
        return Response({"folder_id": folder_id, **folder_stats(folder_id)})


class FolderCardsView(views.APIView):
    def post(self, request, folder_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = CardSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        card = create_card(folder_id, **s.validated_data)

        logger.info("card_api_created", card_id=card.id, folder_id=folder_id)
        return Response(CardSerializer(card).data, status=status.HTTP_201_CREATED)
