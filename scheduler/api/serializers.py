from rest_framework import serializers

from ..data.models import Card
from ..domain.enums import Rating


class ReviewInSerializer(serializers.Serializer):
    card_id = serializers.CharField(max_length=64)
    rating = serializers.ChoiceField(choices=[r.value for r in Rating])


class CardStateSerializer(serializers.Serializer):
    id = serializers.CharField()
    folder_id = serializers.CharField()
    next_review_time = serializers.IntegerField()
    interval = serializers.FloatField()
    repetition = serializers.IntegerField()
    ease_factor = serializers.FloatField()


class CardSerializer(serializers.ModelSerializer):
    folder_id = serializers.CharField(read_only=True)

    class Meta:
        model = Card
        fields = [
            "id", "folder_id", "front_type", "front_content", "back_type", "back_content",
            "phonetic", "tags", "next_review_time", "interval", "repetition", "ease_factor",
        ]
        read_only_fields = [
            "id", "next_review_time", "interval", "repetition", "ease_factor",
        ]
