import os

from rest_framework import serializers


class SeedInSerializer(serializers.Serializer):
    file = serializers.CharField(max_length=200, default="SEED_DATA.json")
    reset = serializers.BooleanField(default=False)

    def validate_file(self, value):
        # Only files shipped next to the seed command may be loaded over HTTP
        if os.path.basename(value) != value or value in (".", ".."):
            raise serializers.ValidationError("Expected a bare file name.")
        return value
