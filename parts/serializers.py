"""
Parts Serializers

Validates search requests. Responses are built by the engine's own
``to_dict`` methods.
"""

from rest_framework import serializers

from partsform.config import config

from .query_sanitizer import MAX_QUERY_LENGTH


class PartRecordSerializer(serializers.Serializer):
    """
    Loose shape check for one candidate record.

    Only documents the fields the filter pipeline reads; unknown keys are
    kept and every field may be missing or null.
    """
    partNumber = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    brand = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    supplier = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    category = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    subcategory = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    origin = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    condition = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class SearchRequestSerializer(serializers.Serializer):
    """Body of ``POST /api/v1/parts/search/``."""
    query = serializers.CharField(max_length=MAX_QUERY_LENGTH * 2, trim_whitespace=True)
    parts = serializers.ListField(
        child=serializers.DictField(),
        required=False,
        default=list,
        max_length=config.search.max_candidates,
    )

    def validate_parts(self, value):
        # Shape-check without coercing: prices and quantities stay as sent
        for index, record in enumerate(value):
            record_serializer = PartRecordSerializer(data=record)
            if not record_serializer.is_valid():
                raise serializers.ValidationError({index: record_serializer.errors})
        return value
