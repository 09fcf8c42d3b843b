from django.core.validators import ProhibitNullCharactersValidator
from rest_framework import serializers

from .models import FilterCriteria
from .utils import build_record


class PropertiesSerializer(serializers.Serializer):
    length = serializers.IntegerField()
    is_palindrome = serializers.BooleanField()
    unique_characters = serializers.IntegerField()
    word_count = serializers.IntegerField()
    sha256_hash = serializers.CharField()
    character_frequency_map = serializers.DictField(child=serializers.IntegerField())


class StringRecordSerializer(serializers.Serializer):
    """Wire representation of a stored record."""
    id = serializers.CharField(read_only=True)
    value = serializers.CharField(read_only=True)
    properties = PropertiesSerializer(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class StrictCharField(serializers.CharField):
    """CharField that refuses numbers instead of coercing them to text.

    Any text is analyzable, so NUL characters are accepted too.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.validators = [
            validator for validator in self.validators
            if not isinstance(validator, ProhibitNullCharactersValidator)
        ]

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        return super().to_internal_value(data)


class StringAnalyzeSerializer(serializers.Serializer):
    # whitespace is part of the analyzed value, keep it verbatim
    value = StrictCharField(allow_blank=True, trim_whitespace=False)

    def validate_value(self, value):
        try:
            value.encode('utf-8')
        except UnicodeEncodeError:
            raise serializers.ValidationError("Value must be valid UTF-8 text.")
        return value

    def create(self, validated_data):
        # StringAlreadyExists propagates to the view, which answers 409
        store = self.context['store']
        record = build_record(validated_data['value'])
        return store.create(record)


class FilterQuerySerializer(serializers.Serializer):
    """Validates the query parameters of GET /strings."""
    is_palindrome = serializers.BooleanField(required=False)
    min_length = serializers.IntegerField(required=False, min_value=0)
    max_length = serializers.IntegerField(required=False, min_value=0)
    word_count = serializers.IntegerField(required=False, min_value=0)
    # length is checked by filters.validate_criteria so the error is reported
    # the same way for every entry point
    contains_character = StrictCharField(
        required=False, allow_blank=True, trim_whitespace=False)

    def to_criteria(self):
        return FilterCriteria(**self.validated_data)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    details = serializers.JSONField(required=False)


class StringListResponseSerializer(serializers.Serializer):
    data = StringRecordSerializer(many=True)
    count = serializers.IntegerField()
    filters_applied = serializers.DictField()


class InterpretedQuerySerializer(serializers.Serializer):
    original = serializers.CharField()
    parsed_filters = serializers.DictField()


class NaturalLanguageResponseSerializer(serializers.Serializer):
    data = StringRecordSerializer(many=True)
    count = serializers.IntegerField()
    interpreted_query = InterpretedQuerySerializer()
