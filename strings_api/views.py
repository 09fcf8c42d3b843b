import logging

from django.http import HttpResponse
from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import StringAnalyzerError
from .filters import filter_records
from .nl_parser import parse_natural_language_query
from .serializers import (
    ErrorResponseSerializer,
    FilterQuerySerializer,
    NaturalLanguageResponseSerializer,
    StringAnalyzeSerializer,
    StringListResponseSerializer,
    StringRecordSerializer,
)
from .store import get_default_store

logger = logging.getLogger(__name__)


def error_response(exc):
    return Response({"error": exc.message}, status=exc.status_code)


class StoreMixin:
    """Gives a view its StringStore. Pass ``store=`` to ``as_view`` to isolate it."""
    store = None

    def get_store(self):
        if self.store is not None:
            return self.store
        return get_default_store()


def index(request):
    return HttpResponse("Hello, World!", content_type="text/plain")


def health(request):
    return HttpResponse("OK", content_type="text/plain")


# POST & GET /strings


class StringAnalyzerView(StoreMixin, APIView):

    @swagger_auto_schema(
        request_body=StringAnalyzeSerializer,
        operation_summary="Analyze and store a new string",
        responses={
            201: StringRecordSerializer,
            400: ErrorResponseSerializer,
            409: ErrorResponseSerializer,
        },
        tags=['Strings'],
    )
    def post(self, request):
        serializer = StringAnalyzeSerializer(
            data=request.data, context={'store': self.get_store()})
        if not serializer.is_valid():
            return Response(
                {"error": "Invalid request body.", "details": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            record = serializer.save()
        except StringAnalyzerError as exc:
            return error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error in %s %s: %s", request.method, request.path, exc)
            return Response({"error": "Internal server error"},
                            status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(StringRecordSerializer(record).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(
        operation_summary="List all analyzed strings",
        manual_parameters=[
            openapi.Parameter(
                "is_palindrome",
                openapi.IN_QUERY,
                description="Filter by palindrome (true/false)",
                type=openapi.TYPE_BOOLEAN,
            ),
            openapi.Parameter(
                "min_length",
                openapi.IN_QUERY,
                description="Minimum string length in bytes",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "max_length",
                openapi.IN_QUERY,
                description="Maximum string length in bytes",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "word_count",
                openapi.IN_QUERY,
                description="Exact word count",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "contains_character",
                openapi.IN_QUERY,
                description="Filter strings that contain this single character",
                type=openapi.TYPE_STRING,
            ),
        ],
        responses={200: StringListResponseSerializer, 400: ErrorResponseSerializer},
        tags=['Strings'],
    )
    def get(self, request):
        # .dict() so that absent booleans stay absent instead of reading as False
        params = FilterQuerySerializer(data=request.query_params.dict())
        if not params.is_valid():
            return Response(
                {"error": "Invalid query parameters.", "details": params.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        criteria = params.to_criteria()

        try:
            records = filter_records(self.get_store().list_all(), criteria)
        except StringAnalyzerError as exc:
            return error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error in %s %s: %s", request.method, request.path, exc)
            return Response({"error": "Internal server error"},
                            status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({
            "data": StringRecordSerializer(records, many=True).data,
            "count": len(records),
            "filters_applied": criteria.as_dict(),
        }, status=status.HTTP_200_OK)


# GET & DELETE /strings/{string_value}


class StringDetailView(StoreMixin, APIView):

    @swagger_auto_schema(
        operation_summary="Fetch an analyzed string by its value",
        responses={200: StringRecordSerializer, 404: ErrorResponseSerializer},
        tags=['Strings'],
    )
    def get(self, request, value):
        try:
            record = self.get_store().get_by_value(value)
        except StringAnalyzerError as exc:
            return error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error in %s %s: %s", request.method, request.path, exc)
            return Response({"error": "Internal server error"},
                            status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(StringRecordSerializer(record).data, status=status.HTTP_200_OK)

    @swagger_auto_schema(
        operation_summary="Delete an analyzed string by its value",
        responses={204: "String deleted", 404: ErrorResponseSerializer},
        tags=['Strings'],
    )
    def delete(self, request, value):
        try:
            self.get_store().delete_by_value(value)
        except StringAnalyzerError as exc:
            return error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error in %s %s: %s", request.method, request.path, exc)
            return Response({"error": "Internal server error"},
                            status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(status=status.HTTP_204_NO_CONTENT)


# GET /strings/filter-by-natural-language

class NaturalLanguageFilterView(StoreMixin, APIView):
    @swagger_auto_schema(
        operation_summary="Filter analyzed strings using natural language queries",
        manual_parameters=[
            openapi.Parameter(
                "query",
                openapi.IN_QUERY,
                description="Natural language query, e.g. 'all single word palindromic strings'",
                type=openapi.TYPE_STRING,
                required=True,
            )
        ],
        responses={200: NaturalLanguageResponseSerializer, 400: ErrorResponseSerializer},
        tags=['Strings'],
    )
    def get(self, request):
        query = request.query_params.get("query")
        if query is None:
            return Response(
                {"error": "Query parameter is required."},
                status=status.HTTP_400_BAD_REQUEST
            )

        criteria = parse_natural_language_query(query)

        try:
            records = filter_records(self.get_store().list_all(), criteria)
        except StringAnalyzerError as exc:
            return error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error in %s %s: %s", request.method, request.path, exc)
            return Response({"error": "Internal server error"},
                            status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({
            "data": StringRecordSerializer(records, many=True).data,
            "count": len(records),
            "interpreted_query": {
                "original": query,
                "parsed_filters": criteria.as_dict(),
            }
        }, status=status.HTTP_200_OK)
