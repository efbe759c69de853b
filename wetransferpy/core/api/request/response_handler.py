"""Response handler for API responses."""
import json
from typing import Any, Type, TypeVar

from ..models import ApiResponse
from ..transport import HttpRequest, HttpResponse
from ...exceptions import ResponseDecodeError


T = TypeVar('T', bound=ApiResponse)


class ResponseHandler:
    """Decodes raw responses into typed API responses."""

    @staticmethod
    def parse_response(request: HttpRequest, response: HttpResponse) -> Any:
        """
        Parses JSON response body.

        An empty body decodes to an empty dict. A body that is not JSON is an
        error only when the status claims success.
        """
        if not response.body or not response.body.strip():
            return {}
        try:
            return json.loads(response.body)
        except ValueError:
            if response.ok:
                raise ResponseDecodeError(
                    f"Invalid JSON in response from {request.url}",
                    request_url=request.url,
                    status_code=response.status
                )
            return {}

    @staticmethod
    def resolve_success(data: Any, response: HttpResponse) -> bool:
        """Explicit 'success' field wins, otherwise the status decides."""
        if isinstance(data, dict) and isinstance(data.get('success'), bool):
            return data['success']
        return response.ok

    @staticmethod
    def resolve_message(data: Any, response: HttpResponse, success: bool) -> str:
        """Server message for failed calls, else the reason phrase."""
        if not success and isinstance(data, dict):
            message = data.get('message') or data.get('error')
            if isinstance(message, str) and message:
                return message
        return response.reason

    @classmethod
    def stamp(
        cls,
        result: T,
        data: Any,
        request: HttpRequest,
        response: HttpResponse
    ) -> T:
        """Stamps a typed response with request URL, status and success."""
        result.success = cls.resolve_success(data, response)
        result.message = cls.resolve_message(data, response, result.success)
        result.request_url = request.url
        result.status_code = response.status
        return result

    @classmethod
    def process_response(
        cls,
        response_cls: Type[T],
        request: HttpRequest,
        response: HttpResponse
    ) -> T:
        """Decodes a JSON object response into response_cls."""
        data = cls.parse_response(request, response)
        result = response_cls.from_dict(data if isinstance(data, dict) else {})
        return cls.stamp(result, data, request, response)

    @classmethod
    def process_array_response(
        cls,
        response_cls: Type[T],
        request: HttpRequest,
        response: HttpResponse
    ) -> T:
        """Decodes a JSON array response into response_cls."""
        data = cls.parse_response(request, response)
        items = data if isinstance(data, list) else []
        result = response_cls.from_list(items)
        return cls.stamp(result, data, request, response)
