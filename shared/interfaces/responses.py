"""
Response envelope helpers.

Every endpoint answers with {'status', 'message', 'data'}; failures add an
'errorCode'.
"""
from rest_framework import status as http_status
from rest_framework.response import Response


def success_response(data=None, message: str = "Success", status_code: int = http_status.HTTP_200_OK) -> Response:
    return Response(
        {
            'status': status_code,
            'message': message,
            'data': data,
        },
        status=status_code,
    )


def error_response(message: str, error_code: str, status_code: int, data=None) -> Response:
    return Response(
        {
            'status': status_code,
            'message': message,
            'data': data,
            'errorCode': error_code,
        },
        status=status_code,
    )
