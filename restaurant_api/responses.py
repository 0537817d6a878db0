from rest_framework import status as http_status
from rest_framework.response import Response


def api_response(data=None, message=None, status_code=http_status.HTTP_200_OK, status=True):
    """Wrap a payload in the {status, message, data} envelope every endpoint returns."""
    body = {'status': status}
    if message is not None:
        body['message'] = message
    if data is not None:
        body['data'] = data
    return Response(body, status=status_code)
