from rest_framework.response import Response


def api_response(data=None, message="OK", status_code=200):
    """
    Uniform API envelope.

    Args:
        data: payload
        message: human readable message
        status_code: HTTP status code
    Returns:
        Response with {"data", "message", "status"}
    """
    status_str = "ok" if 200 <= status_code < 400 else "error"
    return Response({
        "data": data,
        "message": message,
        "status": status_str,
    }, status=status_code)
