import logging
from functools import wraps

logger = logging.getLogger(__name__)


def _sanitize(value, limit=255):
    return str(value).replace("\n", "").replace("\r", "")[:limit]


def track_page_visit(view_func):
    """
    Decorator to log visits to the resume endpoints.

    Request timing is handled by RequestLoggingMiddleware; this only records
    which document was fetched and by whom.
    """

    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        try:
            safe_path = _sanitize(request.path)
            safe_ip = _sanitize(request.META.get("REMOTE_ADDR", "unknown"))
            safe_ua = _sanitize(request.META.get("HTTP_USER_AGENT", "unknown"))
            logger.info(f"Page visit: {safe_path} | IP: {safe_ip} | Method: {request.method} | User-Agent: {safe_ua}")
        except Exception as e:
            logger.error(f"Error in track_page_visit decorator: {e}", exc_info=True)

        # Always execute the view function, regardless of logging errors
        return view_func(request, *args, **kwargs)

    return wrapper
