import logging
import time

from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger("pages")


def client_ip(request):
    # X-Forwarded-For may hold a chain of proxies, the client is first
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR", "unknown")


def elapsed_ms(request):
    started = getattr(request, "_start_time", None)
    if started is None:
        return None
    return (time.time() - started) * 1000


class RequestLoggingMiddleware(MiddlewareMixin):
    """
    One log line when a request arrives and one when it leaves.

    PDF downloads and page renders show up with status and timing, and an
    unreadable resume shows up with its traceback before Django answers 500.
    A failure inside the logging itself is reported but never alters the
    response.
    """

    def process_request(self, request):
        request._start_time = time.time()
        try:
            logger.info(f"Request started: {request.method} {request.path} | IP: {client_ip(request)}")
        except Exception as e:
            logger.error(f"Could not log start of {request.path}: {e}", exc_info=True)

    def process_response(self, request, response):
        duration = elapsed_ms(request)
        if duration is None:
            return response
        try:
            logger.info(
                f"Request completed: {request.method} {request.path} | Status: {response.status_code} | "
                f"Duration: {duration:.2f}ms | IP: {client_ip(request)}"
            )
        except Exception as e:
            logger.error(f"Could not log completion of {request.path}: {e}", exc_info=True)
        return response

    def process_exception(self, request, exception):
        duration = elapsed_ms(request)
        timing = f" | Duration: {duration:.2f}ms" if duration is not None else ""
        try:
            logger.error(
                f"Request failed: {request.method} {request.path} | IP: {client_ip(request)}{timing} | "
                f"Exception: {type(exception).__name__}: {exception}",
                exc_info=exception,
            )
        except Exception as e:
            logger.error(f"Could not log failure ({e}), unhandled {type(exception).__name__}: {exception}")
