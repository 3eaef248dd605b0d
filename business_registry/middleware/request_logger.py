from fastapi import Request
import logging
import time

logger = logging.getLogger("business_registry.access")


class RequestTimer:
    """Context manager timing a request and writing one access log line"""

    def __init__(self, method: str, path: str):
        self.method = method
        self.path = path
        self.start_time = None
        self.response_status = 200

    async def __aenter__(self):
        self.start_time = time.perf_counter()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        response_time_ms = int((time.perf_counter() - self.start_time) * 1000)

        if exc_type:
            self.response_status = 500

        logger.info(f"{self.method} {self.path} -> {self.response_status} ({response_time_ms} ms)")

    def set_status(self, status: int):
        """Set the response status"""
        self.response_status = status


async def log_requests(request: Request, call_next):
    """HTTP middleware logging method, path, status and duration"""
    async with RequestTimer(request.method, request.url.path) as timer:
        response = await call_next(request)
        timer.set_status(response.status_code)
    return response
