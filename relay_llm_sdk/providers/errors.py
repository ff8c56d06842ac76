"""
Error classification utilities for provider adapters.

Transport errors propagate to callers unchanged; this module only classifies
them so failure log lines say whether a retry is worthwhile.
"""

from typing import Any, Dict, Optional

import httpx


class ErrorMapper:
    """Classifies transport and API errors."""

    # Common HTTP status codes that indicate retryable errors
    RETRYABLE_STATUS_CODES = {408, 429, 500, 502, 503, 504}

    RATE_LIMIT_PHRASES = ('rate limit', 'too many requests', 'quota exceeded', 'too_many_requests')

    @staticmethod
    def is_retryable(error: Exception) -> bool:
        """
        Determine if an error is retryable.

        Args:
            error: The exception to check

        Returns:
            bool: True if the error is retryable
        """
        status_code = getattr(error, 'status_code', None)
        if isinstance(status_code, int) and status_code in ErrorMapper.RETRYABLE_STATUS_CODES:
            return True

        if isinstance(error, (httpx.TimeoutException, httpx.ConnectError)):
            return True

        # openai wraps httpx failures in APIConnectionError/APITimeoutError
        cause = error.__cause__
        if isinstance(cause, (httpx.TimeoutException, httpx.ConnectError)):
            return True

        error_msg = str(error).lower()
        return any(phrase in error_msg for phrase in ErrorMapper.RATE_LIMIT_PHRASES)

    @staticmethod
    def get_retry_after(error: Exception) -> Optional[float]:
        """
        Extract retry-after value from error if available.

        Returns:
            Optional[float]: Seconds to wait before retry, or None
        """
        response = getattr(error, 'response', None)
        headers = getattr(response, 'headers', None)
        if headers is not None:
            retry_after = headers.get('Retry-After')
            if retry_after:
                try:
                    return float(retry_after)
                except ValueError:
                    pass

        retry_after = getattr(error, 'retry_after', None)
        if isinstance(retry_after, (int, float)):
            return float(retry_after)

        return None

    @staticmethod
    def classify(error: Exception) -> Dict[str, Any]:
        """
        Get error classification for logging.

        Returns:
            Dict with error type, status code and retry hints
        """
        return {
            'error_type': type(error).__name__,
            'status_code': getattr(error, 'status_code', None),
            'is_retryable': ErrorMapper.is_retryable(error),
            'retry_after': ErrorMapper.get_retry_after(error),
        }
