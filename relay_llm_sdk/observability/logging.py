"""
Structured logging for gateway providers.

Every line carries a ``[provider=... key=value]`` prefix so requests can be
followed across the streaming and single-shot paths by ``request_id``.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional


class ProviderLogger:
    """Structured logger bound to one provider name."""

    def __init__(self, provider_name: str):
        self.provider = provider_name
        self.logger = logging.getLogger(f"relay_llm_sdk.providers.{provider_name}")

    def _format_message(self, message: str, fields: Dict[str, Any]) -> str:
        parts = [f"provider={self.provider}"]
        parts.extend(f"{key}={value}" for key, value in fields.items() if value is not None)
        return f"[{' '.join(parts)}] {message}"

    def _log(self, level: int, message: str, model: Optional[str], request_id: Optional[str], fields: Dict[str, Any]):
        if not self.logger.isEnabledFor(level):
            return
        self.logger.log(level, self._format_message(message, {"model": model, "request_id": request_id, **fields}))

    def debug(self, message: str, model: Optional[str] = None, request_id: Optional[str] = None, **fields):
        self._log(logging.DEBUG, message, model, request_id, fields)

    def info(self, message: str, model: Optional[str] = None, request_id: Optional[str] = None, **fields):
        self._log(logging.INFO, message, model, request_id, fields)

    def warning(self, message: str, model: Optional[str] = None, request_id: Optional[str] = None, **fields):
        self._log(logging.WARNING, message, model, request_id, fields)

    def error(self, message: str, model: Optional[str] = None, request_id: Optional[str] = None,
              error: Optional[Exception] = None, **fields):
        """Log an error; ``error`` adds its type and message as fields."""
        if error is not None:
            fields["error_type"] = type(error).__name__
            fields["error_msg"] = str(error)
        self._log(logging.ERROR, message, model, request_id, fields)

    @contextmanager
    def track_request(self, method: str, model: str, request_id: Optional[str] = None) -> Iterator[Dict[str, Any]]:
        """
        Time a provider call and log its start, completion or failure.

        Args:
            method: Provider method name ("create_message", "complete_prompt")
            model: Model id sent to the gateway
            request_id: Request id; a short uuid is generated when omitted

        Yields:
            Mutable request dict. Callers may set ``error_info`` (an
            ``ErrorMapper.classify`` result) before re-raising so the failure
            line records status code and retry hints.
        """
        request = {
            'request_id': request_id or uuid.uuid4().hex[:8],
            'model': model,
            'method': method,
            'start_time': time.time(),
        }
        self.debug(f"Starting {method} request", model=model, request_id=request['request_id'])

        try:
            yield request
        except Exception as e:
            error_info = request.get('error_info') or {}
            self.error(
                f"Failed {method} request",
                model=model,
                request_id=request['request_id'],
                error=e,
                duration_ms=self._elapsed_ms(request['start_time']),
                status_code=error_info.get('status_code'),
                retryable=error_info.get('is_retryable'),
                retry_after=error_info.get('retry_after'),
            )
            raise

        self.info(
            f"Completed {method} request",
            model=model,
            request_id=request['request_id'],
            duration_ms=self._elapsed_ms(request['start_time']),
        )

    @staticmethod
    def _elapsed_ms(start_time: float) -> int:
        return int((time.time() - start_time) * 1000)

    def log_usage(self, usage: Any, model: str, request_id: str):
        """Log a ``UsageEvent``; cache counts appear only when non-zero."""
        cost = usage.total_cost
        self.info(
            "Token usage",
            model=model,
            request_id=request_id,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
            cache_write_tokens=usage.cache_write_tokens or None,
            cache_read_tokens=usage.cache_read_tokens or None,
            total_cost=f"{cost:.6f}" if cost is not None else None,
        )

    def log_streaming_metrics(self, metrics: Dict[str, Any], model: str, request_id: str):
        """Log the ``StreamAdapter.get_metrics()`` summary at debug."""
        self.debug(
            "Streaming metrics",
            model=model,
            request_id=request_id,
            state=metrics.get('state'),
            chunks=metrics.get('chunks'),
            events=metrics.get('events'),
            dropped_fields=metrics.get('dropped_fields') or None,
            total_chars=metrics.get('total_chars'),
            duration_ms=int(metrics.get('duration_seconds', 0) * 1000),
        )
