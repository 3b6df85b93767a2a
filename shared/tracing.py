"""Tracing utilities with optional Langfuse forwarding.

By default this module provides a lightweight span context manager that
records nothing (no-op). If `LANGFUSE_ENABLED=true` and the Langfuse keys
are configured, spans are forwarded to Langfuse. Errors in tracing never
affect application logic; we fail-soft to a no-op.

This module also exposes ``log_event`` for short structured observability
events (prompt composed, suggestions fetched, webhook failed).
"""

import contextvars
import time
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from langfuse import Langfuse

from shared.settings import Settings

_settings = Settings()


def _now_ms() -> int:
    return int(time.time() * 1000)


class _Span:
    """A no‑op span used when tracing is disabled."""

    def __init__(self, name: str, **kwargs: Any) -> None:
        self.name = name

    def __enter__(self) -> "_Span":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None


_current_trace = contextvars.ContextVar("studio.current_trace", default=None)


class Tracer:
    """Tracer facade with pluggable backends (no-op or Langfuse)."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        s = settings or _settings
        self._backend = s.tracing_backend.lower()
        self._enabled = bool(s.langfuse_enabled)
        self._trace_name = s.trace_name

        self._client = None
        if self._enabled and self._backend == "langfuse":
            if s.langfuse_public_key and s.langfuse_secret_key:
                try:
                    self._client = Langfuse(
                        public_key=s.langfuse_public_key,
                        secret_key=s.langfuse_secret_key,
                        host=s.langfuse_host or None,
                    )
                except Exception:
                    self._client = None

    @property
    def enabled(self) -> bool:
        return self._client is not None

    def start_trace(self, name: str, input: Optional[dict] = None):
        if self._client is None:
            return None
        try:
            tr = self._client.start_span(name=name, input=input or {})
            _current_trace.set(tr)
            return tr
        except Exception:
            return None

    def end_trace(self, output: Optional[dict] = None):
        tr = _current_trace.get()
        if tr is not None:
            try:
                tr.update(output=output or {})
                tr.end()
            except Exception:
                pass
        _current_trace.set(None)

    def start_span(self, name: str, **kwargs: Any) -> _Span:
        if self._client is None:
            return _Span(name, **kwargs)
        # Prefer attaching spans to the current request trace if present
        return _LangfuseSpan(
            self._client,
            name,
            parent_trace=_current_trace.get(),
            trace_name=self._trace_name,
            **kwargs,
        )


tracer = Tracer()


def install_fastapi_tracing(app, service_name: str = "api-gateway") -> None:
    """Install middleware to auto-create a Langfuse trace per HTTP request."""
    from fastapi import Request

    @app.middleware("http")
    async def _trace_middleware(request: Request, call_next: Callable):
        # Only method/path/query; bodies carry user text
        route = request.scope.get("route")
        route_path = getattr(route, "path", request.url.path)
        tracer.start_trace(
            name=f"{service_name} {request.method} {route_path}",
            input={
                "method": request.method,
                "path": route_path,
                "query": str(request.url.query) if request.url.query else "",
            },
        )
        response = None
        try:
            with span("http.request"):
                response = await call_next(request)
            return response
        except Exception as e:
            with span("http.error", error=str(e)):
                pass
            raise
        finally:
            tracer.end_trace(
                output={"status": getattr(response, "status_code", None)}
            )


@contextmanager
def span(name: str, **kwargs: Any) -> Iterator[_Span]:
    """Context manager wrapper around the tracer's start_span method.

    Usage:
        with span("compose", topic_type="text"):
            ...
    """
    s = tracer.start_span(name, **kwargs)
    s.__enter__()
    exc_info: tuple = (None, None, None)
    try:
        yield s
    except BaseException as e:
        exc_info = (type(e), e, e.__traceback__)
        raise
    finally:
        s.__exit__(*exc_info)


class _LangfuseSpan(_Span):
    def __init__(
        self,
        client: Any,
        name: str,
        parent_trace: Any | None = None,
        trace_name: str = "prompt-studio-trace",
        **kwargs: Any,
    ) -> None:
        super().__init__(name, **kwargs)
        self._client = client
        self._trace = parent_trace
        self._trace_name = trace_name
        self._span = None
        self._start_ms = _now_ms()
        self._kwargs = kwargs

    def __enter__(self) -> "_LangfuseSpan":
        try:
            if self._trace is not None:
                self._span = self._trace.start_span(name=self.name, input=self._kwargs)
            else:
                self._span = self._client.start_span(
                    name=f"{self._trace_name}.{self.name}", input=self._kwargs
                )
        except Exception:
            self._span = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._span is None:
            return None
        try:
            self._span.update(
                output={
                    "error": str(exc) if exc else None,
                    "duration_ms": max(1, _now_ms() - self._start_ms),
                }
            )
            self._span.end()
        except Exception:
            pass
        return None


def log_event(name: str, payload: Optional[dict] = None) -> None:
    """Emit a short-lived structured event span for observability.

    Args:
        name: Logical event name, e.g. "Compose" or "Suggestions".
        payload: Arbitrary JSON-serializable dict with event data.
    """
    with span(f"event.{name}", **dict(payload or {})):
        pass
