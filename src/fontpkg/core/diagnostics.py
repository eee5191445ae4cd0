"""Diagnostic abstractions shared across the generation pipeline."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Interface used to surface warnings, errors, and structured events."""

    debug_enabled: bool

    def warning(self, message: str, exc: BaseException | None = None) -> None: ...

    def error(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter that ignores every diagnostic."""

    debug_enabled: bool = False

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def error(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


class LoggingEmitter:
    """Emitter that forwards diagnostics to the standard logging module."""

    def __init__(
        self, *, logger_obj: logging.Logger | None = None, debug_enabled: bool = False
    ) -> None:
        self._logger = logger_obj or logger
        self.debug_enabled = debug_enabled

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        if exc is not None:
            self._logger.warning(message, exc_info=exc)
        else:
            self._logger.warning(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        if exc is not None:
            self._logger.error(message, exc_info=exc)
        else:
            self._logger.error(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message:
            self._logger.info(message)
            return
        self._logger.debug("diagnostic event %s: %s", name, dict(payload))


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a human-friendly summary for the pipeline events."""
    data = dict(payload)

    if name == "package_name":
        return f"font name '{data.get('name', '<unknown>')}'"

    if name == "directory_exists":
        return f"directory '{data.get('path', '<unknown>')}' already exists"

    if name == "skip_entry":
        reason = data.get("reason")
        suffix = f" ({reason})" if reason else ""
        return f"skipping file '{data.get('name', '<unknown>')}'{suffix}"

    if name == "variant_emitted":
        return (
            f"created variant package '{data.get('package', '<unknown>')}' "
            f"from '{data.get('file', '<unknown>')}'"
        )

    if name == "license_found":
        return f"copied license file '{data.get('file', '<unknown>')}'"

    if name == "module_initialized":
        status = data.get("status") or "success"
        return f"package metadata in '{data.get('path', '<unknown>')}': {status}"

    if name == "vcs_initialized":
        status = data.get("status") or "success"
        return f"git repository in '{data.get('path', '<unknown>')}': {status}"

    if name == "website_marker":
        return f"touched website marker '{data.get('path', '<unknown>')}'"

    return None


__all__ = [
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "format_event_message",
]
