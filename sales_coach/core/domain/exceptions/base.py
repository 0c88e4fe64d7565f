"""Root of the Sales Coach error hierarchy.

A ``SalesCoachError`` knows its error code, where it was raised and which
lower-level exception it wraps. The API returns ``to_dict()`` as the error
body and the CLI prints the same payload, so both surfaces report a failing
corpus load or model call identically.
"""

import inspect
import traceback
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass
class RaiseSite:
    """Code location an error was raised from."""

    class_name: str
    method_name: str
    file_name: str
    line_number: int
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    @classmethod
    def unknown(cls) -> "RaiseSite":
        return cls("<unknown>", "<unknown>", "<unknown>", 0)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        return {
            "class": data["class_name"],
            "method": data["method_name"],
            "file": data["file_name"],
            "line": data["line_number"],
            "timestamp": data["timestamp"],
        }


def _find_raise_site(frames_up: int) -> RaiseSite:
    frame = inspect.currentframe()
    # frames_up counts from the caller of this helper
    for _ in range(frames_up + 1):
        if frame is None or frame.f_back is None:
            break
        frame = frame.f_back

    if frame is None:
        return RaiseSite.unknown()

    owner = frame.f_locals.get("self")
    return RaiseSite(
        class_name=type(owner).__name__ if owner is not None else "<module>",
        method_name=frame.f_code.co_name,
        file_name=frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1],
        line_number=frame.f_lineno,
    )


class SalesCoachError(Exception):
    """Base class for every error the coach raises on purpose.

    Example:
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise DocumentStoreError(
                "Failed to read training documents",
                cause=e,
                context={"path": str(path)},
            ) from e
    """

    error_code: str = "SC_ERR_001"

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Create the error.

        Args:
            message: What went wrong, phrased for the user.
            cause: Lower-level exception being wrapped.
            context: Values that identify the failing input (path, document id, model).
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.extra_context = dict(context or {})
        # one frame for __init__, then the raise site
        self.location = _find_raise_site(frames_up=1)
        self.stack_trace = "".join(traceback.format_exception(cause)) if cause else None

    def to_dict(self, include_trace: bool = False) -> dict[str, Any]:
        """Serialize for API error bodies and structured logs.

        Args:
            include_trace: Add the wrapped exception's traceback lines.
        """
        payload: dict[str, Any] = {
            "error": {
                "type": type(self).__name__,
                "code": self.error_code,
                "message": self.message,
            },
            "location": self.location.to_dict(),
        }

        if self.extra_context:
            payload["context"] = self.extra_context

        if self.cause is not None:
            payload["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}

        if include_trace and self.stack_trace:
            payload["stack_trace"] = [line for line in self.stack_trace.splitlines() if line.strip()]

        return payload
