"""Domain error raised by every backend operation.

Why a single error kind:
- Every operation shares one failure channel, whatever went wrong
  (non-success status, transport failure, undecodable body).
- Callers handle one exception type; the message says what failed and why.
"""

from __future__ import annotations


class OperationFailed(Exception):
    """A backend operation did not complete successfully.

    `str(exc)` is `"<operation>: <detail>"`, where detail is the response's
    reason phrase or the transport error's description. `status_code` is
    only set when a response was received.
    """

    def __init__(self, operation: str, detail: str, *, status_code: int | None = None) -> None:
        super().__init__(f"{operation}: {detail}")
        self.operation = operation
        self.detail = detail
        self.status_code = status_code
