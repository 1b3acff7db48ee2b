"""Where: src/phishnet/models/envelope.py
What: Header fields shared by every success envelope.
Why: The API repeats error_code/error_message on each response.
"""

from __future__ import annotations

from pydantic import StrictInt, StrictStr

from phishnet.shared.payload import PayloadModel


class ResponseHeader(PayloadModel):
    """Embedded status fields of a success envelope.

    These are informational only: HTTP status alone decides success.
    """

    error_code: StrictInt = 0
    error_message: StrictStr | None = None


__all__ = ["ResponseHeader"]
