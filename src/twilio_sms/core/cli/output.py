"""
Result envelopes.

Every invocation prints exactly one compact JSON line on stdout.
"""

import sys
from typing import Any, Literal, Optional, TextIO, Union

from pydantic import BaseModel

EXIT_OK = 0
EXIT_FAILURE = 1


class SuccessEnvelope(BaseModel):
    ok: Literal[True] = True
    data: Any = None


class FailureEnvelope(BaseModel):
    ok: Literal[False] = False
    error: str
    code: str
    details: Any = None


def emit(
    envelope: Union[SuccessEnvelope, FailureEnvelope],
    stream: Optional[TextIO] = None,
) -> int:
    """
    Write the envelope as one line of JSON.

    Returns:
        Process exit status for the envelope
    """
    stream = stream or sys.stdout
    stream.write(envelope.model_dump_json() + "\n")
    stream.flush()
    return EXIT_OK if envelope.ok else EXIT_FAILURE
