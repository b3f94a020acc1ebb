"""
Specification Parser

Parses the body returned by the specification server action.

Two response shapes are accepted:
- A JSON array of two elements whose second element is the specification list
- A streamed text payload of "<row>:<json>" lines, where the specification
  array follows the "1:[" marker
"""

import json
import logging
from typing import Any, List, Optional

from ...common.constants import SPECIFICATION_MARKER

logger = logging.getLogger(__name__)

_decoder = json.JSONDecoder()


def parse_specifications(body: Any, marker: str = SPECIFICATION_MARKER) -> Optional[List[Any]]:
    """
    Extract the specification list from a server action response body.

    The structured two-element array is tried first; the marker scan is the
    fallback.

    Args:
        body: Response body (text, or already-decoded JSON)
        marker: Stream prefix that precedes the specification array

    Returns:
        Specification list, or None if the body has neither shape
    """
    if isinstance(body, list):
        return _from_structured(body)

    if not isinstance(body, str) or not body.strip():
        logger.warning("Empty or non-text specification response: %s", type(body).__name__)
        return None

    try:
        specs = _from_structured(json.loads(body))
    except (json.JSONDecodeError, RecursionError):
        specs = None

    if specs is not None:
        return specs

    return _from_stream(body, marker)


def _from_structured(data: Any) -> Optional[List[Any]]:
    """Return the second element of a two-element array."""
    if isinstance(data, list) and len(data) == 2 and isinstance(data[1], list):
        return data[1]
    return None


def _from_stream(body: str, marker: str) -> Optional[List[Any]]:
    """Decode the JSON array that starts at the marker's opening bracket."""
    # Rows start at the beginning of a line; "11:[" must not match "1:["
    if body.startswith(marker):
        start = 0
    else:
        start = body.find("\n" + marker)
        if start != -1:
            start += 1
    if start == -1:
        logger.warning("Marker %r not found in specification response: %.200s", marker, body)
        return None

    # Step back so decoding starts at the bracket that ends the marker
    array_start = start + len(marker) - 1

    try:
        specs, _ = _decoder.raw_decode(body, array_start)
    except (json.JSONDecodeError, RecursionError) as e:
        logger.error("Could not parse specification JSON: %s", e)
        return None

    if not isinstance(specs, list):
        logger.warning("Specification payload is not a list: %s", type(specs).__name__)
        return None

    return specs
