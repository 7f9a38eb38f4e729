"""
Test utility functions and helpers.

This module provides helper functions for faking Telegraph API responses
and async utilities for testing.
"""

import json
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

# ============================================================================
# Mock Creation Utilities
# ============================================================================


def createApiResponse(
    result: Optional[Any] = None,
    ok: bool = True,
    error: Optional[str] = None,
    statusCode: int = 200,
) -> MagicMock:
    """
    Create a mock httpx response with Telegraph API envelope.

    Args:
        result: Value of `result` field (used when ok is True)
        ok: Value of `ok` field (default: True)
        error: Value of `error` field (used when ok is False)
        statusCode: HTTP status code (default: 200)

    Returns:
        MagicMock: Response-like object with status_code, json() and text

    Example:
        response = createApiResponse({"url": "https://telegra.ph/Test"})
        assert response.json()["ok"] is True
    """
    payload: Dict[str, Any] = {"ok": ok}
    if ok:
        payload["result"] = result
    elif error is not None:
        payload["error"] = error

    response = MagicMock()
    response.status_code = statusCode
    response.json.return_value = payload
    response.text = json.dumps(payload)
    return response


def createAsyncMock(returnValue: Any = None, sideEffect: Any = None) -> AsyncMock:
    """
    Create an AsyncMock with return value or side effect.

    Example:
        mockFunc = createAsyncMock(returnValue="result")
        assert await mockFunc() == "result"
    """
    mock = AsyncMock()
    if sideEffect is not None:
        mock.side_effect = sideEffect
    else:
        mock.return_value = returnValue
    return mock
