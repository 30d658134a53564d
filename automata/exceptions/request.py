from __future__ import annotations

from automata.exceptions.base import AutomataException
from automata.nodes.api.responses.errors import LavalinkError


class HTTPException(AutomataException):
    """Base exception for HTTP request errors"""

    def __init__(self, response: LavalinkError):
        super().__init__(response.message)
        self.response = response

    def __bool__(self):
        return False


class UnauthorizedException(HTTPException):
    """Raised when a REST request fails due to an incorrect password"""

    def __bool__(self):
        return False
