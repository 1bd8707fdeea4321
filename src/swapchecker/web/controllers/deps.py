"""Shared controller dependencies."""

from fastapi import Request

from swapchecker.session import SwapSession


def get_session(request: Request) -> SwapSession:
    """The session attached to the running app."""
    return request.app.state.session
