"""FastAPI dependencies shared by the endpoints."""

from fastapi import Request

from user_registry_api.app.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the ``UserService`` created by ``create_app`` for this app."""
    return request.app.state.user_service
