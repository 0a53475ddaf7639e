"""
Dependencies that read objects the app factory placed on application state.
"""
from fastapi import Depends, Request

from senior_care.config.settings import Settings
from senior_care.controllers.chat_controller import ChatController


def get_app_settings(request: Request) -> Settings:
    """Settings the application was built with."""
    return request.app.state.settings


def get_chat_controller(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> ChatController:
    """Dependency injection for ChatController."""
    return ChatController(settings, client=request.app.state.anthropic_client)
