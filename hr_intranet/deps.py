"""Accessors for the process-scoped state attached to ``app.state``."""

from fastapi import Request

from hr_intranet.config import Settings
from hr_intranet.search.directory import DirectoryIndex
from hr_intranet.sessions import SessionRecord, SessionStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_directory(request: Request) -> DirectoryIndex:
    return request.app.state.directory


def current_session(request: Request) -> SessionRecord | None:
    return getattr(request.state, "session", None)
