"""
Resource Dependencies

Accessors for the long-lived resources built in the application lifespan
and stored on `app.state`:

    app.state.settings     → Settings
    app.state.database     → Database (engine + session factory)
    app.state.cache        → RedisAdapter
    app.state.rawg         → RawgAdapter
    app.state.task_queue   → TaskQueue

Tests replace any of these through `app.dependency_overrides`.
"""

from typing import Annotated

from fastapi import Depends, Request

from gamevault.config.settings import Settings
from gamevault.shared.adapters.rawg_adapter import RawgAdapter
from gamevault.shared.adapters.redis_adapter import RedisAdapter
from gamevault.shared.db.session import Database
from gamevault.shared.services.task_queue import TaskQueue


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_cache(request: Request) -> RedisAdapter:
    return request.app.state.cache


def get_rawg_adapter(request: Request) -> RawgAdapter:
    return request.app.state.rawg


def get_task_queue(request: Request) -> TaskQueue:
    return request.app.state.task_queue


AppSettings = Annotated[Settings, Depends(get_app_settings)]
Cache = Annotated[RedisAdapter, Depends(get_cache)]
Rawg = Annotated[RawgAdapter, Depends(get_rawg_adapter)]
Tasks = Annotated[TaskQueue, Depends(get_task_queue)]
