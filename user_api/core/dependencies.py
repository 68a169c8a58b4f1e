from fastapi import Request

from user_api.storage.memory import MemoryStore


def get_store(request: Request) -> MemoryStore:
    return request.app.state.store
