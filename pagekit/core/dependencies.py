# pagekit/core/dependencies.py

from typing import Any
from fastapi import Request


class Service:
    """
    FastAPI dependency resolving a named service from the application container.

        hljs = Depends(Service("hljs"))
    """
    def __init__(self, name: str):
        self.name = name

    def __call__(self, request: Request) -> Any:
        return request.app.state.container.resolve(self.name)
