# pagekit/core/assets.py

from __future__ import annotations
from enum import Enum
from typing import Generic, Iterator, List, Optional, TypeVar

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field


class JavaScriptMode(str, Enum):
    """How the browser loads an external script."""
    NORMAL = "normal"
    ASYNC = "async"
    DEFER = "defer"


def _versioned(path: str, version: Optional[str]) -> str:
    if not version:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}v={version}"


class JavaScript(BaseModel):
    """An external script reference."""
    model_config = ConfigDict(frozen=True)

    path: str
    version: Optional[str] = None
    mode: JavaScriptMode = JavaScriptMode.DEFER

    @property
    def key(self) -> str:
        return self.path

    @property
    def url(self) -> str:
        return _versioned(self.path, self.version)

    def render(self) -> Markup:
        if self.mode == JavaScriptMode.NORMAL:
            return Markup('<script src="{}"></script>').format(self.url)
        return Markup('<script src="{}" {}></script>').format(self.url, self.mode.value)


class StyleSheet(BaseModel):
    """An external stylesheet reference."""
    model_config = ConfigDict(frozen=True)

    path: str
    version: Optional[str] = None
    media: Optional[str] = None

    @property
    def key(self) -> str:
        return self.path

    @property
    def url(self) -> str:
        return _versioned(self.path, self.version)

    def render(self) -> Markup:
        if self.media:
            return Markup('<link rel="stylesheet" href="{}" media="{}">').format(self.url, self.media)
        return Markup('<link rel="stylesheet" href="{}">').format(self.url)


class HeadScript(BaseModel):
    """A named inline script. The code is emitted verbatim and must be trusted."""
    model_config = ConfigDict(frozen=True)

    name: str
    code: str = Field(default="")

    @property
    def key(self) -> str:
        return self.name

    def render(self) -> Markup:
        return Markup("<script>") + Markup(self.code) + Markup("</script>")


A = TypeVar('A', JavaScript, StyleSheet, HeadScript)


class Assets(Generic[A]):
    """
    Ordered asset collection. Entries are unique by key (path for files,
    name for inline scripts); the first entry added for a key wins.
    """
    def __init__(self):
        self._items: List[A] = []

    def add(self, asset: A) -> bool:
        if any(item.key == asset.key for item in self._items):
            return False
        self._items.append(asset)
        return True

    def remove(self, key: str) -> bool:
        for i, item in enumerate(self._items):
            if item.key == key:
                del self._items[i]
                return True
        return False

    def __iter__(self) -> Iterator[A]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def render(self) -> Markup:
        return Markup("\n").join(item.render() for item in self._items)
