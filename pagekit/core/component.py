# pagekit/core/component.py

from abc import ABC, abstractmethod
from typing import Callable, Optional

from markupsafe import Markup

from pagekit.core.context import Context

# Decides, per render, whether a component is emitted at all.
IsRenderable = Callable[[Context], bool]


def always_renderable(context: Context) -> bool:
    return True


class ComponentInterface(ABC):
    """
    A unit of page content.

    For each renderable component the page calls ``before_prepare`` and then
    ``prepare``; all components of a page are prepared before the
    ``after_prepare_body`` hook fires.
    """
    weight: int = 0

    def is_renderable(self, context: Context) -> bool:
        return True

    def before_prepare(self, context: Context) -> None:
        """Side effects on the render context before markup is produced."""

    @abstractmethod
    def prepare(self, context: Context) -> Markup:
        raise NotImplementedError


class Html(ComponentInterface):
    """Literal markup. The content is trusted and emitted unescaped."""
    def __init__(self, html: str = "", weight: int = 0, renderable: Optional[IsRenderable] = None):
        self.html = Markup(html)
        self.weight = weight
        self.renderable = renderable or always_renderable

    def is_renderable(self, context: Context) -> bool:
        return self.renderable(context)

    def prepare(self, context: Context) -> Markup:
        return self.html
