# plugins/core_hljs/component.py

from typing import Optional, Union

from markupsafe import Markup

from pagekit.core.component import ComponentInterface, IsRenderable, always_renderable
from pagekit.core.context import Context

from . import preferences
from .languages import HljsLang


class Snippet(ComponentInterface):
    """
    A highlighted code block.

        Snippet.with_(HljsLang.RUST, 'fn main() {}')

    Preparing it enables its language for the page, so the asset hook loads
    the matching highlight.js files.
    """
    def __init__(
        self,
        language: Union[HljsLang, str] = HljsLang.PLAINTEXT,
        code: str = "",
        weight: int = 0,
        renderable: Optional[IsRenderable] = None,
    ):
        self.weight = weight
        self.renderable = renderable or always_renderable
        self.language = language
        self.code = code

    @classmethod
    def with_(cls, language: Union[HljsLang, str], code: str) -> "Snippet":
        return cls(language=language, code=code)

    @property
    def language(self) -> HljsLang:
        return self._language

    @language.setter
    def language(self, language: Union[HljsLang, str]) -> None:
        if not isinstance(language, HljsLang):
            language = HljsLang.from_name(language)
        self._language = language

    @property
    def code(self) -> str:
        return self._code

    @code.setter
    def code(self, code: str) -> None:
        self._code = code.strip()

    # --- Builder ---

    def with_weight(self, weight: int) -> "Snippet":
        self.weight = weight
        return self

    def with_renderable(self, check: IsRenderable) -> "Snippet":
        self.renderable = check
        return self

    def with_language(self, language: Union[HljsLang, str]) -> "Snippet":
        self.language = language
        return self

    def with_code(self, code: str) -> "Snippet":
        self.code = code
        return self

    # --- ComponentInterface ---

    def is_renderable(self, context: Context) -> bool:
        return self.renderable(context)

    def before_prepare(self, context: Context) -> None:
        preferences.enable_language(context, self.language)

    def prepare(self, context: Context) -> Markup:
        return Markup('<pre><code class="language-{}">{}</code></pre>').format(
            self.language.value, self.code
        )
