# plugins/core_hljs/contracts.py

from enum import Enum
from typing import List

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field

from pagekit.core.assets import HeadScript, JavaScript, StyleSheet


class LibraryVariant(str, Enum):
    """How the highlight.js runtime is delivered."""
    # core.min.js plus one file per enabled language
    CORE = "core"
    # highlight.min.js, a single bundle with the most popular languages
    COMMON = "common"


class AssetManifest(BaseModel):
    """
    Assets resolved for one page render. Scripts keep their load order:
    runtime first, then languages, then the inline configuration.
    """
    model_config = ConfigDict(frozen=True)

    javascripts: List[JavaScript] = Field(default_factory=list)
    head_scripts: List[HeadScript] = Field(default_factory=list)
    stylesheets: List[StyleSheet] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.javascripts or self.head_scripts or self.stylesheets)

    def render(self) -> Markup:
        parts = [a.render() for a in self.stylesheets]
        parts += [a.render() for a in self.javascripts]
        parts += [a.render() for a in self.head_scripts]
        return Markup("\n").join(parts)
