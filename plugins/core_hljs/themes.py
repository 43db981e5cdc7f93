# plugins/core_hljs/themes.py
"""
Theme catalog.

Themes are UPPER_SNAKE_CASE members whose value is the kebab-case style name:

    >>> HljsTheme.ATELIER_PLATEAU_LIGHT.value
    'atelier-plateau-light'
"""
from enum import Enum
from typing import Optional

from .constants import HLJS_PREFIX


class UnknownThemeError(LookupError):
    """Raised when an identifier names no theme of the catalog."""


class HljsTheme(str, Enum):
    A11Y_DARK                   = "a11y-dark"
    A11Y_LIGHT                  = "a11y-light"
    AGATE                       = "agate"
    AN_OLD_HOPE                 = "an-old-hope"
    ANDROIDSTUDIO               = "androidstudio"
    ARDUINO_LIGHT               = "arduino-light"
    ARTA                        = "arta"
    ASCETIC                     = "ascetic"
    ATELIER_CAVE                = "atelier-cave"  # base16
    ATELIER_CAVE_LIGHT          = "atelier-cave-light"  # base16
    ATELIER_DUNE                = "atelier-dune"  # base16
    ATELIER_DUNE_LIGHT          = "atelier-dune-light"  # base16
    ATELIER_ESTUARY             = "atelier-estuary"  # base16
    ATELIER_ESTUARY_LIGHT       = "atelier-estuary-light"  # base16
    ATELIER_FOREST              = "atelier-forest"  # base16
    ATELIER_FOREST_LIGHT        = "atelier-forest-light"  # base16
    ATELIER_HEATH               = "atelier-heath"  # base16
    ATELIER_HEATH_LIGHT         = "atelier-heath-light"  # base16
    ATELIER_LAKESIDE            = "atelier-lakeside"  # base16
    ATELIER_LAKESIDE_LIGHT      = "atelier-lakeside-light"  # base16
    ATELIER_PLATEAU             = "atelier-plateau"  # base16
    ATELIER_PLATEAU_LIGHT       = "atelier-plateau-light"  # base16
    ATELIER_SAVANNA             = "atelier-savanna"  # base16
    ATELIER_SAVANNA_LIGHT       = "atelier-savanna-light"  # base16
    ATELIER_SEASIDE             = "atelier-seaside"  # base16
    ATELIER_SEASIDE_LIGHT       = "atelier-seaside-light"  # base16
    ATELIER_SULPHURPOOL         = "atelier-sulphurpool"  # base16
    ATELIER_SULPHURPOOL_LIGHT   = "atelier-sulphurpool-light"  # base16
    ATOM_ONE_DARK               = "atom-one-dark"
    ATOM_ONE_DARK_REASONABLE    = "atom-one-dark-reasonable"
    ATOM_ONE_LIGHT              = "atom-one-light"
    BROWN_PAPER                 = "brown-paper"
    CODEPEN_EMBED               = "codepen-embed"
    COLOR_BREWER                = "color-brewer"
    DARCULA                     = "darcula"  # base16
    DARK                        = "dark"
    DEFAULT                     = "default"
    DEVIBEANS                   = "devibeans"
    DOCCO                       = "docco"
    DRACULA                     = "dracula"  # base16
    FAR                         = "far"
    FOUNDATION                  = "foundation"
    FRAMER                      = "framer"  # base16
    GIGAVOLT                    = "gigavolt"  # base16
    GITHUB                      = "github"
    GML                         = "gml"
    GOOGLECODE                  = "googlecode"
    GRADIENT_DARK               = "gradient-dark"
    GRADIENT_LIGHT              = "gradient-light"
    GRAYSCALE                   = "grayscale"
    GRUVBOX_DARK_HARD           = "gruvbox-dark-hard"  # base16
    GRUVBOX_LIGHT_HARD          = "gruvbox-light-hard"  # base16
    HOPSCOTCH                   = "hopscotch"  # base16
    HYBRID                      = "hybrid"
    IDEA                        = "idea"
    IR_BLACK                    = "ir-black"
    KIMBIE_DARK                 = "kimbie-dark"
    KIMBIE_LIGHT                = "kimbie-light"
    LIGHTFAIR                   = "lightfair"
    LIOSHI                      = "lioshi"
    MAGULA                      = "magula"
    MONO_BLUE                   = "mono-blue"
    MONOKAI                     = "monokai"
    MONOKAI_SUBLIME             = "monokai-sublime"
    NIGHT_OWL                   = "night-owl"
    NNFX_DARK                   = "nnfx-dark"
    NNFX_LIGHT                  = "nnfx-light"
    OBSIDIAN                    = "obsidian"
    OCEAN                       = "ocean"  # base16
    OCEANICNEXT                 = "oceanicnext"  # base16
    PANDA_SYNTAX_DARK           = "panda-syntax-dark"
    PANDA_SYNTAX_LIGHT          = "panda-syntax-light"
    POJOAQUE                    = "pojoaque"
    PUREBASIC                   = "purebasic"
    QTCREATOR_DARK              = "qtcreator-dark"
    QTCREATOR_LIGHT             = "qtcreator-light"
    RAILCASTS                   = "railcasts"  # base16
    RAINBOW                     = "rainbow"
    ROUTEROS                    = "routeros"
    SCHOOL_BOOK                 = "school-book"
    SHAPES_OF_PURPLE            = "shapes-of-purple"
    SOLARIZED_DARK              = "solarized-dark"  # base16
    SOLARIZED_LIGHT             = "solarized-light"  # base16
    SRCERY                      = "srcery"
    STACKOVERFLOW_DARK          = "stackoverflow-dark"
    STACKOVERFLOW_LIGHT         = "stackoverflow-light"
    SUNBURST                    = "sunburst"
    TOKIO_NIGHT_DARK            = "tokio-night-dark"
    TOKIO_NIGHT_LIGHT           = "tokio-night-light"
    TOMORROW                    = "tomorrow"  # base16
    TOMORROW_NIGHT              = "tomorrow-night"  # base16
    TOMORROW_NIGHT_BLUE         = "tomorrow-night-blue"
    TOMORROW_NIGHT_BRIGHT       = "tomorrow-night-bright"
    VS                          = "vs"
    VS2015                      = "vs2015"
    XCODE                       = "xcode"
    XT256                       = "xt256"
    ZENBURN                     = "zenburn"  # base16

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "HljsTheme":
        return cls.DEFAULT

    @classmethod
    def from_name(cls, identifier: str) -> "HljsTheme":
        theme = lookup_theme(identifier)
        if theme is None:
            raise UnknownThemeError(f"Unknown highlight.js theme '{identifier}'.")
        return theme

    @property
    def asset_path(self) -> str:
        return f"css/{self.value}.min.css"

    @property
    def url(self) -> str:
        return f"{HLJS_PREFIX}/{self.asset_path}"


def lookup_theme(identifier: str) -> Optional[HljsTheme]:
    if isinstance(identifier, HljsTheme):
        return identifier
    if not isinstance(identifier, str):
        return None
    try:
        return HljsTheme(identifier.strip().lower())
    except ValueError:
        return None


def theme_url(identifier: str) -> Optional[str]:
    theme = lookup_theme(identifier)
    return theme.url if theme is not None else None
