# plugins/core_hljs/languages.py
"""
Language catalog.

Every language shipped with highlight.js 11.7.0. Members are UPPER_SNAKE_CASE
and their value is the library's canonical kebab-case name, which is also the
asset file name:

    >>> HljsLang.CLOJURE_REPL.value
    'clojure-repl'
    >>> HljsLang.RUST.asset_path
    'js/lang/rust.min.js'
"""
from enum import Enum
from typing import Optional

from .constants import HLJS_PREFIX


class UnknownLanguageError(LookupError):
    """Raised when an identifier names no language of the catalog."""


class HljsLang(str, Enum):
    ONE_C              = "1c"
    ABNF               = "abnf"
    ACCESSLOG          = "accesslog"
    ACTIONSCRIPT       = "actionscript"
    ADA                = "ada"
    ANGELSCRIPT        = "angelscript"
    APACHE             = "apache"
    APPLESCRIPT        = "applescript"
    ARCADE             = "arcade"
    ARDUINO            = "arduino"
    ARMASM             = "armasm"
    ASCIIDOC           = "asciidoc"
    ASPECTJ            = "aspectj"
    AUTOHOTKEY         = "autohotkey"
    AUTOIT             = "autoit"
    AVRASM             = "avrasm"
    AWK                = "awk"
    AXAPTA             = "axapta"
    BASH               = "bash"
    BASIC              = "basic"
    BNF                = "bnf"
    BRAINFUCK          = "brainfuck"
    C                  = "c"
    CAL                = "cal"
    CAPNPROTO          = "capnproto"
    CEYLON             = "ceylon"
    CLEAN              = "clean"
    CLOJURE            = "clojure"
    CLOJURE_REPL       = "clojure-repl"
    CMAKE              = "cmake"
    COFFEESCRIPT       = "coffeescript"
    COQ                = "coq"
    COS                = "cos"
    CPP                = "cpp"
    CRMSH              = "crmsh"
    CRYSTAL            = "crystal"
    CSHARP             = "csharp"
    CSP                = "csp"
    CSS                = "css"
    D                  = "d"
    DART               = "dart"
    DELPHI             = "delphi"
    DIFF               = "diff"
    DJANGO             = "django"
    DNS                = "dns"
    DOCKERFILE         = "dockerfile"
    DOS                = "dos"
    DSCONFIG           = "dsconfig"
    DTS                = "dts"
    DUST               = "dust"
    EBNF               = "ebnf"
    ELIXIR             = "elixir"
    ELM                = "elm"
    ERB                = "erb"
    ERLANG             = "erlang"
    ERLANG_REPL        = "erlang-repl"
    EXCEL              = "excel"
    FIX                = "fix"
    FLIX               = "flix"
    FORTRAN            = "fortran"
    FSHARP             = "fsharp"
    GAMS               = "gams"
    GAUSS              = "gauss"
    GCODE              = "gcode"
    GHERKIN            = "gherkin"
    GLSL               = "glsl"
    GML                = "gml"
    GO                 = "go"
    GOLO               = "golo"
    GRADLE             = "gradle"
    GRAPHQL            = "graphql"
    GROOVY             = "groovy"
    HAML               = "haml"
    HANDLEBARS         = "handlebars"
    HASKELL            = "haskell"
    HAXE               = "haxe"
    HSP                = "hsp"
    HTTP               = "http"
    HY                 = "hy"
    INFORM7            = "inform7"
    INI                = "ini"
    IRPF90             = "irpf90"
    ISBL               = "isbl"
    JAVA               = "java"
    JAVASCRIPT         = "javascript"
    JBOSS_CLI          = "jboss-cli"
    JSON               = "json"
    JULIA              = "julia"
    JULIA_REPL         = "julia-repl"
    KOTLIN             = "kotlin"
    LASSO              = "lasso"
    LATEX              = "latex"
    LDIF               = "ldif"
    LEAF               = "leaf"
    LESS               = "less"
    LISP               = "lisp"
    LIVECODESERVER     = "livecodeserver"
    LIVESCRIPT         = "livescript"
    LLVM               = "llvm"
    LSL                = "lsl"
    LUA                = "lua"
    MAKEFILE           = "makefile"
    MARKDOWN           = "markdown"
    MATHEMATICA        = "mathematica"
    MATLAB             = "matlab"
    MAXIMA             = "maxima"
    MEL                = "mel"
    MERCURY            = "mercury"
    MIPSASM            = "mipsasm"
    MIZAR              = "mizar"
    MOJOLICIOUS        = "mojolicious"
    MONKEY             = "monkey"
    MOONSCRIPT         = "moonscript"
    N1QL               = "n1ql"
    NESTEDTEXT         = "nestedtext"
    NGINX              = "nginx"
    NIM                = "nim"
    NIX                = "nix"
    NODE_REPL          = "node-repl"
    NSIS               = "nsis"
    OBJECTIVEC         = "objectivec"
    OCAML              = "ocaml"
    OPENSCAD           = "openscad"
    OXYGENE            = "oxygene"
    PARSER3            = "parser3"
    PERL               = "perl"
    PF                 = "pf"
    PGSQL              = "pgsql"
    PHP                = "php"
    PHP_TEMPLATE       = "php-template"
    PLAINTEXT          = "plaintext"
    PONY               = "pony"
    POWERSHELL         = "powershell"
    PROCESSING         = "processing"
    PROFILE            = "profile"
    PROLOG             = "prolog"
    PROPERTIES         = "properties"
    PROTOBUF           = "protobuf"
    PUPPET             = "puppet"
    PUREBASIC          = "purebasic"
    PYTHON             = "python"
    PYTHON_REPL        = "python-repl"
    Q                  = "q"
    QML                = "qml"
    R                  = "r"
    REASONML           = "reasonml"
    RIB                = "rib"
    ROBOCONF           = "roboconf"
    ROUTEROS           = "routeros"
    RSL                = "rsl"
    RUBY               = "ruby"
    RULESLANGUAGE      = "ruleslanguage"
    RUST               = "rust"
    SAS                = "sas"
    SCALA              = "scala"
    SCHEME             = "scheme"
    SCILAB             = "scilab"
    SCSS               = "scss"
    SHELL              = "shell"
    SMALI              = "smali"
    SMALLTALK          = "smalltalk"
    SML                = "sml"
    SQF                = "sqf"
    SQL                = "sql"
    STAN               = "stan"
    STATA              = "stata"
    STEP21             = "step21"
    STYLUS             = "stylus"
    SUBUNIT            = "subunit"
    SWIFT              = "swift"
    TAGGERSCRIPT       = "taggerscript"
    TAP                = "tap"
    TCL                = "tcl"
    THRIFT             = "thrift"
    TP                 = "tp"
    TWIG               = "twig"
    TYPESCRIPT         = "typescript"
    VALA               = "vala"
    VBNET              = "vbnet"
    VBSCRIPT           = "vbscript"
    VBSCRIPT_HTML      = "vbscript-html"
    VERILOG            = "verilog"
    VHDL               = "vhdl"
    VIM                = "vim"
    WASM               = "wasm"
    WREN               = "wren"
    X86ASM             = "x86asm"
    XL                 = "xl"
    XML                = "xml"
    XQUERY             = "xquery"
    YAML               = "yaml"
    ZEPHIR             = "zephir"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, identifier: str) -> "HljsLang":
        language = lookup_language(identifier)
        if language is None:
            raise UnknownLanguageError(f"Unknown highlight.js language '{identifier}'.")
        return language

    @property
    def asset_path(self) -> str:
        return f"js/lang/{self.value}.min.js"

    @property
    def url(self) -> str:
        return f"{HLJS_PREFIX}/{self.asset_path}"

    @property
    def in_common_bundle(self) -> bool:
        return self in COMMON_BUNDLE


# Languages preloaded by the "common" build (highlight.min.js).
COMMON_BUNDLE = frozenset({
    HljsLang.BASH, HljsLang.C, HljsLang.CPP, HljsLang.CSHARP, HljsLang.CSS,
    HljsLang.DIFF, HljsLang.GO, HljsLang.GRAPHQL, HljsLang.INI, HljsLang.JAVA,
    HljsLang.JAVASCRIPT, HljsLang.JSON, HljsLang.KOTLIN, HljsLang.LESS,
    HljsLang.LUA, HljsLang.MAKEFILE, HljsLang.MARKDOWN, HljsLang.OBJECTIVEC,
    HljsLang.PERL, HljsLang.PHP, HljsLang.PHP_TEMPLATE, HljsLang.PLAINTEXT,
    HljsLang.PYTHON, HljsLang.PYTHON_REPL, HljsLang.R, HljsLang.RUBY,
    HljsLang.RUST, HljsLang.SCSS, HljsLang.SHELL, HljsLang.SQL, HljsLang.SWIFT,
    HljsLang.TYPESCRIPT, HljsLang.VBNET, HljsLang.WASM, HljsLang.XML,
    HljsLang.YAML,
})

# A few of the aliases highlight.js itself registers.
ALIASES = {
    "c++": HljsLang.CPP,
    "cc": HljsLang.CPP,
    "h": HljsLang.C,
    "cs": HljsLang.CSHARP,
    "docker": HljsLang.DOCKERFILE,
    "golang": HljsLang.GO,
    "html": HljsLang.XML,
    "svg": HljsLang.XML,
    "js": HljsLang.JAVASCRIPT,
    "jsx": HljsLang.JAVASCRIPT,
    "ts": HljsLang.TYPESCRIPT,
    "kt": HljsLang.KOTLIN,
    "md": HljsLang.MARKDOWN,
    "py": HljsLang.PYTHON,
    "rb": HljsLang.RUBY,
    "rs": HljsLang.RUST,
    "sh": HljsLang.BASH,
    "zsh": HljsLang.BASH,
    "ps1": HljsLang.POWERSHELL,
    "yml": HljsLang.YAML,
    "text": HljsLang.PLAINTEXT,
    "txt": HljsLang.PLAINTEXT,
}


def lookup_language(identifier: str) -> Optional[HljsLang]:
    """Canonical name or alias to language; None outside the catalog."""
    if isinstance(identifier, HljsLang):
        return identifier
    if not isinstance(identifier, str):
        return None
    name = identifier.strip().lower()
    try:
        return HljsLang(name)
    except ValueError:
        return ALIASES.get(name)


def language_url(identifier: str) -> Optional[str]:
    language = lookup_language(identifier)
    return language.url if language is not None else None
