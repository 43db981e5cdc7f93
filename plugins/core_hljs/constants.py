# plugins/core_hljs/constants.py

# Version of the bundled highlight.js; stamped on every asset URL.
HLJS_VERSION = "11.7.0"

# URL prefix the static files are served under.
HLJS_PREFIX = "/hljs"

HLJS_CORE_SCRIPT = f"{HLJS_PREFIX}/js/core.min.js"
HLJS_COMMON_SCRIPT = f"{HLJS_PREFIX}/js/highlight.min.js"

# Name of the inline configuration script.
HLJS_HEAD_SCRIPT = "highlight.js"

# after_prepare_body priority of the asset hook. Implementations that alter
# highlighting from the same hook (e.g. pick a theme) must use a lower value.
HLJS_HOOK_PRIORITY = 99
