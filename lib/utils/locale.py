"""Language code provider."""

import os

DEFAULT_LANGUAGE_CODE = "en"
_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE")


def language_code() -> str:
    """Return the two-plus character language code of the current locale.

    ``LANG=fr_CA.UTF-8`` gives ``"fr"``.  The POSIX ``C`` locale and unset
    variables fall back to ``"en"``.
    """

    for var in _ENV_VARS:
        raw = os.environ.get(var, "")
        code = raw.split(":", 1)[0].split(".", 1)[0].split("@", 1)[0]
        code = code.replace("-", "_").split("_", 1)[0].lower()
        if len(code) >= 2 and code.isalpha() and code != "c":
            return code
    return DEFAULT_LANGUAGE_CODE
