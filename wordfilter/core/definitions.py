# wordfilter/core/definitions.py

"""Constants shared by the filter engine and its resources."""


class Defaults:
    """Default values for the filter configuration."""

    REPLACEMENT = "***"

    # Bundled resources, resolved relative to wordfilter/core
    WORD_LIST = "sensitive-words.txt"
    CHARSETS = "charsets.yaml"


class Script:
    """Names of matchable scripts declared in charsets.yaml."""

    CJK = "cjk"
