"""Defaults shared across pydgen modules."""

DEFAULT_MARKDOWN_PRESET = "commonmark"
"""markdown-it preset used when no renderer is given."""

TEXT_ENCODING = "utf-8"
"""Encoding for every text file read or written."""

YAML_SUFFIXES = frozenset({".yml", ".yaml"})

JSON_SUFFIXES = frozenset({".json"})

HIDDEN_PREFIX = "."
"""Names starting with this prefix count as hidden Unix files."""

PATH_SEPARATOR = "."
"""Separator used when a field path is shown as a single string."""
