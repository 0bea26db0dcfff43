"""Required-field checks for a parsed Config."""

from scaffoldgen.config import Config


_REQUIRED_FIELDS = [
    ("name", "project name cannot be empty"),
    ("directory", "project directory cannot be empty"),
    ("repository", "project repository url cannot be empty"),
]


def validate_config(conf: Config) -> list[ValueError]:
    """Return one ValueError per blank required field.

    Whitespace-only values count as blank. The errors are ordered name,
    directory, repository; an empty list means the config is usable.
    has_static_assets is never checked.
    """
    return [ValueError(message) for attr, message in _REQUIRED_FIELDS
            if not getattr(conf, attr).strip()]
