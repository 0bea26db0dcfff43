"""Configuration dataclass for a scaffoldgen run."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Project parameters collected from the command line."""

    name: str = ""
    directory: str = ""
    repository: str = ""
    has_static_assets: bool = False
