"""Scaffold generation."""

from scaffoldgen.config import Config


def generate_scaffold(out, conf: Config) -> None:
    """Report where the scaffold for conf would be generated."""
    out.write(f"Generating {conf.name} scaffold at {conf.directory}...\n")
