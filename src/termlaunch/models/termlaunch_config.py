"""Configuration model for termlaunch."""

from pydantic import BaseModel


class TermlaunchConfig(BaseModel):
    """Persisted user preferences."""

    shell: str | None = None
