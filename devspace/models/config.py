"""Project configuration model."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.constants import DEFAULT_SHELL


class DevspaceConfig(BaseModel):
    """Settings read from ``.devspace/config``."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore', frozen=True)

    image: str = ""
    dockerfile: str = ""
    post_create_command: List[str] = Field(default_factory=list, alias="postCreateCommand")
    shell: str = DEFAULT_SHELL
    dotfiles: str = ""
    user: str = ""
    root_pattern: List[str] = Field(default_factory=list, alias="rootPattern")

    @field_validator('post_create_command', 'root_pattern', mode='before')
    @classmethod
    def _split_string(cls, value):
        # A single string is accepted and split on whitespace.
        if isinstance(value, str):
            return value.split()
        return value

    @field_validator('shell', mode='before')
    @classmethod
    def _default_shell(cls, value):
        return value or DEFAULT_SHELL

    @property
    def builds_image(self) -> bool:
        """True when the image is built from a Dockerfile instead of pulled."""
        return bool(self.dockerfile)
