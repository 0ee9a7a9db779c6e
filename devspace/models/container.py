"""Container and image records as observed from the Docker engine."""

from typing import Dict, List

from pydantic import BaseModel, Field

from ..core.constants import RUNNING_STATE


class ContainerSummary(BaseModel):
    """A container known to the Docker engine."""
    id: str
    name: str
    state: str = ""
    image: str = ""
    labels: Dict[str, str] = Field(default_factory=dict)

    @property
    def running(self) -> bool:
        return self.state == RUNNING_STATE


class ImageSummary(BaseModel):
    """An image known to the Docker engine."""
    id: str
    tags: List[str] = Field(default_factory=list)
    labels: Dict[str, str] = Field(default_factory=dict)
