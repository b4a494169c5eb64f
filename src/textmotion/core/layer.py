"""Text layer models: placement, typography and the attached animation."""

import math
import uuid
from typing import Optional
from pydantic import BaseModel, Field

from .animation import AnimationPath, AnimationSpec, CanvasSize, Transform


class LayerPosition(BaseModel):
    """Normalized placement of the layer's center point.

    (0,0) = top-left, (1,1) = bottom-right of the canvas.
    """
    x: float = 0.5
    y: float = 0.5
    rotation: float = 0.0
    scale: float = 1.0


class TextShadow(BaseModel):
    color: str = "#000000"
    opacity: float = 0.5
    radius: float = 4.0
    offset_x: float = 0.0
    offset_y: float = 2.0


class TextOutline(BaseModel):
    color: str = "#000000"
    width: float = 2.0


class TextLayerStyle(BaseModel):
    """Typography for a text layer. Opaque to the animation engine."""
    font: str = "System"
    size: float = 32.0
    color: str = "#FFFFFF"
    background_color: Optional[str] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    align: str = "center"  # left, center, right
    shadow: Optional[TextShadow] = None
    outline: Optional[TextOutline] = None


class TextLayer(BaseModel):
    """A single text overlay on the canvas.

    The evaluator reads only `animation` and `path`; the rest is carried
    through for the renderer.
    """
    id: str = Field(default_factory=lambda: uuid.uuid4().hex[:8])
    text: str = ""
    position: LayerPosition = Field(default_factory=LayerPosition)
    style: TextLayerStyle = Field(default_factory=TextLayerStyle)
    animation: Optional[AnimationSpec] = None
    path: Optional[AnimationPath] = None
    visible: bool = True
    z_index: int = 0

    @property
    def is_animated(self) -> bool:
        return self.animation is not None

    def anchor(self, canvas_size: CanvasSize) -> tuple[float, float]:
        """Base placement of the layer's center, in pixels."""
        width, height = canvas_size
        return (self.position.x * width, self.position.y * height)

    def visible_text(self, transform: Transform) -> str:
        """Characters revealed so far (typewriter); the full text otherwise."""
        if transform.reveal >= 1.0:
            return self.text
        return self.text[:math.floor(len(self.text) * transform.reveal)]
