"""Declarative animation models: presets, motion paths, and the Transform output.

Pure data handed to the evaluator on every call; nothing here is mutated by it.
"""

from enum import Enum
from typing import NamedTuple
from pydantic import BaseModel


class AnimationCategory(str, Enum):
    ENTRANCE = "entrance"
    EXIT = "exit"
    LOOP = "loop"
    PATH = "path"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class AnimationPreset(str, Enum):
    """Closed set of named animation recipes."""
    # Entrance
    FADE_IN = "fade_in"
    FADE_SLIDE_UP = "fade_slide_up"
    FADE_SLIDE_DOWN = "fade_slide_down"
    FADE_SLIDE_LEFT = "fade_slide_left"
    FADE_SLIDE_RIGHT = "fade_slide_right"
    ZOOM_IN = "zoom_in"
    BOUNCE_IN = "bounce_in"
    POP_IN = "pop_in"
    TYPEWRITER = "typewriter"
    BLUR_IN = "blur_in"
    FLIP_IN_X = "flip_in_x"
    FLIP_IN_Y = "flip_in_y"

    # Exit
    FADE_OUT = "fade_out"
    SLIDE_OUT_UP = "slide_out_up"
    SLIDE_OUT_DOWN = "slide_out_down"
    ZOOM_OUT = "zoom_out"
    BLUR_OUT = "blur_out"
    SHRINK_OUT = "shrink_out"

    # Loop
    PULSE = "pulse"
    BOUNCE = "bounce"
    FLOAT = "float"
    WIGGLE = "wiggle"
    ROTATE = "rotate"
    GLOW = "glow"
    SHAKE = "shake"
    HEARTBEAT = "heartbeat"
    COLOR_CYCLE = "color_cycle"
    SWING = "swing"
    FLASH = "flash"

    # Path
    MOTION_PATH = "motion_path"
    CURVE_PATH = "curve_path"

    @property
    def category(self) -> AnimationCategory:
        return _CATEGORIES[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES.get(self, self.value.replace("_", " ").title())

    @property
    def is_path(self) -> bool:
        return self.category is AnimationCategory.PATH


_EXIT = {
    AnimationPreset.FADE_OUT, AnimationPreset.SLIDE_OUT_UP,
    AnimationPreset.SLIDE_OUT_DOWN, AnimationPreset.ZOOM_OUT,
    AnimationPreset.BLUR_OUT, AnimationPreset.SHRINK_OUT,
}
_LOOP = {
    AnimationPreset.PULSE, AnimationPreset.BOUNCE, AnimationPreset.FLOAT,
    AnimationPreset.WIGGLE, AnimationPreset.ROTATE, AnimationPreset.GLOW,
    AnimationPreset.SHAKE, AnimationPreset.HEARTBEAT,
    AnimationPreset.COLOR_CYCLE, AnimationPreset.SWING, AnimationPreset.FLASH,
}
_PATH = {AnimationPreset.MOTION_PATH, AnimationPreset.CURVE_PATH}

_CATEGORIES: dict[AnimationPreset, AnimationCategory] = {
    p: (AnimationCategory.EXIT if p in _EXIT
        else AnimationCategory.LOOP if p in _LOOP
        else AnimationCategory.PATH if p in _PATH
        else AnimationCategory.ENTRANCE)
    for p in AnimationPreset
}

# Only names that differ from the title-cased value
_DISPLAY_NAMES: dict[AnimationPreset, str] = {
    AnimationPreset.FADE_SLIDE_UP: "Slide Up",
    AnimationPreset.FADE_SLIDE_DOWN: "Slide Down",
    AnimationPreset.FADE_SLIDE_LEFT: "Slide Left",
    AnimationPreset.FADE_SLIDE_RIGHT: "Slide Right",
}


class PathType(str, Enum):
    LINEAR = "linear"
    BEZIER = "bezier"
    CIRCULAR = "circular"
    ARC = "arc"
    WAVE = "wave"
    CUSTOM = "custom"


class CurveType(str, Enum):
    QUADRATIC = "quadratic"
    CUBIC = "cubic"


class PathPoint(BaseModel):
    """Point normalized to the canvas: (0,0) top-left, (1,1) bottom-right."""
    x: float
    y: float

    model_config = {"frozen": True}


class AnimationPath(BaseModel):
    """User-drawn motion trajectory. Point order is significant."""
    type: PathType = PathType.LINEAR
    points: tuple[PathPoint, ...] = ()
    curve_type: CurveType = CurveType.QUADRATIC

    model_config = {"frozen": True}

    @classmethod
    def from_pairs(cls, pairs, type: PathType = PathType.LINEAR,
                   curve_type: CurveType = CurveType.QUADRATIC) -> "AnimationPath":
        return cls(
            type=type,
            points=tuple(PathPoint(x=x, y=y) for x, y in pairs),
            curve_type=curve_type,
        )


class AnimationSpec(BaseModel):
    """Animation attached to a text layer.

    duration <= 0 means the animation is already complete.
    loop_delay is reserved; no timing regime reads it.
    """
    preset: AnimationPreset
    delay: float = 0.0  # seconds
    duration: float = 0.8  # seconds
    loop: bool = False
    loop_delay: float = 0.0

    model_config = {"frozen": True}


class CanvasSize(NamedTuple):
    width: float
    height: float


class Transform(BaseModel):
    """Visual adjustment applied to a layer at one instant.

    Defaults are the identity transform. Translations are pixels, rotations
    degrees; pivot is the normalized transform origin within the layer.
    """
    opacity: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    rotation: float = 0.0
    blur_radius: float = 0.0

    # flip axes
    rotation_x: float = 0.0
    rotation_y: float = 0.0

    # glow halo
    glow_radius: float = 0.0
    glow_opacity: float = 0.0

    hue_rotation: float = 0.0
    reveal: float = 1.0
    pivot_x: float = 0.5
    pivot_y: float = 0.5

    model_config = {"frozen": True}

    @classmethod
    def identity(cls) -> "Transform":
        return _IDENTITY

    @property
    def is_identity(self) -> bool:
        return self == _IDENTITY


_IDENTITY = Transform()
