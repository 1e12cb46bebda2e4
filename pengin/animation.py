"""Sprite-sheet animations and the component that plays them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Union

from .entity_id import EntityId
from .field_serializer import FieldSerializer
from .util import Rect


class FrameChoice(enum.Enum):
    """Which frame to show after switching animation."""

    FIRST = "first"
    KEEP_CURRENT = "keep_current"
    LAST = "last"


@dataclass
class AnimationData:
    """One animation: the source rect of frame 0, the frame duration and frame count.

    A frame duration of zero means the animation never advances.
    """

    frame0_source_rect: Rect = field(default_factory=Rect)
    frame_duration: float = 0.0
    frame_count: int = 0

    def serialize(self, serializer: FieldSerializer, fields_out: bytearray, ecs: Any) -> None:
        rect = self.frame0_source_rect
        serializer.serialize_field(
            "Frame0SrcRect", [rect.x, rect.y, rect.width, rect.height], ecs, fields_out
        )
        serializer.serialize_field("FrameDuration", self.frame_duration, ecs, fields_out)
        serializer.serialize_field("FrameCount", self.frame_count, ecs, fields_out)

    def deserialize(
        self,
        serializer: FieldSerializer,
        fields: Mapping[str, Any],
        entity_map: Mapping[Any, EntityId],
    ) -> None:
        values = serializer.deserialize_field("Frame0SrcRect", list[int], fields, entity_map)
        if len(values) != 4:
            raise ValueError("Frame0SrcRect must hold 4 values")
        self.frame0_source_rect = Rect(*values)
        self.frame_duration = serializer.deserialize_field(
            "FrameDuration", float, fields, entity_map
        )
        self.frame_count = serializer.deserialize_field("FrameCount", int, fields, entity_map)


@dataclass
class AnimationComponent:
    """A set of animations with the currently playing one and its progress."""

    animations: List[AnimationData] = field(default_factory=list)
    current_animation: int = 0
    is_playing: bool = True
    frame_timer: float = 0.0
    current_frame: int = 0

    def __post_init__(self) -> None:
        for animation in self.animations:
            if animation.frame_count <= 0:
                raise ValueError("an animation must have at least one frame")
            if animation.frame_duration < 0:
                raise ValueError("an animation can not have a negative frame duration")
            if not animation.frame0_source_rect:
                raise ValueError("an animation needs a valid frame source rect")

    def change_animation(
        self,
        index: int,
        keep_prev_time: bool,
        start_playing: bool,
        new_frame: Union[FrameChoice, int],
    ) -> None:
        """Switch to animation ``index``, choosing the frame to show.

        ``new_frame`` is a :class:`FrameChoice` or an explicit frame number.
        """
        if not 0 <= index < len(self.animations):
            raise IndexError(f"animation index {index} out of range")
        animation = self.animations[index]
        last_frame = animation.frame_count - 1

        if isinstance(new_frame, FrameChoice):
            if new_frame is FrameChoice.FIRST:
                frame = 0
            elif new_frame is FrameChoice.LAST:
                frame = last_frame
            else:
                frame = min(max(self.current_frame, 0), last_frame)
        else:
            if not 0 <= new_frame <= last_frame:
                raise IndexError(f"frame {new_frame} out of range")
            frame = new_frame

        self.current_animation = index
        self.frame_timer = (
            min(self.frame_timer, animation.frame_duration) if keep_prev_time else 0.0
        )
        self.is_playing = start_playing
        self.current_frame = frame

    @staticmethod
    def serialize(
        serializer: FieldSerializer, ecs: Any, entity_id: EntityId, fields_out: bytearray
    ) -> None:
        comp = ecs.get_component(entity_id, AnimationComponent)
        serializer.serialize_field("AnimationData", comp.animations, ecs, fields_out)
        serializer.serialize_field("FrameTimer", comp.frame_timer, ecs, fields_out)
        serializer.serialize_field("CurrAnimationIdx", comp.current_animation, ecs, fields_out)
        serializer.serialize_field("CurrFrame", comp.current_frame, ecs, fields_out)
        serializer.serialize_field("IsPlaying", comp.is_playing, ecs, fields_out)

    @staticmethod
    def deserialize(
        serializer: FieldSerializer,
        ecs: Any,
        entity_id: EntityId,
        fields: Mapping[str, Any],
        entity_map: Mapping[Any, EntityId],
    ) -> None:
        comp = ecs.add_component(entity_id, AnimationComponent())
        comp.animations = serializer.deserialize_field(
            "AnimationData", list[AnimationData], fields, entity_map
        )
        comp.frame_timer = serializer.deserialize_field("FrameTimer", float, fields, entity_map)
        comp.current_animation = serializer.deserialize_field(
            "CurrAnimationIdx", int, fields, entity_map
        )
        comp.current_frame = serializer.deserialize_field("CurrFrame", int, fields, entity_map)
        comp.is_playing = serializer.deserialize_field("IsPlaying", bool, fields, entity_map)