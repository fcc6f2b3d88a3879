"""
Animation Scripts

Time-stamped script entries carried by an animation's effect channel.
Scripts are kept as source text; running them is up to the host.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..raw.model_data import AnimationType, KeyFrameChannel, ModelAnimation, ModelAnimator


@dataclass(frozen=True)
class TimeScript:
    time: float
    script: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.script


@dataclass
class BlueprintScript:
    """Script channel of one animation."""

    name: str
    loop_type: AnimationType
    length: float
    scripts: List[TimeScript] = field(default_factory=list)

    @classmethod
    def from_model(cls, animation: ModelAnimation, animator: Optional[ModelAnimator] = None) -> "BlueprintScript":
        """
        Build the script channel of an animation.

        Empty entries always bound the channel at 0 and the animation
        length; timeline keyframes of ``animator`` fill in between.

        Args:
            animation: Source animation
            animator: Effect animator, if the animation has one
        """
        scripts = [TimeScript(0.0)]
        if animator is not None:
            keyframes = sorted(animator.keyframes, key=lambda k: k.time)
            for keyframe in keyframes:
                if keyframe.channel != KeyFrameChannel.TIMELINE or keyframe.time > animation.length:
                    continue
                for point in keyframe.data_points:
                    if point.script.strip():
                        scripts.append(TimeScript(keyframe.time, point.script))
        scripts.append(TimeScript(animation.length))

        return cls(
            name=animation.name,
            loop_type=animation.loop_type,
            length=animation.length,
            scripts=scripts,
        )

    def __repr__(self):
        return f"BlueprintScript(name='{self.name}', scripts={len(self.scripts)})"
