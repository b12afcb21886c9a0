from .sora_video import (
    GeneratedVideo,
    SoraVideoInput,
    SoraVideoOutput,
    sora_video_node,
)

__all__ = [
    "GeneratedVideo",
    "SoraVideoInput",
    "SoraVideoOutput",
    "sora_video_node",
]
