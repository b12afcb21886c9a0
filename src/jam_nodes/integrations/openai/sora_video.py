"""
Sora Video Node

Generates a video with OpenAI Sora 2. Requires ``context.services.openai``.
"""

import logging
import time
from typing import Any, Dict, Literal

from pydantic import BaseModel

from ...core.execution import error_message
from ...core.services import ServiceNotConfiguredError
from ...core.types import (
    NodeCategory,
    NodeExecutionContext,
    NodeExecutionResult,
    define_node,
)

logger = logging.getLogger(__name__)

SoraModel = Literal["sora-2", "sora-2-pro"]
VideoSize = Literal["720x1280", "1280x720", "1024x1792", "1792x1024"]


class SoraVideoInput(BaseModel):
    prompt: str
    model: SoraModel = "sora-2"
    seconds: Literal[4, 8, 12] = 4
    size: VideoSize = "1280x720"


class GeneratedVideo(BaseModel):
    url: str
    duration_seconds: float
    size: str
    model: str


class SoraVideoOutput(BaseModel):
    video: GeneratedVideo
    processing_time_seconds: int


async def _execute(input: Dict[str, Any], context: NodeExecutionContext) -> NodeExecutionResult:
    try:
        openai = context.services.require("openai")

        model = input.get("model") or "sora-2"
        size = input.get("size") or "1280x720"
        start = time.monotonic()

        result = await openai.generate_video(
            prompt=input["prompt"],
            model=model,
            seconds=input.get("seconds") or 4,
            size=size,
        )

        processing_time = round(time.monotonic() - start)
        logger.info(f"[sora_video] Generated {model} video in {processing_time}s")

        return NodeExecutionResult.ok({
            "video": {
                "url": result["url"],
                "duration_seconds": result["duration_seconds"],
                "size": size,
                "model": model,
            },
            "processing_time_seconds": processing_time,
        })

    except ServiceNotConfiguredError as e:
        return NodeExecutionResult.fail(str(e))
    except Exception as e:
        logger.exception(f"[sora_video] Error: {e}")
        return NodeExecutionResult.fail(error_message(e))


sora_video_node = define_node(
    type="sora_video",
    name="Generate Sora Video",
    description="Generate AI video using OpenAI Sora 2",
    category=NodeCategory.INTEGRATION,
    input_shape=SoraVideoInput,
    output_shape=SoraVideoOutput,
    executor=_execute,
    capabilities={"supports_rerun": True},
    estimated_duration=60,
)
