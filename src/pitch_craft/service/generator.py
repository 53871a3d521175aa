import asyncio
import logging
from typing import Any

from pitch_craft.config import Settings, get_settings
from pitch_craft.pipeline.records import StartupData
from pitch_craft.service.sections import render_sections
from pitch_craft.workflow.generation import PitchGenerator

logger = logging.getLogger(__name__)

SECTION_IDS = ["elevator", "tagline", "value", "slides", "competitors", "revenue"]


class GenerateService:
    def __init__(self, generator: PitchGenerator | None = None, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.generator = generator or PitchGenerator(self.settings)

    async def generate(self, data: StartupData) -> dict:
        try:
            if self.settings.simulated_latency_seconds > 0:
                await asyncio.sleep(self.settings.simulated_latency_seconds)
            output = self.generator.run(data)
            sections = render_sections(output.pitch)
            logger.info(
                "generate.meta name=%s industry=%s slides=%d competitors=%d revenue_models=%d",
                data.name,
                output.industry,
                len(output.pitch.slide_points),
                len(output.pitch.competitors),
                len(output.pitch.revenue_models),
            )
            return {
                "pitch": output.pitch.as_dict(),
                "industry": output.industry,
                "sections": [section.as_dict() for section in sections],
                "meta": {
                    "sections": SECTION_IDS,
                    "seeded": self.settings.random_seed is not None,
                    "simulated_latency_seconds": self.settings.simulated_latency_seconds,
                },
            }
        except Exception as exc:
            logger.exception("generate.failed name=%s", data.name)
            return {
                "pitch": None,
                "industry": None,
                "sections": [],
                "meta": {
                    "sections": SECTION_IDS,
                    "error": self._error_payload(exc),
                },
            }

    @staticmethod
    def _error_payload(exc: Exception) -> dict[str, Any]:
        return {
            "type": exc.__class__.__name__,
            "message": str(exc),
            "hint": "check the generate.failed entry in the service log",
        }
