import logging
import random
from dataclasses import dataclass

from pitch_craft.config import Settings, get_settings
from pitch_craft.pipeline.builders import (
    build_elevator_pitch,
    build_slide_points,
    build_tagline,
    build_value_proposition,
    select_revenue_models,
)
from pitch_craft.pipeline.industry import detect_industry, select_competitors
from pitch_craft.pipeline.records import GeneratedPitch, StartupData

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    pitch: GeneratedPitch
    industry: str


class PitchGenerator:
    """Single-pass pitch generation.

    Classification feeds only the competitor list; every other section is
    built independently from the raw input. The random source is the only
    source of variation between calls, so a seeded ``random.Random`` makes
    the output fully reproducible.
    """

    def __init__(self, settings: Settings | None = None, rng: random.Random | None = None) -> None:
        self.settings = settings or get_settings()
        self.rng = rng or random.Random(self.settings.random_seed)

    def run(self, data: StartupData) -> GenerationResult:
        logger.info("classify")
        industry = detect_industry(data)
        logger.info("compose")
        pitch = GeneratedPitch(
            elevator_pitch=build_elevator_pitch(data),
            tagline=build_tagline(data, self.rng),
            value_proposition=build_value_proposition(data),
            slide_points=tuple(build_slide_points(data)),
            competitors=tuple(select_competitors(industry)),
            revenue_models=tuple(select_revenue_models(data, self.rng)),
        )
        return GenerationResult(pitch=pitch, industry=industry)

    def generate(self, data: StartupData) -> GeneratedPitch:
        return self.run(data).pitch


def generate_pitch(data: StartupData, rng: random.Random | None = None) -> GeneratedPitch:
    return PitchGenerator(rng=rng).generate(data)
