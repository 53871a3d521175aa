from dataclasses import asdict, dataclass

from pitch_craft.pipeline.records import GeneratedPitch


@dataclass(frozen=True)
class PitchSection:
    """One copyable block of the output page."""

    id: str
    title: str
    description: str
    content: str

    def as_dict(self) -> dict:
        return asdict(self)


def render_sections(pitch: GeneratedPitch) -> list[PitchSection]:
    slides = "\n".join(f"{idx}. {point}" for idx, point in enumerate(pitch.slide_points, start=1))
    competitors = "\n".join(f"• {name}" for name in pitch.competitors)
    revenue = "\n".join(f"• {model.name}: {model.description}" for model in pitch.revenue_models)
    return [
        PitchSection("elevator", "Elevator Pitch", "30-second version", pitch.elevator_pitch),
        PitchSection("tagline", "Tagline", "Memorable slogan", pitch.tagline),
        PitchSection("value", "Value Proposition", "Core business value", pitch.value_proposition),
        PitchSection("slides", "Slide Bullets", "Presentation outline", slides),
        PitchSection("competitors", "Competitors", "Market landscape", competitors),
        PitchSection("revenue", "Revenue Models", "Monetization strategies", revenue),
    ]
