from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class StartupData:
    """Startup facts as entered in the form.

    Bullet fields keep the order the user typed them in and may contain
    blank entries; builders drop those before use.
    """

    name: str
    problem: tuple[str, ...] = field(default_factory=tuple)
    solution: tuple[str, ...] = field(default_factory=tuple)
    target: tuple[str, ...] = field(default_factory=tuple)
    unique: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for name in ("problem", "solution", "target", "unique"):
            value = getattr(self, name)
            # a bare string is one bullet, not a sequence of characters
            bullets = (value,) if isinstance(value, str) else tuple(value)
            object.__setattr__(self, name, bullets)

    def all_text(self) -> list[str]:
        return [self.name, *self.problem, *self.solution, *self.target, *self.unique]


@dataclass(frozen=True)
class RevenueModel:
    name: str
    description: str


@dataclass(frozen=True)
class GeneratedPitch:
    elevator_pitch: str
    tagline: str
    value_proposition: str
    slide_points: tuple[str, ...]
    competitors: tuple[str, ...]
    revenue_models: tuple[RevenueModel, ...]

    def as_dict(self) -> dict:
        payload = asdict(self)
        payload["slide_points"] = list(self.slide_points)
        payload["competitors"] = list(self.competitors)
        payload["revenue_models"] = [asdict(model) for model in self.revenue_models]
        return payload


def non_empty(items: tuple[str, ...]) -> list[str]:
    """Drop blank bullet entries, keeping the rest verbatim."""
    return [item for item in items if item.strip()]
