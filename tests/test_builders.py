import random

from pitch_craft.pipeline.builders import (
    build_elevator_pitch,
    build_slide_points,
    build_tagline,
    build_value_proposition,
    select_revenue_models,
)
from pitch_craft.pipeline.catalog import REVENUE_MODEL_TEMPLATES, TAGLINE_ACTIONS
from pitch_craft.pipeline.records import StartupData

FULL = StartupData(
    name="EcoBox",
    problem=("plastic waste", "  ", "landfill costs", "ocean pollution"),
    solution=("reusable packaging", "", "return logistics"),
    target=("retailers", "cafes"),
    unique=("biodegradable material", "deposit scheme", "local sourcing"),
)

EMPTY = StartupData(name="Xyzzy", problem=("",), solution=("",), target=("",), unique=("",))


class _FixedRandom:
    """Picks the last option and reverses on shuffle."""

    def choice(self, seq):
        return seq[-1]

    def shuffle(self, items: list) -> None:
        items.reverse()


def test_elevator_pitch_template() -> None:
    pitch = build_elevator_pitch(FULL)
    paragraphs = pitch.split("\n\n")
    assert len(paragraphs) == 3
    assert paragraphs[0] == (
        "EcoBox addresses the critical challenge of plastic waste, landfill costs, ocean pollution "
        "by reusable packaging and return logistics. "
    )
    assert "return logistics. \n\nWe're targeting" in pitch
    assert paragraphs[1] == (
        "We're targeting retailers and cafes who are currently struggling with inefficient alternatives. "
        "Our unique approach delivers measurable results through biodegradable material and deposit scheme."
    )
    assert paragraphs[2].startswith("With a growing market opportunity and proven demand, EcoBox is positioned")
    assert pitch.count("EcoBox") == 2


def test_elevator_pitch_degrades_to_empty_substitutions() -> None:
    pitch = build_elevator_pitch(EMPTY)
    assert pitch.startswith("Xyzzy addresses the critical challenge of  by .")
    assert "We're targeting  who are" in pitch
    assert "measurable results through ." in pitch


def test_tagline_uses_first_target() -> None:
    assert build_tagline(FULL, _FixedRandom()) == "Accelerate retailers with EcoBox"


def test_tagline_falls_back_to_businesses() -> None:
    tagline = build_tagline(EMPTY, random.Random(3))
    verb, rest = tagline.split(" ", 1)
    assert verb in TAGLINE_ACTIONS
    assert rest == "businesses with Xyzzy"


def test_tagline_varies_with_random_source() -> None:
    verbs = {build_tagline(FULL, random.Random(seed)).split(" ", 1)[0] for seed in range(50)}
    assert len(verbs) > 1
    assert verbs <= set(TAGLINE_ACTIONS)


def test_value_proposition_uses_first_entries() -> None:
    text = build_value_proposition(FULL)
    assert text.startswith("EcoBox delivers reusable packaging through biodegradable material, enabling")


def test_value_proposition_fallbacks() -> None:
    text = build_value_proposition(EMPTY)
    assert text.startswith("Xyzzy delivers innovative solutions through cutting-edge technology, enabling")


def test_slide_points() -> None:
    points = build_slide_points(FULL)
    assert points == [
        "Problem: plastic waste and landfill costs",
        "Solution: reusable packaging and return logistics",
        "Market Opportunity: Large and growing target market of retailers and cafes",
        "Competitive Advantage: biodegradable material and deposit scheme",
        "Business Model: Multiple revenue streams with scalable growth potential",
        "Traction: Early validation and growing customer interest",
        "Team: Experienced founders with domain expertise",
        "Funding: Seeking investment to accelerate growth and market expansion",
    ]


def test_slide_points_always_eight() -> None:
    points = build_slide_points(EMPTY)
    assert len(points) == 8
    assert points[0] == "Problem: "
    assert points[4:] == build_slide_points(FULL)[4:]


def test_revenue_models_follow_shuffle() -> None:
    models = select_revenue_models(FULL, _FixedRandom())
    assert models == list(reversed(REVENUE_MODEL_TEMPLATES))[:4]


def test_revenue_models_unique_and_from_catalog() -> None:
    seen: set[tuple[str, ...]] = set()
    for seed in range(30):
        models = select_revenue_models(FULL, random.Random(seed))
        assert len(models) == 4
        assert len(set(models)) == 4
        assert all(model in REVENUE_MODEL_TEMPLATES for model in models)
        seen.add(tuple(model.name for model in models))
    assert len(seen) > 1


def test_revenue_models_leave_catalog_untouched() -> None:
    before = tuple(REVENUE_MODEL_TEMPLATES)
    select_revenue_models(FULL, _FixedRandom())
    assert REVENUE_MODEL_TEMPLATES == before


def test_first_paragraph_keeps_trailing_space() -> None:
    pitch = build_elevator_pitch(StartupData(name="A", problem=("x",), solution=("y",)))
    assert "by y. \n\nWe're" in pitch


def test_bare_string_bullet_is_one_entry() -> None:
    data = StartupData(name="EcoBox", problem="plastic waste", solution=["reusable packaging"])  # type: ignore[arg-type]
    assert data.problem == ("plastic waste",)
    assert data.solution == ("reusable packaging",)
    assert build_elevator_pitch(data).startswith("EcoBox addresses the critical challenge of plastic waste by")
