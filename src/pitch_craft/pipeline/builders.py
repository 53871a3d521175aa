import random

from pitch_craft.pipeline.catalog import REVENUE_MODEL_COUNT, REVENUE_MODEL_TEMPLATES, SLIDE_BOILERPLATE, TAGLINE_ACTIONS
from pitch_craft.pipeline.records import RevenueModel, StartupData, non_empty


def build_elevator_pitch(data: StartupData) -> str:
    problems = ", ".join(non_empty(data.problem))
    solutions = " and ".join(non_empty(data.solution))
    targets = " and ".join(non_empty(data.target))
    advantages = " and ".join(non_empty(data.unique)[:2])
    return "\n\n".join(
        [
            f"{data.name} addresses the critical challenge of {problems} by {solutions}. ",
            (
                f"We're targeting {targets} who are currently struggling with inefficient alternatives. "
                f"Our unique approach delivers measurable results through {advantages}."
            ),
            (
                f"With a growing market opportunity and proven demand, {data.name} is positioned to capture "
                "significant market share while solving real problems for our customers. "
                "We're seeking investment to scale our solution and expand our reach."
            ),
        ]
    )


def build_tagline(data: StartupData, rng: random.Random) -> str:
    action = rng.choice(TAGLINE_ACTIONS)
    targets = non_empty(data.target)
    domain = targets[0] if targets else "businesses"
    return f"{action} {domain} with {data.name}"


def build_value_proposition(data: StartupData) -> str:
    solutions = non_empty(data.solution)
    advantages = non_empty(data.unique)
    main_benefit = solutions[0] if solutions else "innovative solutions"
    unique_value = advantages[0] if advantages else "cutting-edge technology"
    return (
        f"{data.name} delivers {main_benefit} through {unique_value}, enabling our customers to achieve "
        "their goals faster and more efficiently than ever before. Unlike traditional alternatives, we provide "
        "a seamless experience that reduces costs while increasing productivity and satisfaction."
    )


def build_slide_points(data: StartupData) -> list[str]:
    return [
        f"Problem: {' and '.join(non_empty(data.problem)[:2])}",
        f"Solution: {' and '.join(non_empty(data.solution)[:2])}",
        f"Market Opportunity: Large and growing target market of {' and '.join(non_empty(data.target))}",
        f"Competitive Advantage: {' and '.join(non_empty(data.unique)[:2])}",
        *SLIDE_BOILERPLATE,
    ]


def select_revenue_models(data: StartupData, rng: random.Random) -> list[RevenueModel]:
    # TODO: narrow the catalog by detected industry once per-industry revenue models exist.
    shuffled = list(REVENUE_MODEL_TEMPLATES)
    rng.shuffle(shuffled)
    return shuffled[:REVENUE_MODEL_COUNT]
