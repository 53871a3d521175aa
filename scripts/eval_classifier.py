#!/usr/bin/env python3
"""Check the keyword classifier against hand-labeled startups.

Besides accuracy, the report lists which keyword fired for every sample and
calls out hits where the keyword only occurs inside a longer word
("retailers" firing the tech keyword "ai"), since those are the usual cause
of wrong industries.
"""
from __future__ import annotations

import argparse
import json
from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _bootstrap_pythonpath() -> None:
    import sys

    src = _repo_root() / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_bootstrap_pythonpath()

from pitch_craft.pipeline.catalog import INDUSTRY_KEYWORDS  # noqa: E402
from pitch_craft.pipeline.industry import IndustryMatch, match_industry  # noqa: E402
from pitch_craft.pipeline.records import StartupData  # noqa: E402


@dataclass
class Sample:
    data: StartupData
    gold_industry: str
    note: str = ""


@dataclass
class Prediction:
    sample: Sample
    match: IndustryMatch

    @property
    def correct(self) -> bool:
        return self.match.industry == self.sample.gold_industry

    def as_row(self) -> dict[str, Any]:
        return {
            "name": self.sample.data.name,
            "gold_industry": self.sample.gold_industry,
            "correct": self.correct,
            "note": self.sample.note,
            **self.match.as_meta(),
        }


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate the industry keyword classifier.")
    parser.add_argument("--input", default="eval/classifier_labeled.sample.jsonl", help="Labeled JSONL samples.")
    parser.add_argument("--output-dir", default="eval/reports", help="Directory for the Markdown and JSON reports.")
    parser.add_argument("--limit", type=int, default=0, help="Limit evaluated samples (0 means all).")
    return parser.parse_args(argv)


def load_samples(path: Path, limit: int = 0) -> list[Sample]:
    samples: list[Sample] = []
    with path.open("r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            row = json.loads(line)
            name = str(row.get("name", "")).strip()
            gold = str(row.get("gold_industry", "")).strip().lower()
            if not name or gold not in INDUSTRY_KEYWORDS:
                raise ValueError(f"line {line_no}: name and a known gold_industry are required")
            data = StartupData(
                name=name,
                problem=row.get("problem", ()),
                solution=row.get("solution", ()),
                target=row.get("target", ()),
                unique=row.get("unique", ()),
            )
            samples.append(Sample(data=data, gold_industry=gold, note=str(row.get("note", "")).strip()))
            if 0 < limit <= len(samples):
                break
    if not samples:
        raise ValueError(f"{path}: no samples")
    return samples


def predict_industries(samples: list[Sample]) -> list[Prediction]:
    return [Prediction(sample=sample, match=match_industry(sample.data)) for sample in samples]


def compute_metrics(predictions: list[Prediction]) -> dict[str, Any]:
    total = len(predictions)
    correct = sum(1 for p in predictions if p.correct)
    per_industry: dict[str, dict[str, int]] = {
        industry: {"gold": 0, "predicted": 0, "correct": 0} for industry in INDUSTRY_KEYWORDS
    }
    for p in predictions:
        per_industry[p.sample.gold_industry]["gold"] += 1
        per_industry[p.match.industry]["predicted"] += 1
        if p.correct:
            per_industry[p.match.industry]["correct"] += 1

    keyword_hits = Counter(f"{p.match.industry}:{p.match.keyword or '(default)'}" for p in predictions)
    embedded = [p for p in predictions if p.match.embedded]
    return {
        "total": total,
        "correct": correct,
        "accuracy": correct / max(total, 1),
        "per_industry": per_industry,
        "keyword_hits": dict(keyword_hits.most_common()),
        "embedded_hits": [p.sample.data.name for p in embedded],
        "embedded_misses": [p.sample.data.name for p in embedded if not p.correct],
    }


def build_markdown_report(input_path: str, metrics: dict[str, Any], predictions: list[Prediction]) -> str:
    lines = [
        "# Industry Classifier Report",
        "",
        f"- input: `{input_path}`",
        f"- accuracy: `{metrics['accuracy']:.2%}` ({metrics['correct']}/{metrics['total']})",
        f"- embedded keyword hits: `{len(metrics['embedded_hits'])}`, wrong: `{len(metrics['embedded_misses'])}`",
        "",
        "## Per Industry",
        "",
        "| industry | gold | predicted | correct |",
        "|---|---:|---:|---:|",
    ]
    for industry, counts in metrics["per_industry"].items():
        if counts["gold"] or counts["predicted"]:
            lines.append(f"| {industry} | {counts['gold']} | {counts['predicted']} | {counts['correct']} |")

    lines += ["", "## Predictions", "", "| name | gold | predicted | keyword | embedded |", "|---|---|---|---|---|"]
    for p in predictions:
        mark = "" if p.correct else " ✗"
        keyword = p.match.keyword or "-"
        embedded = "yes" if p.match.embedded else ""
        lines.append(f"| {p.sample.data.name} | {p.sample.gold_industry} | {p.match.industry}{mark} | {keyword} | {embedded} |")
    lines.append("")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    input_path = Path(args.input)
    predictions = predict_industries(load_samples(input_path, args.limit))
    metrics = compute_metrics(predictions)

    out_dir = Path(args.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    stem = f"classifier_eval_{datetime.now():%Y%m%d_%H%M%S}"
    md_path = out_dir / f"{stem}.md"
    json_path = out_dir / f"{stem}.json"
    md_path.write_text(build_markdown_report(str(input_path), metrics, predictions), encoding="utf-8")
    json_path.write_text(
        json.dumps(
            {"input": str(input_path), "metrics": metrics, "rows": [p.as_row() for p in predictions]},
            ensure_ascii=False,
            indent=2,
        ),
        encoding="utf-8",
    )

    print(f"[classifier-eval] accuracy={metrics['accuracy']:.2%} embedded_misses={metrics['embedded_misses']}")
    print(f"[classifier-eval] markdown={md_path}")
    print(f"[classifier-eval] json={json_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
