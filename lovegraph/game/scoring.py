"""Score calculation for a won game. Pure math, fully deterministic."""

from __future__ import annotations

from dataclasses import dataclass, asdict

# ── Defaults ──────────────────────────────────────────────

BASE_SCORE = 1000
TIME_BUDGET_SECONDS = 300   # Every second under this is worth a point
POINTS_PER_SPARE_ATTEMPT = 50


@dataclass(frozen=True)
class ScoringWeights:
    """Tunable scoring weights. Game modes swap these, not the formula."""
    base: int = BASE_SCORE
    time_budget_seconds: int = TIME_BUDGET_SECONDS
    points_per_spare_attempt: int = POINTS_PER_SPARE_ATTEMPT

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> ScoringWeights:
        return cls(
            base=int(d.get("base", BASE_SCORE)),
            time_budget_seconds=int(d.get("time_budget_seconds", TIME_BUDGET_SECONDS)),
            points_per_spare_attempt=int(
                d.get("points_per_spare_attempt", POINTS_PER_SPARE_ATTEMPT)
            ),
        )


def compute_score(
    elapsed_ms: float,
    attempts_used: int,
    max_attempts: int,
    weights: ScoringWeights = ScoringWeights(),
) -> int:
    """Score = base + time bonus + spare-attempt bonus.

    time bonus: one point per whole second left of the time budget.
    attempt bonus: a fixed amount per unused attempt.
    Both bonuses floor at zero.
    """
    elapsed_seconds = max(0, int(elapsed_ms // 1000))
    time_bonus = max(0, weights.time_budget_seconds - elapsed_seconds)
    attempts_bonus = max(
        0, (max_attempts - attempts_used) * weights.points_per_spare_attempt
    )
    return weights.base + time_bonus + attempts_bonus
