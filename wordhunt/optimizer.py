from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from wordhunt.finder import Occurrence
from wordhunt.grid import Position

logger = logging.getLogger("wordhunt")

ORIGIN = Position(0, 0)

# Points shown in-game are score * 100
POINTS_PER_SCORE = 100

_WORD_SCORES = {3: 1, 4: 4, 5: 8, 6: 14, 7: 18}


def word_score(length: int) -> int:
    return _WORD_SCORES.get(length, 22)


def distance(p1: Position, p2: Position) -> int:
    """Travel distance between two cells for the plotter's diagonal axes.

    The motors move along x+y and x-y, so the cost is the Chebyshev
    distance in that rotated frame.
    """
    return max(
        abs((p2.row + p2.col) - (p1.row + p1.col)),
        abs((p2.row - p2.col) - (p1.row - p1.col)),
    )


@dataclass(frozen=True)
class Candidate:
    word: str
    positions: tuple[Position, ...]
    start_pos: Position
    end_pos: Position
    score: int
    distance: int
    input_time: float

    @classmethod
    def from_occurrence(cls, occurrence: Occurrence, movement_speed: float) -> Candidate:
        word = occurrence.word.lower()
        positions = tuple(occurrence.positions)
        path_distance = sum(distance(a, b) for a, b in zip(positions, positions[1:]))
        return cls(
            word=word,
            positions=positions,
            start_pos=positions[0],
            end_pos=positions[-1],
            score=word_score(len(word)),
            distance=path_distance,
            input_time=path_distance / movement_speed,
        )


@dataclass(frozen=True)
class Evaluation:
    """Cost of a candidate priced from one particular head position."""

    movement_time: float
    total_time: float
    efficiency_score: float


def evaluate(candidate: Candidate, head: Position, movement_speed: float,
             setup_constant: float, alpha: float = 1, beta: float = 1) -> Evaluation:
    movement_time = setup_constant + distance(head, candidate.start_pos) / movement_speed
    total_time = candidate.input_time + movement_time
    # one-cell word under the head with no setup costs nothing; rank it first
    efficiency = candidate.score ** alpha / total_time ** beta if total_time > 0 else math.inf
    return Evaluation(
        movement_time=movement_time,
        total_time=total_time,
        efficiency_score=efficiency,
    )


@dataclass(frozen=True)
class ScheduledWord:
    candidate: Candidate
    evaluation: Evaluation

    @property
    def word(self) -> str:
        return self.candidate.word

    @property
    def positions(self) -> tuple[Position, ...]:
        return self.candidate.positions

    @property
    def total_time(self) -> float:
        return self.evaluation.total_time

    def to_dict(self) -> dict:
        c, e = self.candidate, self.evaluation
        return {
            "word": c.word,
            "positions": [list(p) for p in c.positions],
            "startPos": list(c.start_pos),
            "endPos": list(c.end_pos),
            "inputTime": c.input_time,
            "score": c.score,
            "distance": c.distance,
            "efficiencyScore": e.efficiency_score if math.isfinite(e.efficiency_score) else None,
            "movementTime": e.movement_time,
            "totalTime": e.total_time,
        }


@dataclass
class Schedule:
    entries: list[ScheduledWord] = field(default_factory=list)

    def __iter__(self) -> Iterator[ScheduledWord]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, idx: int) -> ScheduledWord:
        return self.entries[idx]

    @property
    def words(self) -> list[str]:
        return [e.word for e in self.entries]

    @property
    def total_time(self) -> float:
        return sum(e.total_time for e in self.entries)

    @property
    def total_score(self) -> int:
        return sum(e.candidate.score for e in self.entries)

    @property
    def points(self) -> int:
        return self.total_score * POINTS_PER_SCORE

    def to_list(self) -> list[dict]:
        return [e.to_dict() for e in self.entries]


def optimize(
    occurrences: Iterable[Occurrence],
    time_budget: float = 90,
    movement_speed: float = 12.5,
    setup_constant: float = 0.19,
    alpha: float = 1,
    beta: float = 1,
) -> Schedule:
    """Greedily pick and order words to draw within time_budget seconds.

    Every round re-prices the remaining candidates from the current head
    position and takes the one with the best score^alpha / time^beta.
    Once a word is drawn, other occurrences of the same text are dropped.

    A best candidate that does not fit the remaining budget is dropped for
    good. Since distance obeys the triangle inequality and setup_constant
    is non-negative, it could not fit from any later head position either.
    """
    if movement_speed <= 0:
        raise ValueError(f"movement_speed must be positive, got {movement_speed}")
    if time_budget < 0:
        raise ValueError(f"time_budget must be non-negative, got {time_budget}")
    if setup_constant < 0:
        raise ValueError(f"setup_constant must be non-negative, got {setup_constant}")

    remaining = [Candidate.from_occurrence(o, movement_speed) for o in occurrences]
    schedule = Schedule()
    head = ORIGIN
    elapsed = 0.0
    discarded = 0

    while elapsed < time_budget and remaining:
        evaluations = [evaluate(c, head, movement_speed, setup_constant, alpha, beta) for c in remaining]
        # max() keeps the first of equal scores
        best_idx = max(range(len(remaining)), key=lambda i: evaluations[i].efficiency_score)
        best_eval = evaluations[best_idx]

        chosen = remaining.pop(best_idx)
        if elapsed + best_eval.total_time > time_budget:
            discarded += 1
            continue

        schedule.entries.append(ScheduledWord(chosen, best_eval))
        elapsed += best_eval.total_time
        head = chosen.end_pos
        remaining = [c for c in remaining if c.word != chosen.word]

    logger.info("Scheduled %d words (%d points) in %.2fs of %.2fs budget, %d discarded",
                len(schedule), schedule.points, elapsed, time_budget, discarded)
    return schedule
