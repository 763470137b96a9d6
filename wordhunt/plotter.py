from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Protocol, Sequence

from wordhunt.mapper import GRID_CELL_SIZE_MM, MachinePoint, generate_path
from wordhunt.optimizer import POINTS_PER_SCORE, Schedule, ScheduledWord

logger = logging.getLogger("wordhunt")


class Actuator(Protocol):
    async def go_to(self, x: float, y: float) -> None: ...

    async def servo(self, angle: int) -> None: ...

    async def draw_path(self, points: Sequence[MachinePoint]) -> None: ...


class PenState(Enum):
    RAISED = "raised"
    LOWERED = "lowered"


@dataclass
class PlotReport:
    drawn: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    theoretical_time: float = 0.0
    actual_time: float = 0.0
    points: int = 0

    def summary(self) -> dict:
        return {
            "drawn": len(self.drawn),
            "failed": len(self.failed),
            "theoretical_time": round(self.theoretical_time, 3),
            "actual_time": round(self.actual_time, 3),
            "points": self.points,
        }


class PlotExecutor:
    """Draws scheduled words one at a time on an actuator.

    Commands are awaited strictly in order. A command that has not
    finished after command_timeout seconds is treated as complete.
    """

    def __init__(
        self,
        actuator: Actuator,
        cell_size: float = GRID_CELL_SIZE_MM,
        pen_up_angle: int = 1000,
        pen_down_angle: int = 1700,
        pen_down_delay: float = 0.05,
        pen_up_delay: float = 0.11,
        command_timeout: float | None = 5.0,
    ):
        self.actuator = actuator
        self.cell_size = cell_size
        self.pen_angles = {PenState.RAISED: pen_up_angle, PenState.LOWERED: pen_down_angle}
        self.pen_down_delay = pen_down_delay
        self.pen_up_delay = pen_up_delay
        self.command_timeout = command_timeout
        self.pen = PenState.RAISED

    @classmethod
    def from_settings(cls, actuator: Actuator, cfg) -> PlotExecutor:
        return cls(
            actuator,
            cell_size=cfg.GRID_CELL_SIZE_MM,
            pen_up_angle=cfg.PEN_UP_ANGLE,
            pen_down_angle=cfg.PEN_DOWN_ANGLE,
            pen_down_delay=cfg.PEN_DOWN_DELAY,
            pen_up_delay=cfg.PEN_UP_DELAY,
            command_timeout=cfg.COMMAND_TIMEOUT,
        )

    async def _command(self, name: str, coro: Awaitable[None]):
        if self.command_timeout is None:
            await coro
            return
        try:
            await asyncio.wait_for(coro, self.command_timeout)
        except asyncio.TimeoutError:
            logger.warning("Actuator command %s timed out after %.2fs, continuing", name, self.command_timeout)

    async def set_pen(self, state: PenState):
        await self._command(f"servo({state.value})", self.actuator.servo(self.pen_angles[state]))
        self.pen = state
        delay = self.pen_down_delay if state is PenState.LOWERED else self.pen_up_delay
        if delay > 0:
            await asyncio.sleep(delay)

    async def draw_word(self, entry: ScheduledWord):
        path = generate_path(entry.positions, self.cell_size)
        first, rest = path[0], path[1:]
        await self._command("go_to", self.actuator.go_to(first.x, first.y))
        await self.set_pen(PenState.LOWERED)
        await self._command("draw_path", self.actuator.draw_path(rest))
        await self.set_pen(PenState.RAISED)
        logger.info("Finished drawing word: %s", entry.word)

    async def draw_schedule(self, schedule: Schedule) -> PlotReport:
        report = PlotReport()
        start = time.perf_counter()
        for entry in schedule:
            word_start = time.perf_counter()
            try:
                await self.draw_word(entry)
            except Exception as e:
                logger.error("Failed to draw word %r: %s", entry.word, e)
                report.failed.append(entry.word)
                if self.pen is PenState.LOWERED:
                    await self.set_pen(PenState.RAISED)
                continue

            report.drawn.append(entry.word)
            report.theoretical_time += entry.total_time
            report.points += entry.candidate.score * POINTS_PER_SCORE
            logger.info("word=%s theoretical=%.2fs actual=%.2fs points=%d",
                        entry.word, entry.total_time, time.perf_counter() - word_start, report.points)

        report.actual_time = time.perf_counter() - start
        logger.info("Plot finished: %s", report.summary())
        return report
