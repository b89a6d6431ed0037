from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, TypeVar, Union


class Unspecified(Enum):
    """Marker for a profile field the user never filled in.

    Distinct from an empty tuple, which means the user explicitly chose none.
    """

    UNSPECIFIED = "unspecified"

    def __repr__(self) -> str:
        return "UNSPECIFIED"

    def __bool__(self) -> bool:
        return False


UNSPECIFIED = Unspecified.UNSPECIFIED

T = TypeVar("T")
Maybe = Union[T, Unspecified]


def is_specified(value: object) -> bool:
    return value is not UNSPECIFIED


@dataclass(frozen=True)
class WorkoutGenerationContext:
    """Profile fields re-projected into the generator's vocabulary.

    Recomputed whenever the source profile changes; never persisted.
    """

    fitness_level: Maybe[str]
    goals: Maybe[Tuple[str, ...]]
    primary_goal: Maybe[str]
    default_equipment: Maybe[Tuple[str, ...]]
    restrictions: Maybe[Tuple[str, ...]]
    preferred_location: Maybe[str]
    workout_frequency: Maybe[str]
    suggested_duration: Maybe[str]
    default_intensity: Maybe[int]
    exercise_complexity: Maybe[str]

    def unspecified_fields(self) -> Tuple[str, ...]:
        return tuple(name for name, value in self.__dict__.items() if value is UNSPECIFIED)


@dataclass(frozen=True)
class CompletionStatus:
    completed: int
    total: int

    @property
    def fraction(self) -> float:
        return self.completed / self.total if self.total else 0.0


class ReadinessState(str, Enum):
    INCOMPLETE = "incomplete"
    READY = "ready"
    GENERATING = "generating"
