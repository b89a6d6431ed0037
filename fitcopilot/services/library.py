from __future__ import annotations

import json
from pathlib import Path
from typing import List, Union

from fitcopilot.config import get_settings
from fitcopilot.models.workout import Workout


def load_workouts(path: Union[str, Path, None] = None) -> List[Workout]:
    """Load saved workouts from a JSON export of the workouts endpoint."""
    path = Path(path or get_settings().SAMPLE_WORKOUTS_FILE)
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    return [Workout.model_validate(item) for item in raw]
