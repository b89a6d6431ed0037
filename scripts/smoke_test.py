from __future__ import annotations

import logging

from fitcopilot.config import configure_logging
from fitcopilot.models import WorkoutFilters
from fitcopilot.services import build_preset_catalog, filter_and_sort, load_workouts

logger = logging.getLogger("fitcopilot.smoke")


def main() -> None:
    configure_logging()

    workouts = load_workouts()
    assert workouts, "No sample workouts loaded — check SAMPLE_WORKOUTS_FILE."

    catalog = build_preset_catalog()
    for preset in catalog:
        visible = filter_and_sort(workouts, catalog.apply(WorkoutFilters(), preset.id))
        logger.info("%-16s -> %s", preset.id, [w.id for w in visible])

    everything = filter_and_sort(workouts, WorkoutFilters())
    assert len(everything) == len(workouts), "Default filters dropped workouts"

    print(f"SMOKE OK — workouts={len(workouts)} presets={len(catalog)}")


if __name__ == "__main__":
    main()
