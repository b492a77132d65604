"""Initial load: events, then rsvps, then guests, then one render.

Best-effort: a failed stage is logged and recorded, and the sequence moves
on. An empty or partial state is still rendered.
"""

import logging
from enum import Enum

from party_planner.planner import PartyPlanner

logger = logging.getLogger(__name__)


class BootstrapStage(str, Enum):
    IDLE = "idle"
    LOADING_EVENTS = "loading_events"
    LOADING_RSVPS = "loading_rsvps"
    LOADING_GUESTS = "loading_guests"
    READY = "ready"


class BootstrapSequencer:
    def __init__(self, planner: PartyPlanner) -> None:
        self._planner = planner
        self.stage = BootstrapStage.IDLE
        self.failed_stages: list[BootstrapStage] = []

    def _enter(self, stage: BootstrapStage) -> None:
        logger.debug(f"Bootstrap {self.stage.value} -> {stage.value}")
        self.stage = stage

    async def run(self) -> BootstrapStage:
        steps = (
            (BootstrapStage.LOADING_EVENTS, self._planner.refresh_events),
            (BootstrapStage.LOADING_RSVPS, self._planner.refresh_rsvps),
            (BootstrapStage.LOADING_GUESTS, self._planner.refresh_guests),
        )
        for stage, load in steps:
            self._enter(stage)
            # One render at READY, so every step loads without painting
            if not await load(render=False):
                logger.warning(f"Bootstrap stage {stage.value} failed, continuing")
                self.failed_stages.append(stage)

        self._enter(BootstrapStage.READY)
        self._planner.render()
        logger.info(
            f"Bootstrap ready with {len(self._planner.store.events)} parties, "
            f"{len(self._planner.store.rsvps)} RSVPs, {len(self._planner.store.guests)} guests"
        )
        return self.stage
