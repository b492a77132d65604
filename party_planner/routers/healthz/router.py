from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from party_planner.bootstrap import BootstrapSequencer, BootstrapStage
from party_planner.pages.router import get_planner
from party_planner.planner import PartyPlanner

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    version: str = "0.1.0"
    bootstrap: BootstrapStage
    failed_stages: list[BootstrapStage] = []
    parties: int


def get_sequencer(request: Request) -> BootstrapSequencer:
    """Dependency to get the startup bootstrap sequencer. Override in tests."""
    return request.app.state.sequencer


@router.get("/", response_model=HealthCheckResponse)
async def health_check(
    planner: PartyPlanner = Depends(get_planner),
    sequencer: BootstrapSequencer = Depends(get_sequencer),
) -> HealthCheckResponse:
    """
    Health check endpoint. Reports "starting" until the first snapshot is rendered.
    """
    return HealthCheckResponse(
        status="healthy" if sequencer.stage == BootstrapStage.READY else "starting",
        bootstrap=sequencer.stage,
        failed_stages=sequencer.failed_stages,
        parties=len(planner.store.events),
    )
