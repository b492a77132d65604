from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from party_planner.dtos import Identifier, InvalidActionError
from party_planner.pages import urls
from party_planner.planner import PartyPlanner
from party_planner.view.forms import SubmitEvent
from party_planner.view.nodes import Action

router = APIRouter()


class ActionRequest(BaseModel):
    """A view action forwarded from the page."""

    name: str
    args: list[Identifier] = []
    form: dict[str, str] | None = None


def get_planner(request: Request) -> PartyPlanner:
    """Dependency to get the planner built at startup. Override in tests."""
    return request.app.state.planner


@router.get(urls.PAGE_URL, response_class=HTMLResponse)
async def page(planner: PartyPlanner = Depends(get_planner)) -> str:
    """
    Return the host document with the last rendered tree mounted.
    """
    return planner.driver.document.to_html()


@router.post(urls.ACTIONS_URL, response_class=HTMLResponse)
async def run_action(
    action_request: ActionRequest,
    planner: PartyPlanner = Depends(get_planner),
) -> str:
    """
    Dispatch a view action and return the re-rendered mount point.
    Failed remote calls leave the previous render in place.
    """
    submit_event = SubmitEvent(form_data=action_request.form) if action_request.form else None
    try:
        await planner.dispatch(
            Action(name=action_request.name, args=tuple(action_request.args)),
            submit_event=submit_event,
        )
    except InvalidActionError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return planner.driver.mount.to_html()
