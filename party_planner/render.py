import logging
from typing import Callable

from party_planner.state.store import AppStateStore, StateSnapshot
from party_planner.view.document import HostDocument, MountPoint
from party_planner.view.nodes import ViewNode
from party_planner.view.regions import build_app

logger = logging.getLogger(__name__)

ViewBuilder = Callable[[StateSnapshot], tuple[ViewNode, ...]]


class RenderDriver:
    """The only writer of the mounted document.

    render() rebuilds the whole tree from the current snapshot and swaps it
    into the mount point in one assignment.
    """

    def __init__(
        self,
        store: AppStateStore,
        document: HostDocument,
        mount_id: str = "app",
        builder: ViewBuilder | None = None,
    ) -> None:
        self._store = store
        self._document = document
        self._mount: MountPoint = document.query(mount_id)
        self._builder = builder or (lambda snapshot: build_app(snapshot, title=document.title))

    @property
    def document(self) -> HostDocument:
        return self._document

    @property
    def mount(self) -> MountPoint:
        return self._mount

    def render(self) -> tuple[ViewNode, ...]:
        tree = self._builder(self._store.snapshot())
        self._mount.replace_children(*tree)
        logger.debug(f"Rendered #{self._mount.element_id} ({self._mount.replacements})")
        return tree
