from html import escape

from party_planner.view.html import fragment_to_html
from party_planner.view.nodes import Child

# Forwards data-on-* handlers to the actions endpoint and swaps in the
# returned mount fragment.
ACTION_SCRIPT = """(() => {
  const actionsUrl = document.currentScript.dataset.actionsUrl;

  const readAction = (element, type) => {
    const rawArgs = element.getAttribute(`data-on-${type}-args`);
    return {
      name: element.getAttribute(`data-on-${type}`),
      args: rawArgs ? rawArgs.split(",") : [],
    };
  };

  const send = async (body) => {
    const response = await fetch(actionsUrl, {
      method: "POST",
      headers: { "Content-Type": "application/json" },
      body: JSON.stringify(body),
    });
    if (!response.ok) return;
    const template = document.createElement("template");
    template.innerHTML = (await response.text()).trim();
    const fresh = template.content.firstElementChild;
    const mount = fresh && document.getElementById(fresh.id);
    if (mount) mount.replaceChildren(...fresh.childNodes);
  };

  document.addEventListener("click", (event) => {
    const element = event.target.closest("[data-on-click]");
    if (element) send(readAction(element, "click"));
  });

  document.addEventListener("submit", (event) => {
    const form = event.target.closest("[data-on-submit]");
    if (!form) return;
    event.preventDefault();
    send({ ...readAction(form, "submit"), form: Object.fromEntries(new FormData(form)) });
  });
})();"""


class MountPointNotFoundError(LookupError):
    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        super().__init__(f"No container element '#{element_id}' in the host document")


class MountPoint:
    """A container element whose children are replaced on every render."""

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        self.children: tuple[Child, ...] = ()
        self.replacements = 0

    def replace_children(self, *children: Child) -> None:
        self.children = tuple(children)
        self.replacements += 1

    def to_html(self) -> str:
        return f'<div id="{escape(self.element_id)}">{fragment_to_html(self.children)}</div>'


class HostDocument:
    """The page hosting the app: a title, its container elements and the action script.

    Handlers serialized on the mounted nodes are posted to `actions_url` as
    `{name, args, form}`; the returned fragment replaces the matching container.
    """

    def __init__(
        self,
        title: str = "Party Planner",
        container_ids: tuple[str, ...] = ("app",),
        actions_url: str = "/actions",
    ):
        self.title = title
        self.actions_url = actions_url
        self._containers = {element_id: MountPoint(element_id) for element_id in container_ids}

    def query(self, element_id: str) -> MountPoint:
        try:
            return self._containers[element_id]
        except KeyError:
            raise MountPointNotFoundError(element_id) from None

    def to_html(self) -> str:
        body = "".join(container.to_html() for container in self._containers.values())
        return (
            "<!DOCTYPE html>"
            '<html lang="en">'
            f'<head><meta charset="utf-8"><title>{escape(self.title)}</title></head>'
            f"<body>{body}"
            f'<script data-actions-url="{escape(self.actions_url)}">{ACTION_SCRIPT}</script>'
            "</body>"
            "</html>"
        )
