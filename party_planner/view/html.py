from html import escape

from party_planner.view.nodes import Child, ViewNode

VOID_TAGS = frozenset({"input", "br", "hr", "img", "meta", "link"})


def _attributes(node: ViewNode) -> str:
    parts = []
    if node.classes:
        parts.append(f'class="{escape(" ".join(node.classes))}"')
    for name, value in node.attrs:
        if value == "":
            parts.append(name)
        else:
            parts.append(f'{name}="{escape(value)}"')
    for event, action in node.handlers:
        parts.append(f'data-on-{event}="{escape(action.name)}"')
        if action.args:
            args = ",".join(str(arg) for arg in action.args)
            parts.append(f'data-on-{event}-args="{escape(args)}"')
    return (" " + " ".join(parts)) if parts else ""


def to_html(child: Child) -> str:
    """Serialize a view tree. Output depends only on the tree."""
    if isinstance(child, str):
        return escape(child, quote=False)
    opening = f"<{child.tag}{_attributes(child)}>"
    if child.tag in VOID_TAGS:
        return opening
    inner = "".join(to_html(grandchild) for grandchild in child.children)
    return f"{opening}{inner}</{child.tag}>"


def fragment_to_html(nodes: tuple[Child, ...]) -> str:
    return "".join(to_html(node) for node in nodes)
