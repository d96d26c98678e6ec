"""Write SVG markup from a laid-out node tree."""

from __future__ import annotations

from html import escape

from variant_table.canvas.nodes import ContainerNode, InstanceNode, Node, Paint, ShapeNode, TextNode


def _paint_attrs(prefix: str, paints: list[Paint]) -> dict[str, str]:
    """Top-most visible solid paint wins; anything else renders as none."""
    for paint in reversed(paints):
        if paint.visible and paint.is_solid:
            attrs = {prefix: paint.color.to_hex()}
            if paint.opacity < 1.0:
                attrs[f"{prefix}-opacity"] = f"{paint.opacity:g}"
            return attrs
    return {prefix: "none"}


def _rect(node: Node, x: float, y: float, extra: dict[str, str] | None = None) -> dict[str, str]:
    attrs = {
        "tag": "rect",
        "x": f"{x:g}",
        "y": f"{y:g}",
        "width": f"{node.width:g}",
        "height": f"{node.height:g}",
    }
    if node.corner_radius:
        attrs["rx"] = f"{node.corner_radius:g}"
    attrs.update(_paint_attrs("fill", node.fills))
    if node.strokes and node.stroke_weight:
        attrs.update(_paint_attrs("stroke", node.strokes))
        attrs["stroke-width"] = f"{node.stroke_weight:g}"
    if extra:
        attrs.update(extra)
    return attrs


def _collect(node: Node, ox: float, oy: float, out: list[dict[str, str]]) -> None:
    x, y = ox + node.x, oy + node.y
    if isinstance(node, ContainerNode):
        if node.fills or (node.strokes and node.stroke_weight):
            out.append(_rect(node, x, y))
        for child in node.children:
            _collect(child, x, y, out)
    elif isinstance(node, TextNode):
        if not node.characters:
            return
        attrs = {
            "tag": "text",
            "x": f"{x:g}",
            "y": f"{y + node.font_size:g}",
            "font-family": node.font.family,
            "font-size": f"{node.font_size:g}",
        }
        if node.font.style.lower() == "bold":
            attrs["font-weight"] = "bold"
        attrs.update(_paint_attrs("fill", node.fills))
        attrs["text"] = node.characters
        out.append(attrs)
    elif isinstance(node, ShapeNode):
        extra = {}
        if node.dash_pattern:
            extra["stroke-dasharray"] = " ".join(f"{d:g}" for d in node.dash_pattern)
        out.append(_rect(node, x, y, extra))
    elif isinstance(node, InstanceNode):
        out.append(_rect(node, x, y, {"data-component": node.component_id or ""}))


def render_svg(root: Node, title: str = "") -> str:
    """Generate SVG markup for ``root`` and everything below it."""
    elements: list[dict[str, str]] = []
    _collect(root, -root.x, -root.y, elements)

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {root.width:g} {root.height:g}" width="{root.width:g}"'
        f' height="{root.height:g}" xmlns="http://www.w3.org/2000/svg">',
    ]
    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for elem in elements:
        tag = elem["tag"]
        text = elem.get("text")
        attrs = {k: v for k, v in elem.items() if k not in ("tag", "text")}
        attr_str = " ".join(f'{k}="{escape(v)}"' for k, v in attrs.items())
        if text is not None:
            lines.append(f"  <{tag} {attr_str}>{escape(text)}</{tag}>")
        else:
            lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)
