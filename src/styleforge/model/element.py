from __future__ import annotations

from dataclasses import dataclass, field

from styleforge.model.state import StyleState


@dataclass(frozen=True)
class ElementData:
    """Portable description of a styled element for JSON export/import."""

    id: str
    tag_name: str
    text_content: str
    tailwind_classes: tuple[str, ...] = ()
    inline_styles: dict[str, str] = field(default_factory=dict, hash=False, compare=True)
    link: str = ""

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "tagName": self.tag_name,
            "textContent": self.text_content,
            "tailwindClasses": list(self.tailwind_classes),
            "inlineStyles": dict(self.inline_styles),
        }
        if self.link:
            data["link"] = self.link
        return data


def element_data(state: StyleState, classes: str, styles: dict[str, str]) -> ElementData:
    """Bundle an effective state with its generated classes and styles."""
    return ElementData(
        id=state.element_id,
        tag_name=state.tag,
        text_content=state.text_content,
        tailwind_classes=tuple(classes.split()),
        inline_styles=dict(styles),
        link=state.link,
    )
