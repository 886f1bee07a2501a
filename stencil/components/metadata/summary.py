# stencil/components/metadata/summary.py
"""
Label/value summaries of generated objects.

The summary prefers an object's display name over its asset name and lists
its speaker and text when the object implements those capabilities.
Rendering the summary is left to the caller.
"""
from typing import Callable, List, Optional

from pydantic import BaseModel, Field

from stencil.components.interfaces.capabilities import HasBodyText, HasDisplayName, HasSpeaker


class SummaryRow(BaseModel):
    label: str
    value: str
    important: bool = False


class ObjectSummary(BaseModel):
    """Title plus ordered rows describing one object."""
    title: str = Field(..., description="Display name, or asset name when there is none")
    rows: List[SummaryRow] = Field(default_factory=list, description="Ordered label/value rows")

    def get(self, label: str) -> Optional[str]:
        for row in self.rows:
            if row.label == label:
                return row.value
        return None


def build_summary(
    obj: object,
    asset_name: str,
    speaker_lookup: Optional[Callable[[str], object]] = None
) -> ObjectSummary:
    """
    Summarize an object for display.

    Args:
        obj: The object to summarize
        asset_name: Name the object is stored under
        speaker_lookup: Resolves a speaker id to the speaker object

    Returns:
        ObjectSummary with Speaker, Text, Asset Name and Class rows as applicable
    """
    title = asset_name
    using_display_name = False
    rows: List[SummaryRow] = []

    if isinstance(obj, HasDisplayName):
        display_name = obj.get_display_name()
        if display_name:
            title = display_name
            using_display_name = True

    if isinstance(obj, HasSpeaker) and speaker_lookup is not None:
        speaker = speaker_lookup(obj.get_speaker_id())
        if isinstance(speaker, HasDisplayName):
            rows.append(SummaryRow(label="Speaker", value=speaker.get_display_name(), important=True))

    # Empty text gets no row at all
    if isinstance(obj, HasBodyText):
        text = obj.get_text()
        if text:
            rows.append(SummaryRow(label="Text", value=f'"{text}"', important=True))

    if using_display_name:
        rows.append(SummaryRow(label="Asset Name", value=asset_name))

    rows.append(SummaryRow(label="Class", value=f"({type(obj).__name__})"))

    return ObjectSummary(title=title, rows=rows)
