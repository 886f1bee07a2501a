"""
Tests for object summaries built from capability interfaces.
"""
from stencil.components.interfaces import HasBodyText, HasDisplayName, HasSpeaker
from stencil.components.metadata import build_summary


class Character(HasDisplayName):
    def __init__(self, name):
        self.name = name

    def get_display_name(self):
        return self.name


class DialogueFragment(HasDisplayName, HasBodyText, HasSpeaker):
    def __init__(self, display_name="", text="", speaker_id="npc_1"):
        self.display_name = display_name
        self.text = text
        self.speaker_id = speaker_id

    def get_display_name(self):
        return self.display_name

    def get_text(self):
        return self.text

    def get_speaker_id(self):
        return self.speaker_id


class PlainAsset:
    pass


def _lookup(speaker_id):
    return {"npc_1": Character("Old Sailor")}.get(speaker_id)


def test_full_summary():
    fragment = DialogueFragment("Harbour Greeting", "Ahoy there!")

    summary = build_summary(fragment, "DFr_0001", _lookup)

    assert summary.title == "Harbour Greeting"
    assert [row.label for row in summary.rows] == ["Speaker", "Text", "Asset Name", "Class"]
    assert summary.get("Speaker") == "Old Sailor"
    assert summary.get("Text") == '"Ahoy there!"'
    assert summary.get("Asset Name") == "DFr_0001"
    assert summary.get("Class") == "(DialogueFragment)"


def test_empty_text_and_display_name_are_omitted():
    summary = build_summary(DialogueFragment(), "DFr_0002", _lookup)

    assert summary.title == "DFr_0002"
    assert summary.get("Text") is None
    assert summary.get("Asset Name") is None


def test_object_without_capabilities():
    summary = build_summary(PlainAsset(), "Asset_7")

    assert summary.title == "Asset_7"
    assert [row.label for row in summary.rows] == ["Class"]


def test_unknown_speaker_is_skipped():
    summary = build_summary(DialogueFragment(speaker_id="missing"), "DFr_3", _lookup)
    assert summary.get("Speaker") is None
