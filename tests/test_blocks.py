from studiomail.emails.blocks import (
    ButtonBlock,
    SpacerBlock,
    TextBlock,
    UnknownBlock,
    default_content,
    dump_blocks,
    parse_block,
    parse_blocks,
)

PERSISTED = [
    {"id": "b1", "type": "HEADING", "content": {"text": "Hello"}},
    {"id": "b2", "type": "TEXT", "content": {"text": "Line one\nLine two"}},
    {
        "id": "b3",
        "type": "BUTTON",
        "content": {"text": "Book", "variant": "outline", "linkType": "CALENDAR", "linkValue": "cal-9"},
    },
    {"id": "b4", "type": "IMAGE", "content": {"url": "https://img.test/a.jpg", "alt": "A"}},
    {"id": "b5", "type": "SPACER", "content": {"size": "large", "height": 60}},
    {"id": "b6", "type": "SIGNATURE", "content": {"style": "branded"}},
]


def test_parse_selects_block_class_by_type():
    blocks = parse_blocks(PERSISTED)
    assert isinstance(blocks[1], TextBlock)
    assert isinstance(blocks[2], ButtonBlock)
    assert blocks[2].content.link_type == "CALENDAR"
    assert blocks[2].content.link_value == "cal-9"
    assert isinstance(blocks[4], SpacerBlock)
    assert blocks[4].content.height == 60


def test_persisted_form_round_trips():
    blocks = parse_blocks(PERSISTED)
    dumped = dump_blocks(blocks)
    assert parse_blocks(dumped) == blocks
    assert dumped[2]["content"]["linkType"] == "CALENDAR"
    assert [b["id"] for b in dumped] == ["b1", "b2", "b3", "b4", "b5", "b6"]


def test_unknown_type_is_kept_not_rejected():
    block = parse_block({"id": "x", "type": "VIDEO", "content": {"src": "v.mp4"}})
    assert isinstance(block, UnknownBlock)
    assert dump_blocks([block]) == [{"id": "x", "type": "VIDEO", "content": {"src": "v.mp4"}}]


def test_extra_content_keys_survive():
    block = parse_block({"id": "t", "type": "TEXT", "content": {"text": "hi", "align": "center"}})
    assert dump_blocks([block])[0]["content"] == {"text": "hi", "align": "center"}


def test_empty_input_parses_to_empty_list():
    assert parse_blocks(None) == []
    assert parse_blocks([]) == []


def test_default_content_per_type():
    assert default_content("SPACER") == {"size": "medium", "height": 40}
    assert default_content("BUTTON") == {"text": "", "linkType": "CUSTOM", "linkValue": "", "variant": "default"}
    assert default_content("HEADER") == {"style": "professional"}
    assert default_content("SIGNATURE") == {"style": "professional"}
    assert default_content("HEADING") == {"text": ""}
    assert default_content("IMAGE") == {"text": ""}
