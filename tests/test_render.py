from studiomail.emails.blocks import parse_block, parse_blocks
from studiomail.emails.branding import DEFAULT_HEADSHOT_URL, BrandingData
from studiomail.emails.render import button_href, render_block, render_block_text, render_blocks


def _button(link_type: str, link_value: str = "") -> dict:
    return {
        "id": "btn",
        "type": "BUTTON",
        "content": {"text": "Go", "linkType": link_type, "linkValue": link_value, "variant": "default"},
    }


def test_heading_then_gallery_button():
    blocks = parse_blocks(
        [
            {"id": "h", "type": "HEADING", "content": {"text": "Our Package"}},
            {
                "id": "b",
                "type": "BUTTON",
                "content": {"text": "View Gallery", "linkType": "GALLERY", "linkValue": "g123"},
            },
        ]
    )
    html = render_blocks(blocks)
    heading, button = html.split("\n")
    assert "Our Package" in heading
    assert heading.startswith("<h2")
    assert 'href="{{gallery_link}}"' in button
    assert ">View Gallery</a>" in button
    assert "g123" not in button


def test_blocks_render_in_list_order():
    blocks = parse_blocks(
        [
            {"id": "1", "type": "TEXT", "content": {"text": "first"}},
            {"id": "2", "type": "TEXT", "content": {"text": "second"}},
            {"id": "3", "type": "TEXT", "content": {"text": "third"}},
        ]
    )
    html = render_blocks(blocks)
    assert html.index("first") < html.index("second") < html.index("third")


def test_placeholder_hrefs_ignore_link_value():
    assert button_href(parse_block(_button("SMART_FILE", "sf-1"))) == "{{smart_file_link}}"
    assert button_href(parse_block(_button("GALLERY", "g-1"))) == "{{gallery_link}}"
    assert button_href(parse_block(_button("CALENDAR", "c-1"))) == "{{calendar_link}}"


def test_custom_href_is_verbatim():
    url = "https://studio.test/pricing?a=1&b=2"
    html = render_block(parse_block(_button("CUSTOM", url)))
    assert f'href="{url}"' in html


def test_custom_href_empty_falls_back_to_hash():
    assert 'href="#"' in render_block(parse_block(_button("CUSTOM", "")))


def test_spacer_height():
    explicit = parse_block({"id": "s", "type": "SPACER", "content": {"size": "small", "height": 20}})
    missing = parse_block({"id": "s", "type": "SPACER", "content": {}})
    assert render_block(explicit) == '<div style="height: 20px;"></div>'
    assert render_block(missing) == '<div style="height: 40px;"></div>'


def test_unknown_type_renders_empty():
    block = parse_block({"id": "u", "type": "CAROUSEL", "content": {"slides": []}})
    assert render_block(block) == ""
    assert render_block_text(block) == ""


def test_text_is_escaped_and_keeps_line_breaks():
    block = parse_block({"id": "t", "type": "TEXT", "content": {"text": "<b>Hi</b>\nthere"}})
    html = render_block(block)
    assert "&lt;b&gt;Hi&lt;/b&gt;<br>there" in html


def test_empty_content_uses_placeholders():
    assert ">Heading</h2>" in render_block(parse_block({"id": "h", "type": "HEADING", "content": {}}))
    assert "No image URL provided" in render_block(parse_block({"id": "i", "type": "IMAGE", "content": {}}))


def test_signature_block_uses_professional_default_headshot():
    block = parse_block({"id": "sig", "type": "SIGNATURE", "content": {"style": "professional"}})
    html = render_block(block, BrandingData(photographer_name="Jane Doe"))
    assert DEFAULT_HEADSHOT_URL in html


def test_button_text_rendering():
    block = parse_block(_button("GALLERY"))
    assert render_block_text(block) == "\n[Go] {{gallery_link}}\n"


def test_relative_image_url_is_made_absolute():
    block = parse_block({"id": "i", "type": "IMAGE", "content": {"url": "/uploads/photo.jpg", "alt": "Photo"}})
    html = render_block(block, base_url="https://app.example.test")
    assert 'src="https://app.example.test/uploads/photo.jpg"' in html


def test_unrecognised_button_variant_uses_default_style():
    block = parse_block(
        {"id": "b", "type": "BUTTON", "content": {"text": "Go", "variant": "ghost", "linkType": "CUSTOM"}}
    )
    assert block.content.variant == "ghost"
    assert "background-color: #2563eb; color: #ffffff;" in render_block(block)
