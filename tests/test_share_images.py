import io

from PIL import Image

from app.services.share_image import CANVAS_HEIGHT, CANVAS_WIDTH, hex_to_rgb, render_personality_card


def _open(content: bytes) -> Image.Image:
    return Image.open(io.BytesIO(content))


def test_hex_to_rgb():
    assert hex_to_rgb("#3b82f6") == (59, 130, 246)


def test_personality_card_endpoint(client, fake_redis):
    response = client.get("/api/quiz/share-image/42/builder")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    img = _open(response.content)
    assert img.size == (CANVAS_WIDTH, CANVAS_HEIGHT)
    # rendering must not touch the store
    assert fake_redis.dbsize() == 0


def test_personality_card_uses_type_gradient():
    img = _open(render_personality_card("42", "analyst")).convert("RGB")
    # top-left corner sits on the gradient start colour
    assert img.getpixel((0, 0)) == hex_to_rgb("#eab308")


def test_unknown_personality_renders_generic_card(client):
    response = client.get("/api/quiz/share-image/42/wizard")
    assert response.status_code == 200
    img = _open(response.content).convert("RGB")
    assert img.getpixel((0, 0)) == hex_to_rgb("#8b5cf6")


def test_profile_card_endpoint(client):
    response = client.get("/api/dynamic-share-image/203090")
    assert response.status_code == 200
    assert _open(response.content).size == (CANVAS_WIDTH, CANVAS_HEIGHT)


def test_rendering_is_deterministic():
    assert render_personality_card("7", "connector") == render_personality_card("7", "connector")
