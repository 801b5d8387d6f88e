from fastapi import APIRouter, Response

from app.services.share_image import render_personality_card, render_profile_card

router = APIRouter(prefix="/api", tags=["Share Images"])

# Social clients re-fetch embeds aggressively
CACHE_HEADERS = {"Cache-Control": "public, max-age=3600"}


@router.get("/quiz/share-image/{fid}/{personality}")
def personality_share_image(fid: str, personality: str):
    return Response(
        content=render_personality_card(fid, personality),
        media_type="image/png",
        headers=CACHE_HEADERS,
    )


@router.get("/dynamic-share-image/{fid}")
def profile_share_image(fid: str):
    return Response(content=render_profile_card(fid), media_type="image/png", headers=CACHE_HEADERS)
