from __future__ import annotations

from gallery_client.schemas.artwork import Artwork

# Static demo listing until the gallery endpoint serves real artworks.
ARTWORK_DATA = (
    Artwork(
        id=1,
        title="Birch Bark",
        thumbnail_url="/images/demo-art/birch.jpg",
        owner_name="Nick G.",
    ),
    Artwork(
        id=2,
        title="Lichen branch from the Adirondacks",
        thumbnail_url="/images/demo-art/lichen_branch.jpg",
        owner_name="Nick G.",
    ),
    Artwork(
        id=3,
        title="Lichen and Branch Segment",
        thumbnail_url="/images/demo-art/lichen_flame.jpg",
        owner_name="Nick G.",
    ),
)


def list_artworks() -> list[Artwork]:
    return list(ARTWORK_DATA)


def render_gallery(artworks: list[Artwork]) -> str:
    lines = ["Gallery"]
    for artwork in artworks:
        lines.append(f"  [{artwork.id}] {artwork.title}")
        lines.append(f"      by {artwork.owner_name} - {artwork.thumbnail_url}")
    return "\n".join(lines)
