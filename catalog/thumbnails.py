"""Placeholder thumbnails picked deterministically from the school id."""

THUMBNAIL_PATHS = [
    "/assets/generated/school-thumb-01.dim_1200x800.jpg",
    "/assets/generated/school-thumb-02.dim_1200x800.jpg",
    "/assets/generated/school-thumb-03.dim_1200x800.jpg",
    "/assets/generated/school-thumb-04.dim_1200x800.jpg",
    "/assets/generated/school-thumb-05.dim_1200x800.jpg",
    "/assets/generated/school-thumb-06.dim_1200x800.jpg",
]


def _utf16_units(value: str):
    data = value.encode("utf-16-le")
    return (int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2))


def string_hash(value: str) -> int:
    """``h = h * 31 + unit`` over UTF-16 code units, wrapped to signed 32 bits, then abs."""
    h = 0
    for unit in _utf16_units(value):
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def school_thumbnail(school_id: str) -> str:
    return THUMBNAIL_PATHS[string_hash(school_id) % len(THUMBNAIL_PATHS)]


def default_thumbnail() -> str:
    return THUMBNAIL_PATHS[0]
