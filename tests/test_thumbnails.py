from catalog.thumbnails import THUMBNAIL_PATHS, default_thumbnail, school_thumbnail, string_hash


def test_string_hash_matches_32bit_rolling_hash():
    assert string_hash("") == 0
    assert string_hash("a") == 97
    assert string_hash("ab") == 97 * 31 + 98
    # "polygenelubricants" overflows to exactly -2**31
    assert string_hash("polygenelubricants") == 2**31


def test_thumbnail_is_deterministic():
    assert school_thumbnail("rishikesh-yogpeeth") == school_thumbnail("rishikesh-yogpeeth")
    assert school_thumbnail("a") == THUMBNAIL_PATHS[97 % len(THUMBNAIL_PATHS)]


def test_thumbnail_always_from_placeholder_set():
    for i in range(200):
        assert school_thumbnail(f"school-{i}") in THUMBNAIL_PATHS
    assert default_thumbnail() == THUMBNAIL_PATHS[0]
