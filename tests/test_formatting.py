import pytest

from presentations.formatting import format_file_size, format_size_limit


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 B"),
        (1023, "1023 B"),
        (1024, "1.0 KB"),
        (1536, "1.5 KB"),
        (1024 * 1024 - 1, "1024.0 KB"),
        (1024 * 1024, "1.0 MB"),
        (2_500_000, "2.4 MB"),
        (120_000_000, "114.4 MB"),
    ],
)
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


@pytest.mark.parametrize(
    "size, expected",
    [
        (100 * 1024 * 1024, "100MB"),
        (1024 * 1024, "1MB"),
        (512 * 1024, "512.0 KB"),
        (1536 * 1024, "1.5 MB"),
        (900, "900 B"),
    ],
)
def test_format_size_limit(size, expected):
    assert format_size_limit(size) == expected
