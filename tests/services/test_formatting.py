from __future__ import annotations

from hippoo.services.formatting import display_name, format_bytes, format_ms, format_transfer_time


def test_format_bytes_outputs() -> None:
    assert format_bytes(0) == "0B"
    assert format_bytes(1023) == "1023B"
    assert format_bytes(1024) == "1.0 kB"
    assert format_bytes(1536) == "1.5 kB"


def test_format_bytes_megabyte_boundary() -> None:
    assert format_bytes(1024 * 1024 - 1) == "1024.0 kB"
    assert format_bytes(1024 * 1024) == "1.0 MB"
    assert format_bytes(5 * 1024 * 1024 + 512 * 1024) == "5.5 MB"


def test_transfer_time_zero() -> None:
    t = format_transfer_time(0)
    assert (t.slow_ms, t.fast_ms) == (0, 0)


def test_transfer_time_rounds_up() -> None:
    # 1 KB = 8 kbit -> 0.16ms slow, 0.008ms fast
    t = format_transfer_time(1024)
    assert t.slow_ms == 1
    assert t.fast_ms == 1


def test_transfer_time_both_profiles_from_same_size() -> None:
    t = format_transfer_time(1024 * 1000)
    assert t.fast_ms == 8
    assert t.slow_ms == 160


def test_format_ms() -> None:
    assert format_ms(42) == "42ms"


def test_display_name_capitalizes_first_letter_only() -> None:
    assert display_name("react") == "React"
    assert display_name("@vue/core") == "@vue/core"
    assert display_name("lodash-ES") == "Lodash-ES"
    assert display_name("") == ""
