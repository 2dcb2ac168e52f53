import re
from datetime import datetime, timedelta, timezone

import pytest

from snapname.naming.assembler import assemble, build_timestamp, resolve_extension
from snapname.naming.models import FinalFilename


class TestBuildTimestamp:
    def test_formats_naive_datetime_as_is(self) -> None:
        assert build_timestamp(datetime(2025, 3, 4, 5, 6, 59)) == "2025-03-04_05-06"

    def test_converts_aware_datetime_to_utc(self) -> None:
        now = datetime(2025, 3, 4, 23, 30, tzinfo=timezone(timedelta(hours=2)))
        assert build_timestamp(now, use_utc=True) == "2025-03-04_21-30"

    def test_utc_crosses_day_boundary(self) -> None:
        now = datetime(2025, 1, 1, 1, 15, tzinfo=timezone(timedelta(hours=9)))
        assert build_timestamp(now, use_utc=True) == "2024-12-31_16-15"

    def test_local_default_matches_pattern(self) -> None:
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}_\d{2}-\d{2}", build_timestamp())


class TestResolveExtension:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("shot.jpg", ".jpg"),
            ("Screen Shot.PNG", ".PNG"),
            ("archive.tar.gz", ".gz"),
            ("noextension", ".png"),
            ("", ".png"),
            (None, ".png"),
        ],
    )
    def test_extension(self, name: str | None, expected: str) -> None:
        assert resolve_extension(name) == expected


class TestAssemble:
    def test_joins_parts(self) -> None:
        result = assemble("Invoice_123", "2025-03-04_05-06", ".png")
        assert result == FinalFilename(
            value="Invoice_123_2025-03-04_05-06.png",
            timestamp="2025-03-04_05-06",
            extension=".png",
        )

    def test_collapses_underscore_runs(self) -> None:
        result = assemble("Invoice__123_", "2025-03-04_05-06", ".png")
        assert result.value == "Invoice_123_2025-03-04_05-06.png"

    def test_default_extension(self) -> None:
        assert assemble("a", "2025-03-04_05-06").value == "a_2025-03-04_05-06.png"

    @pytest.mark.parametrize("core", ["_", "___x___", "a_b", "screenshot", "__"])
    def test_never_produces_double_underscore(self, core: str) -> None:
        assert "__" not in assemble(core, "2025-03-04_05-06", ".png").value
