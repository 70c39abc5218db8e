"""POSIX format translation tests."""

from datetime import date, datetime, timedelta, timezone

import pytest

from pytimefmt._errors import UnsupportedFeatureError, UnsupportedSpecifierError
from pytimefmt.posix import POSIX_SPECIFIERS, VARIABLE_WIDTH, HostFields, PosixFormat


class TestBasics:
    def test_fixed_length_format(self, afternoon):
        fmt = PosixFormat("%d/%m/%Y %H:%M:%S %% %b %y, %V %a %u %w, %I %p")

        assert fmt.host_format == (
            "{day:02d}/{month:02d}/{year:04d} {hour:02d}:{minute:02d}:{second:02d} "
            "% {month_abbr} {year_of_century:02d}, {iso_week:02d} {weekday_abbr} "
            "{iso_weekday:d} {weekday:d}, {hour12:02d} {meridian}"
        )
        assert fmt.shape == "dd/mm/YYYY HH:MM:SS % bbb yy, VV aaa u w, II pp"
        assert fmt.length == 47
        assert fmt.apply_to(afternoon) == "25/02/2026 18:21:42 % Feb 26, 09 Wed 3 3, 06 PM"

    def test_variable_length_format(self, new_year_sunday):
        fmt = PosixFormat("%B %V, %u %w")

        assert fmt.host_format == "{month_name} {iso_week:02d}, {iso_weekday:d} {weekday:d}"
        assert fmt.shape == "* VV, u w"
        assert fmt.length is None
        assert fmt.apply_to(new_year_sunday) == "January 52, 7 0"

    def test_posix_format_kept(self):
        assert PosixFormat("%F").posix_format == "%F"

    def test_repr(self):
        assert repr(PosixFormat("%F")) == "PosixFormat('%F')"

    def test_shape_length_matches_output(self, afternoon):
        fmt = PosixFormat("%F %T %D %R %r %G %P %h %z")
        assert len(fmt.apply_to(afternoon)) == fmt.length


class TestSpecifiers:
    @pytest.mark.parametrize(
        "posix, expected",
        [
            ("%G", "2026"),
            ("%Y", "2026"),
            ("%y", "26"),
            ("%B", "February"),
            ("%b", "Feb"),
            ("%h", "Feb"),
            ("%m", "02"),
            ("%V", "09"),
            ("%A", "Wednesday"),
            ("%a", "Wed"),
            ("%d", "25"),
            ("%u", "3"),
            ("%w", "3"),
            ("%H", "18"),
            ("%I", "06"),
            ("%p", "PM"),
            ("%P", "pm"),
            ("%M", "21"),
            ("%S", "42"),
            ("%D", "02/25/26"),
            ("%F", "2026-02-25"),
            ("%r", "06:21:42 PM"),
            ("%R", "18:21"),
            ("%T", "18:21:42"),
            ("%n", "\n"),
            ("%t", "\t"),
            ("%%", "%"),
        ],
    )
    def test_render(self, afternoon, posix, expected):
        assert PosixFormat(posix).apply_to(afternoon) == expected

    def test_iso_year_differs_from_calendar_year(self, new_year_sunday):
        assert PosixFormat("%G-W%V-%u").apply_to(new_year_sunday) == "2022-W52-7"

    def test_midnight_and_noon(self):
        fmt = PosixFormat("%I %p")
        assert fmt.apply_to(datetime(2024, 1, 1, 0, 30)) == "12 AM"
        assert fmt.apply_to(datetime(2024, 1, 1, 12, 30)) == "12 PM"

    def test_timezone_fields(self, cet_morning):
        assert PosixFormat("%z").apply_to(cet_morning) == "+0200"
        assert PosixFormat("%Z").apply_to(cet_morning) == "CEST"

    def test_timestamp(self):
        value = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert PosixFormat("%s").apply_to(value) == "1704067200"

    def test_naive_datetime_uses_local_offset(self):
        value = datetime(2024, 1, 1, 12)
        assert PosixFormat("%z").apply_to(value) == value.astimezone().strftime("%z")

    def test_date_renders_as_midnight(self, new_year_sunday):
        assert PosixFormat("%F %T").apply_to(new_year_sunday) == "2023-01-01 00:00:00"

    @pytest.mark.parametrize("posix", ["%B", "%A", "%Z", "%s"])
    def test_variable_width_specifiers(self, posix):
        fmt = PosixFormat(posix)
        assert fmt.shape == VARIABLE_WIDTH
        assert fmt.length is None

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            POSIX_SPECIFIERS["%j"] = POSIX_SPECIFIERS["%d"]


class TestLiteralText:
    def test_plain_text(self, afternoon):
        fmt = PosixFormat("Year: %Y")
        assert fmt.shape == "Year: YYYY"
        assert fmt.length == 10
        assert fmt.apply_to(afternoon) == "Year: 2026"

    def test_braces_are_escaped(self, afternoon):
        fmt = PosixFormat("{%d}")
        assert fmt.host_format == "{{{day:02d}}}"
        assert fmt.shape == "{dd}"
        assert fmt.apply_to(afternoon) == "{25}"

    def test_escaped_percent_before_letter(self, afternoon):
        fmt = PosixFormat("%%Y")
        assert fmt.shape == "%Y"
        assert fmt.apply_to(afternoon) == "%Y"

    def test_empty_format(self, afternoon):
        fmt = PosixFormat("")
        assert fmt.shape == ""
        assert fmt.length == 0
        assert fmt.apply_to(afternoon) == ""


class TestUnsupported:
    def test_day_of_year(self):
        with pytest.raises(
            UnsupportedSpecifierError,
            match=r'^"Posix format specifier %j" not supported$',
        ) as exc_info:
            PosixFormat("%j")
        assert exc_info.value.specifier == "%j"

    def test_names_first_unsupported(self):
        with pytest.raises(UnsupportedSpecifierError) as exc_info:
            PosixFormat("%Y %c %x")
        assert exc_info.value.specifier == "%c"

    def test_trailing_percent(self):
        with pytest.raises(UnsupportedSpecifierError) as exc_info:
            PosixFormat("100%")
        assert exc_info.value.specifier == "%"

    def test_is_unsupported_feature(self):
        with pytest.raises(UnsupportedFeatureError):
            PosixFormat("%E")


class TestHostFields:
    def test_getitem(self, afternoon):
        fields = HostFields(afternoon)
        assert fields["year"] == 2026
        assert fields["weekday"] == 3

    def test_contains(self, afternoon):
        fields = HostFields(afternoon)
        assert "iso_week" in fields
        assert "day_of_year" not in fields

    def test_unknown_field(self, afternoon):
        with pytest.raises(KeyError):
            HostFields(afternoon)["day_of_year"]

    def test_every_specifier_renders(self, cet_morning):
        for specifier in POSIX_SPECIFIERS:
            PosixFormat(specifier).apply_to(cet_morning)

    def test_date_input(self):
        assert HostFields(date(2024, 2, 29))["hour"] == 0

    def test_fixed_width_shapes_match_rendering(self, cet_morning):
        for specifier, entry in POSIX_SPECIFIERS.items():
            if entry.shape == VARIABLE_WIDTH:
                continue
            rendered = PosixFormat(specifier).apply_to(cet_morning)
            assert len(rendered) == len(entry.shape), specifier


def test_utc_offset_minutes():
    value = datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=5, minutes=30)))
    assert PosixFormat("%z").apply_to(value) == "+0530"
