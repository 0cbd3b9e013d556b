"""Unit tests for the scalar bucketizers."""
import math

import pytest

from analysis.buckets import (
    coast_wind_label,
    duration_bucket_label,
    movement_label,
    season_from_month,
    temp_bucket_label,
    time_of_day_bucket,
    water_level_bucket,
    wind_dir_label_from_deg,
    wind_speed_bucket_label,
)

MISSING = [None, math.nan, "12", True]


class TestWaterLevelBucket:

    @pytest.mark.parametrize("value", MISSING)
    def test_unknown_input(self, value):
        assert water_level_bucket(value) == "ukendt"

    def test_low_water(self):
        assert water_level_bucket(-25) == "Lavvande"
        assert water_level_bucket(-100) == "Lavvande"

    def test_high_water(self):
        assert water_level_bucket(25) == "Højvande"
        assert water_level_bucket(100) == "Højvande"

    def test_middle_includes_thresholds(self):
        assert water_level_bucket(-20) == "Middel vandstand"
        assert water_level_bucket(0) == "Middel vandstand"
        assert water_level_bucket(20) == "Middel vandstand"
        assert water_level_bucket(20.5) == "Højvande"


class TestSeasonFromMonth:

    @pytest.mark.parametrize("month,expected", [
        (11, "Vinteren"), (0, "Vinteren"), (1, "Vinteren"),
        (2, "Foråret"), (3, "Foråret"), (4, "Foråret"),
        (5, "Sommeren"), (6, "Sommeren"), (7, "Sommeren"),
        (8, "Efteråret"), (9, "Efteråret"), (10, "Efteråret"),
    ])
    def test_every_month(self, month, expected):
        assert season_from_month(month) == expected

    def test_unknown_input(self):
        assert season_from_month(None) == "ukendt"
        assert season_from_month(math.nan) == "ukendt"


class TestTimeOfDayBucket:

    def test_night(self):
        for hour in (0, 3, 4, 22, 23):
            assert time_of_day_bucket(hour) == "Natten"

    def test_day_parts(self):
        assert time_of_day_bucket(5) == "Morgenen"
        assert time_of_day_bucket(8) == "Morgenen"
        assert time_of_day_bucket(9) == "Formiddagen"
        assert time_of_day_bucket(11) == "Formiddagen"
        assert time_of_day_bucket(12) == "Eftermiddagen"
        assert time_of_day_bucket(16) == "Eftermiddagen"
        assert time_of_day_bucket(17) == "Aftenen"
        assert time_of_day_bucket(21) == "Aftenen"

    def test_unknown_input(self):
        assert time_of_day_bucket(None) == "ukendt"


class TestTempBucketLabel:

    @pytest.mark.parametrize("value", MISSING)
    def test_unknown_input(self, value):
        assert temp_bucket_label(value) == "ukendt"

    def test_ranges(self):
        assert temp_bucket_label(2) == "0–4°C"
        assert temp_bucket_label(6) == "4–8°C"
        assert temp_bucket_label(10) == "8–12°C"
        assert temp_bucket_label(14) == "12–16°C"
        assert temp_bucket_label(20) == "16°C+"
        assert temp_bucket_label(150) == "16°C+"

    def test_lower_bound_is_inclusive(self):
        assert temp_bucket_label(0) == "0–4°C"
        assert temp_bucket_label(4) == "4–8°C"
        assert temp_bucket_label(8) == "8–12°C"
        assert temp_bucket_label(12) == "12–16°C"
        assert temp_bucket_label(16) == "16°C+"
        assert temp_bucket_label(3.999) == "0–4°C"

    def test_below_freezing_is_unknown(self):
        assert temp_bucket_label(-0.5) == "ukendt"


class TestWindSpeedBucketLabel:

    @pytest.mark.parametrize("value", MISSING)
    def test_unknown_input(self, value):
        assert wind_speed_bucket_label(value) == "ukendt"

    def test_categories(self):
        assert wind_speed_bucket_label(2) == "svag vind"
        assert wind_speed_bucket_label(5) == "mild vind"
        assert wind_speed_bucket_label(10) == "frisk vind"
        assert wind_speed_bucket_label(15) == "hård vind"

    def test_boundaries(self):
        assert wind_speed_bucket_label(0) == "svag vind"
        assert wind_speed_bucket_label(4) == "mild vind"
        assert wind_speed_bucket_label(8) == "frisk vind"
        assert wind_speed_bucket_label(12) == "hård vind"


class TestCoastWindLabel:

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_input(self, value):
        assert coast_wind_label(value) is None

    def test_offshore(self):
        assert coast_wind_label("fralandsvind") == "fralandsvind"
        assert coast_wind_label("Fraland") == "fralandsvind"
        assert coast_wind_label("OFFSHORE") == "fralandsvind"

    def test_onshore(self):
        assert coast_wind_label("pålandsvind") == "pålandsvind"
        assert coast_wind_label("på-land") == "pålandsvind"
        assert coast_wind_label("onshore") == "pålandsvind"

    def test_cross_shore(self):
        assert coast_wind_label("sidevind") == "sidevind"
        assert coast_wind_label("Langs kysten") == "sidevind"
        assert coast_wind_label("tvaers") == "sidevind"

    def test_unknown_word_is_none(self):
        assert coast_wind_label("ukendt") is None
        assert coast_wind_label("Ukendt") is None

    def test_unrecognized_passes_through(self):
        assert coast_wind_label("Custom") == "Custom"


class TestWindDirLabelFromDeg:

    @pytest.mark.parametrize("deg,expected", [
        (0, "Nord"), (45, "Nordøst"), (90, "Øst"), (135, "Sydøst"),
        (180, "Syd"), (225, "Sydvest"), (270, "Vest"), (315, "Nordvest"),
    ])
    def test_compass_points(self, deg, expected):
        assert wind_dir_label_from_deg(deg) == expected

    def test_sector_edges(self):
        assert wind_dir_label_from_deg(22.4) == "Nord"
        assert wind_dir_label_from_deg(22.5) == "Nordøst"
        assert wind_dir_label_from_deg(337.4) == "Nordvest"
        assert wind_dir_label_from_deg(337.5) == "Nord"

    def test_wraps_around(self):
        assert wind_dir_label_from_deg(360) == "Nord"
        assert wind_dir_label_from_deg(450) == "Øst"
        assert wind_dir_label_from_deg(-90) == "Vest"
        assert wind_dir_label_from_deg(-180) == "Syd"

    @pytest.mark.parametrize("deg", [-400, -45, 10, 100, 200, 300, 359.9])
    def test_periodic(self, deg):
        expected = wind_dir_label_from_deg(deg)
        for k in (-3, -1, 1, 2):
            assert wind_dir_label_from_deg(deg + 360 * k) == expected

    def test_unknown_input(self):
        assert wind_dir_label_from_deg(None) == "ukendt"
        assert wind_dir_label_from_deg(math.nan) == "ukendt"


class TestDurationBucketLabel:

    @pytest.mark.parametrize("value", MISSING)
    def test_unknown_input(self, value):
        assert duration_bucket_label(value) is None

    def test_categories(self):
        assert duration_bucket_label(3600) == "<2 timer"
        assert duration_bucket_label(10800) == "2-4 timer"
        assert duration_bucket_label(18000) == "4-6 timer"
        assert duration_bucket_label(25200) == "6+ timer"

    def test_boundaries(self):
        assert duration_bucket_label(7199) == "<2 timer"
        assert duration_bucket_label(7200) == "2-4 timer"
        assert duration_bucket_label(14400) == "4-6 timer"
        assert duration_bucket_label(21600) == "6+ timer"


class TestMovementLabel:

    def test_missing_values(self):
        assert movement_label(None, 3600) is None
        assert movement_label(1000, None) is None
        assert movement_label(math.nan, 3600) is None

    def test_zero_duration(self):
        assert movement_label(1000, 0) is None

    def test_stationary(self):
        assert movement_label(100, 3600) == "Stillestående/let bevægelse"
        assert movement_label(300, 3600) == "Stillestående/let bevægelse"

    def test_covering_water(self):
        assert movement_label(1500, 3600) == "Affiskning af vand"
        assert movement_label(2000, 3600) == "Affiskning af vand"

    def test_steady(self):
        assert movement_label(800, 3600) == "Roligt tempo"

    def test_uses_speed_not_distance(self):
        # 1200 m over 4 h is 300 m/h
        assert movement_label(1200, 4 * 3600) == "Stillestående/let bevægelse"
        # 600 m in 20 min is 1800 m/h
        assert movement_label(600, 1200) == "Affiskning af vand"
