"""Tests for TimeRangeModel - knob angles and everything derived from them."""
from datetime import date, datetime
from unittest.mock import MagicMock

import pytest

from sleepdial_helper import MalformedTimeString
from sleepdial_ui.core.SliderConfig import SliderConfig
from sleepdial_ui.core.TimeRangeModel import TimeRangeModel


class TestTimeRangeModelDefaults:
    def test_default_range_is_six_hours(self):
        model = TimeRangeModel()

        assert model.start_angle == 0.0
        assert model.end_angle == 90.0
        assert model.start_time == "00:00"
        assert model.end_time == "06:00"
        assert model.duration_hours() == 6.0
        assert model.formatted_duration() == "6 hr 0 min"
        assert model.connector_fraction() == 0.25

    def test_default_config_and_date(self):
        model = TimeRangeModel()

        assert model.config == SliderConfig()
        assert model.selected_date == date.today()

    def test_constructor_normalizes_angles(self):
        model = TimeRangeModel(start_angle=-30, end_angle=450)

        assert model.start_angle == 330.0
        assert model.end_angle == 90.0


class TestSetters:
    def test_set_start_and_end_angle(self):
        model = TimeRangeModel()
        model.set_start_angle(45.0)
        model.set_end_angle(135.0)

        assert model.start_angle == 45.0
        assert model.end_angle == 135.0

    def test_setters_normalize(self):
        model = TimeRangeModel()
        model.set_start_angle(370.0)
        model.set_end_angle(-90.0)

        assert model.start_angle == pytest.approx(10.0)
        assert model.end_angle == 270.0

    def test_plain_setter_does_not_clamp(self):
        model = TimeRangeModel()
        model.set_start_angle(89.0)

        assert model.start_angle == 89.0
        assert model.end_angle == 90.0

    def test_set_times_from_strings(self):
        model = TimeRangeModel()
        model.set_start_time("22:30")
        model.set_end_time("07:15")

        assert model.start_angle == 337.5
        assert model.end_angle == 108.75
        assert model.start_time == "22:30"
        assert model.end_time == "07:15"
        assert model.formatted_duration() == "8 hr 45 min"

    def test_set_time_malformed_keeps_state(self):
        model = TimeRangeModel()

        with pytest.raises(MalformedTimeString):
            model.set_start_time("25:99")

        assert model.start_angle == 0.0


class TestGuardedSetters:
    def test_end_too_close_pushes_start(self):
        model = TimeRangeModel()
        model.set_start_angle(10.0)

        model.set_end_angle_guarded(5.0, 20)

        assert model.end_angle == 90.0
        assert model.start_angle == 70.0

    def test_end_far_enough_is_applied(self):
        model = TimeRangeModel()
        model.set_start_angle(10.0)

        model.set_end_angle_guarded(120.0, 20)

        assert model.end_angle == 120.0
        assert model.start_angle == 10.0

    def test_start_too_close_pushes_end(self):
        model = TimeRangeModel()

        model.set_start_angle_guarded(80.0, 20)

        assert model.start_angle == 0.0
        assert model.end_angle == 20.0

    def test_start_far_enough_is_applied(self):
        model = TimeRangeModel()

        model.set_start_angle_guarded(30.0, 20)

        assert model.start_angle == 30.0
        assert model.end_angle == 90.0

    def test_exact_separation_is_allowed(self):
        model = TimeRangeModel()

        model.set_start_angle_guarded(70.0, 20)

        assert model.start_angle == 70.0

    def test_separation_defaults_to_min_duration(self):
        model = TimeRangeModel(SliderConfig(min_duration_hours=1.0))

        model.set_start_angle_guarded(80.0)

        assert model.end_angle == 15.0

    def test_pushed_angle_is_normalized(self):
        model = TimeRangeModel(start_angle=0.0, end_angle=10.0)

        model.set_end_angle_guarded(5.0, 20)

        assert model.start_angle == 350.0

    def test_overnight_start_move_is_applied(self):
        model = TimeRangeModel(start_angle=300.0, end_angle=90.0)

        model.set_start_angle_guarded(310.0, 20)

        assert model.start_angle == 310.0
        assert model.end_angle == 90.0
        assert model.formatted_duration() == "9 hr 20 min"

    def test_overnight_end_move_is_applied(self):
        model = TimeRangeModel(start_angle=300.0, end_angle=90.0)

        model.set_end_angle_guarded(100.0, 20)

        assert model.start_angle == 300.0
        assert model.end_angle == 100.0

    def test_end_may_cross_midnight(self):
        model = TimeRangeModel(start_angle=280.0, end_angle=350.0)

        model.set_end_angle_guarded(20.0, 20)

        assert model.start_angle == 280.0
        assert model.end_angle == 20.0

    def test_range_longer_than_half_a_day_is_applied(self):
        model = TimeRangeModel()

        model.set_end_angle_guarded(250.0, 20)

        assert model.start_angle == 0.0
        assert model.end_angle == 250.0

    def test_start_too_close_across_midnight_pushes_end(self):
        model = TimeRangeModel(start_angle=300.0, end_angle=5.0)

        model.set_start_angle_guarded(355.0, 20)

        assert model.start_angle == 300.0
        assert model.end_angle == 320.0


class TestRotation:
    def test_rotate_moves_both(self):
        model = TimeRangeModel()
        model.rotate_both_by(30.0)

        assert model.start_angle == 30.0
        assert model.end_angle == 120.0

    @pytest.mark.parametrize("delta", [15.0, -15.0, 123.4, -400.0, 720.0, 359.9])
    def test_rotate_preserves_connector_fraction(self, delta):
        model = TimeRangeModel(start_angle=350.0, end_angle=20.0)
        before = model.connector_fraction()

        model.rotate_both_by(delta)

        assert model.connector_fraction() == pytest.approx(before)
        assert 0.0 <= model.start_angle < 360.0
        assert 0.0 <= model.end_angle < 360.0

    def test_consecutive_rotations_add_up(self):
        model = TimeRangeModel()
        for _ in range(4):
            model.rotate_both_by(10.0)

        assert model.start_angle == pytest.approx(40.0)
        assert model.end_angle == pytest.approx(130.0)


class TestDerivedValues:
    def test_wrap_past_midnight(self):
        model = TimeRangeModel(start_angle=300.0, end_angle=90.0)

        assert model.duration_hours() == pytest.approx(10.0)
        assert model.formatted_duration() == "10 hr 0 min"
        assert model.connector_fraction() == pytest.approx(150 / 360)

    def test_equal_angles_are_zero(self):
        model = TimeRangeModel(start_angle=45.0, end_angle=45.0)

        assert model.duration_hours() == 0.0
        assert model.connector_fraction() == 0.0
        assert model.formatted_duration() == "0 min"

    def test_minutes_only_duration(self):
        model = TimeRangeModel(start_angle=0.0, end_angle=7.5)

        assert model.formatted_duration() == "30 min"

    def test_duration_minutes_round_down(self):
        # 37 minutes
        model = TimeRangeModel(start_angle=0.0, end_angle=9.25)

        assert model.formatted_duration() == "35 min"

    def test_formatted_clock_time(self):
        model = TimeRangeModel()

        assert model.formatted_clock_time(215.5) == "14:20"
        assert model.formatted_clock_time(224.75) == "14:55"

    def test_ranges_hold_for_all_angle_pairs(self):
        model = TimeRangeModel()
        angles = [i * 7.5 for i in range(48)]

        for start in angles:
            for end in angles:
                model.set_start_angle(start)
                model.set_end_angle(end)

                assert 0.0 <= model.duration_hours() < 24.0
                assert 0.0 <= model.connector_fraction() < 1.0

    def test_datetimes_without_wrap(self):
        model = TimeRangeModel(selected_date=date(2026, 1, 5))

        assert model.start_datetime() == datetime(2026, 1, 5, 0, 0)
        assert model.end_datetime() == datetime(2026, 1, 5, 6, 0)

    def test_datetimes_wrap_to_next_day(self):
        model = TimeRangeModel(start_angle=300.0, end_angle=90.0, selected_date=date(2026, 1, 31))

        assert model.start_datetime() == datetime(2026, 1, 31, 20, 0)
        assert model.end_datetime() == datetime(2026, 2, 1, 6, 0)


class TestObservers:
    def test_observer_called_after_every_mutation(self):
        model = TimeRangeModel()
        observer = MagicMock()
        model.add_observer(observer)

        model.set_start_angle(10.0)
        model.set_end_angle(100.0)
        model.rotate_both_by(5.0)
        model.set_start_angle_guarded(0.0, 20)
        model.set_end_angle_guarded(200.0, 20)

        assert observer.call_count == 5
        observer.assert_called_with(model)

    def test_observer_sees_new_state(self):
        model = TimeRangeModel()
        seen = []
        model.add_observer(lambda m: seen.append(m.start_angle))

        model.set_start_angle(42.0)

        assert seen == [42.0]

    def test_remove_observer(self):
        model = TimeRangeModel()
        observer = MagicMock()
        model.add_observer(observer)
        model.remove_observer(observer)

        model.set_start_angle(10.0)

        observer.assert_not_called()

    def test_remove_unknown_observer_is_ignored(self):
        model = TimeRangeModel()
        model.remove_observer(MagicMock())

    def test_duration_observer_only_on_text_change(self):
        model = TimeRangeModel()
        observer = MagicMock()
        model.add_duration_observer(observer)

        # 6 hr 2 min still reads "6 hr 0 min"
        model.set_end_angle(90.5)
        observer.assert_not_called()

        model.set_end_angle(120.0)
        observer.assert_called_once_with("8 hr 0 min")

    def test_rotation_does_not_change_duration_text(self):
        model = TimeRangeModel()
        observer = MagicMock()
        model.add_duration_observer(observer)

        model.rotate_both_by(45.0)

        observer.assert_not_called()
