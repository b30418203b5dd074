"""
Unit tests for the care rules package.

These tests verify:
1. Blood pressure and glucose classification against fixed cutoffs
2. Refill date projection from stock and dosing
3. Reminder selection and the spoken reminder text
4. Cycle prediction and PCOS risk banding

Usage:
    pytest tests/test_care_rules.py -v
"""
from datetime import date, datetime, time, timedelta

import pytest

from care_rules import (
    Appointment,
    HealthReading,
    Medication,
    PcosRisk,
    ReadingKind,
    ReadingStatus,
    assess_pcos_risk,
    blood_pressure_trend,
    classify,
    doses_per_day_for,
    estimate_refill_date,
    is_low_stock,
    next_appointment,
    predict_next_period,
    reminder_messages,
    select_reminders,
    taken_on,
)


def bp(systolic, diastolic):
    return HealthReading(kind=ReadingKind.BLOOD_PRESSURE, systolic=systolic, diastolic=diastolic)


def sugar(value):
    return HealthReading(kind=ReadingKind.GLUCOSE, glucose_value=value)


def med(name, stock, threshold=5, doses=1, last_taken_at=None):
    return Medication(
        name=name,
        doses_per_day=doses,
        stock_units=stock,
        refill_threshold=threshold,
        last_taken_at=last_taken_at,
    )


# ============================================================================
# Threshold Evaluator Tests
# ============================================================================


class TestBloodPressureClassification:
    """Blood pressure cutoffs: >140/>90 high, <90/<60 low."""

    @pytest.mark.parametrize("systolic,diastolic", [(141, 80), (120, 91), (180, 110), (141, 91)])
    def test_high_when_either_value_above_cutoff(self, systolic, diastolic):
        assert classify(bp(systolic, diastolic)) == ReadingStatus.HIGH

    @pytest.mark.parametrize("systolic,diastolic", [(89, 70), (110, 59), (80, 50)])
    def test_low_when_either_value_below_cutoff(self, systolic, diastolic):
        assert classify(bp(systolic, diastolic)) == ReadingStatus.LOW

    @pytest.mark.parametrize("systolic,diastolic", [(120, 80), (140, 90), (90, 60)])
    def test_normal_range_includes_boundaries(self, systolic, diastolic):
        assert classify(bp(systolic, diastolic)) == ReadingStatus.NORMAL

    def test_high_takes_precedence_over_low(self):
        """150/55 is both above the systolic and below the diastolic cutoff."""
        assert classify(bp(150, 55)) == ReadingStatus.HIGH

    def test_high_for_every_pair_above_cutoff(self):
        for systolic in range(60, 220, 7):
            for diastolic in range(40, 140, 7):
                if systolic > 140 or diastolic > 90:
                    assert classify(bp(systolic, diastolic)) == ReadingStatus.HIGH


class TestGlucoseClassification:
    """Glucose cutoffs: >180 high, <70 low."""

    def test_high(self):
        assert classify(sugar(181)) == ReadingStatus.HIGH
        assert classify(sugar(250.5)) == ReadingStatus.HIGH

    def test_low(self):
        assert classify(sugar(69.9)) == ReadingStatus.LOW
        assert classify(sugar(40)) == ReadingStatus.LOW

    def test_normal_across_closed_range(self):
        value = 70.0
        while value <= 180.0:
            assert classify(sugar(value)) == ReadingStatus.NORMAL
            value += 2.5

    def test_status_values_match_labels(self):
        assert ReadingStatus.HIGH.value == "High"
        assert ReadingKind.GLUCOSE.value == "sugar"


class TestBloodPressureTrend:
    """Trend keeps only blood pressure readings, oldest first."""

    def test_filters_and_reverses(self):
        now = datetime(2024, 3, 10, 9, 0)
        newest = HealthReading(ReadingKind.BLOOD_PRESSURE, 130, 85, recorded_at=now)
        glucose = HealthReading(ReadingKind.GLUCOSE, glucose_value=110, recorded_at=now - timedelta(hours=1))
        oldest = HealthReading(ReadingKind.BLOOD_PRESSURE, 125, 82, recorded_at=now - timedelta(days=1))

        assert blood_pressure_trend([newest, glucose, oldest]) == [oldest, newest]

    def test_does_not_mutate_input(self):
        readings = [bp(120, 80), bp(130, 85)]
        blood_pressure_trend(readings)
        assert readings == [bp(120, 80), bp(130, 85)]


# ============================================================================
# Refill Estimator Tests
# ============================================================================


class TestRefillEstimator:
    """Refill date is today plus whole days of stock."""

    def test_thirty_daily_doses(self):
        assert estimate_refill_date(30, 1, date(2024, 1, 1)) == date(2024, 1, 31)

    def test_empty_stock_is_due_today(self):
        today = date(2024, 6, 15)
        assert estimate_refill_date(0, 2, today) == today

    def test_partial_days_are_dropped(self):
        assert estimate_refill_date(7, 2, date(2024, 2, 27)) == date(2024, 3, 1)

    def test_dose_count_below_one_is_a_precondition(self):
        with pytest.raises(ZeroDivisionError):
            estimate_refill_date(10, 0, date(2024, 1, 1))

    def test_frequency_labels(self):
        assert doses_per_day_for("Daily") == 1
        assert doses_per_day_for("Twice Daily") == 2
        assert doses_per_day_for("Thrice Daily") == 3
        assert doses_per_day_for("Every few hours") == 3

    def test_low_stock_is_inclusive(self):
        assert is_low_stock(med("Aspirin", stock=5, threshold=5))
        assert is_low_stock(med("Aspirin", stock=0, threshold=0))
        assert not is_low_stock(med("Aspirin", stock=6, threshold=5))

    def test_taken_on(self):
        taken = med("Metformin", 20, last_taken_at=datetime(2024, 5, 2, 8, 15))
        assert taken_on(taken, date(2024, 5, 2))
        assert not taken_on(taken, date(2024, 5, 3))
        assert not taken_on(med("Metformin", 20), date(2024, 5, 2))


# ============================================================================
# Reminder Selector Tests
# ============================================================================


class TestReminderSelector:
    """At most one appointment and one low-stock reminder per day."""

    TODAY = date(2024, 4, 10)

    def appt(self, title, day, hour=10, attended=False):
        return Appointment(title=title, scheduled_at=datetime.combine(day, time(hour, 0)), attended=attended)

    def test_earliest_listed_appointment_today_wins(self):
        appointments = [
            self.appt("Dentist", self.TODAY, hour=16),
            self.appt("Cardiology", self.TODAY, hour=9),
        ]
        selection = select_reminders([], appointments, self.TODAY)
        assert selection.appointment_reminder.title == "Dentist"

    def test_attended_and_other_days_are_skipped(self):
        appointments = [
            self.appt("Yesterday", self.TODAY - timedelta(days=1)),
            self.appt("Done", self.TODAY, attended=True),
            self.appt("Tomorrow", self.TODAY + timedelta(days=1)),
            self.appt("Eye check", self.TODAY, hour=14),
        ]
        selection = select_reminders([], appointments, self.TODAY)
        assert selection.appointment_reminder.title == "Eye check"

    def test_first_low_stock_medication_wins(self):
        meds = [med("Vitamin D", 40), med("Aspirin", 3), med("Insulin", 1)]
        selection = select_reminders(meds, [], self.TODAY)
        assert selection.low_stock_reminder.name == "Aspirin"

    def test_no_low_stock_when_all_above_threshold(self):
        meds = [med("Vitamin D", 40), med("Aspirin", 6, threshold=5)]
        selection = select_reminders(meds, [], self.TODAY)
        assert selection.low_stock_reminder is None

    def test_empty_inputs(self):
        selection = select_reminders([], [], self.TODAY)
        assert selection.is_empty
        assert reminder_messages(selection) == []

    def test_accepts_generators(self):
        meds = (m for m in [med("Aspirin", 2)])
        appointments = (a for a in [self.appt("GP", self.TODAY)])
        selection = select_reminders(meds, appointments, self.TODAY)
        assert selection.low_stock_reminder.name == "Aspirin"
        assert selection.appointment_reminder.title == "GP"

    def test_idempotent(self):
        meds = [med("Aspirin", 2), med("Insulin", 1)]
        appointments = [self.appt("GP", self.TODAY)]
        first = select_reminders(meds, appointments, self.TODAY)
        second = select_reminders(meds, appointments, self.TODAY)
        assert first == second
        assert classify(bp(150, 95)) == classify(bp(150, 95))
        assert estimate_refill_date(9, 2, self.TODAY) == estimate_refill_date(9, 2, self.TODAY)

    def test_messages(self):
        selection = select_reminders(
            [med("Aspirin", 2)], [self.appt("Cardiology", self.TODAY, hour=9)], self.TODAY
        )
        assert reminder_messages(selection) == [
            "You have an appointment today: Cardiology at 09:00",
            "Reminder: Your medicine Aspirin is running low. Please refill soon.",
        ]

    def test_next_appointment_includes_overdue(self):
        appointments = [
            self.appt("Missed", self.TODAY - timedelta(days=2)),
            self.appt("Today", self.TODAY),
        ]
        assert next_appointment(appointments, self.TODAY).title == "Missed"
        assert next_appointment([self.appt("Later", self.TODAY + timedelta(days=3))], self.TODAY) is None


# ============================================================================
# Women's Health Tests
# ============================================================================


class TestCyclePrediction:

    def test_default_cycle(self):
        prediction = predict_next_period(date(2024, 1, 5))
        assert prediction.next_start == date(2024, 2, 2)
        assert prediction.expected_end == date(2024, 2, 6)

    def test_custom_lengths(self):
        prediction = predict_next_period(date(2024, 2, 20), cycle_length=32, period_length=1)
        assert prediction.next_start == date(2024, 3, 23)
        assert prediction.expected_end == prediction.next_start


class TestPcosRisk:

    def test_bands(self):
        assert assess_pcos_risk({}) == PcosRisk.LOW
        assert assess_pcos_risk({"acne": True}) == PcosRisk.LOW
        assert assess_pcos_risk({"acne": True, "weight_gain": True}) == PcosRisk.MEDIUM
        assert assess_pcos_risk(
            {"acne": True, "weight_gain": True, "excess_hair": True}
        ) == PcosRisk.MEDIUM
        assert assess_pcos_risk(
            {"acne": True, "weight_gain": True, "excess_hair": True, "mood_swings": True}
        ) == PcosRisk.HIGH

    def test_unknown_keys_are_ignored(self):
        assert assess_pcos_risk({"headache": True, "fatigue": True}) == PcosRisk.LOW
