from datetime import date

import pandas as pd
import pytest

from aprlib.conventions.types import (
    DAILY,
    MONTHLY,
    LineItemKind,
    PeriodSpan,
    PeriodType,
    UnitPeriod,
)
from aprlib.schedule.items import ByDate, ByOffset, LineItem
from aprlib.schedule.series import (
    CommonPeriodError,
    LineItemSeries,
    SeriesCompletedError,
)

PAY = LineItemKind.PAYMENT
DISB = LineItemKind.DISBURSEMENT


class TestLineItem:
    def test_sign_follows_kind(self):
        assert LineItem.on_date(100, "2021-01-01", PAY).signed_amount == 100.0
        assert LineItem.on_date(100, "2021-01-01", DISB).signed_amount == -100.0

    def test_on_date_coerces_dates(self):
        item = LineItem.on_date(10, "20210315", PAY)
        assert item.schedule == ByDate(date(2021, 3, 15))
        assert item.is_dated
        stamped = LineItem.on_date(10, pd.Timestamp("2021-03-15 10:30"), PAY)
        assert stamped.schedule == ByDate(date(2021, 3, 15))

    def test_unparseable_date(self):
        with pytest.raises(ValueError):
            LineItem.on_date(10, "15/03/2021", PAY)
        with pytest.raises(TypeError):
            LineItem.on_date(10, 20210315, PAY)

    def test_at_offset(self):
        item = LineItem.at_offset(10, 3, 5, PAY)
        assert item.schedule == ByOffset(PeriodSpan(3, 5))
        assert not item.is_dated

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError):
            LineItem.on_date(-1, date(2021, 1, 1), PAY)

    def test_occurrences_must_be_positive(self):
        with pytest.raises(ValueError):
            LineItem.on_date(1, date(2021, 1, 1), PAY, occurrences=0)

    def test_negative_offsets_rejected(self):
        with pytest.raises(ValueError):
            LineItem.at_offset(1, -1, 0, PAY)
        with pytest.raises(ValueError):
            LineItem.at_offset(1, 0, -2, PAY)

    def test_unknown_schedule_rejected(self):
        with pytest.raises(TypeError):
            LineItem(1.0, PAY, date(2021, 1, 1))


class TestBuilding:
    def test_add_after_complete_raises(self, monthly_loan):
        monthly_loan.complete()
        with pytest.raises(SeriesCompletedError):
            monthly_loan.add(LineItem.on_date(1, date(2023, 1, 1), PAY))

    def test_common_period_locked_after_complete(self, monthly_loan):
        monthly_loan.complete()
        with pytest.raises(SeriesCompletedError):
            monthly_loan.common_period = DAILY

    def test_only_line_items_accepted(self):
        series = LineItemSeries()
        with pytest.raises(TypeError):
            series.add((100.0, date(2021, 1, 1)))

    def test_empty_series_cannot_complete(self):
        with pytest.raises(CommonPeriodError):
            LineItemSeries().complete()

    def test_complete_is_idempotent(self, monthly_loan):
        first = monthly_loan.complete().items
        assert monthly_loan.complete() is monthly_loan
        assert monthly_loan.items is first

    def test_len_before_and_after(self, monthly_loan_items):
        series = LineItemSeries()
        series.extend(monthly_loan_items)
        assert len(series) == 25
        assert not series.completed
        series.complete()
        assert len(series) == 25
        assert series.completed


class TestCompletion:
    def test_infers_monthly_and_start_date(self, monthly_loan):
        monthly_loan.complete()
        assert monthly_loan.common_period == MONTHLY
        assert monthly_loan.start_date == date(2020, 1, 15)
        assert monthly_loan.periods_per_year == 12.0
        assert monthly_loan.days_per_period == 30

    def test_items_sorted_by_date(self, monthly_loan_items):
        series = LineItemSeries(list(reversed(monthly_loan_items)))
        dates = [item.date for item in series.items]
        assert dates == sorted(dates)
        assert series.items[0].amount == -5000.0
        assert [item.periods for item in series.items] == list(range(25))
        assert all(item.odd_days == 0 for item in series.items)

    def test_offset_item_gets_a_date(self):
        series = LineItemSeries(
            [
                LineItem.on_date(1000, date(2021, 1, 15), DISB),
                LineItem.on_date(10, date(2021, 2, 15), PAY),
                LineItem.on_date(10, date(2021, 3, 15), PAY),
                LineItem.at_offset(500, 3, 5, PAY),
            ]
        )
        last = series.items[-1]
        assert last.date == date(2021, 4, 20)
        assert last.span == PeriodSpan(3, 5)

    def test_offset_items_need_a_common_period(self):
        series = LineItemSeries(
            [
                LineItem.on_date(1000, date(2021, 1, 15), DISB),
                LineItem.at_offset(1010, 1, 0, PAY),
            ]
        )
        with pytest.raises(CommonPeriodError):
            series.complete()

    def test_offset_items_with_override(self):
        series = LineItemSeries(
            [
                LineItem.on_date(1000, date(2021, 1, 15), DISB),
                LineItem.at_offset(1010, 1, 0, PAY),
            ],
            common_period=MONTHLY,
        )
        assert series.items[-1].date == date(2021, 2, 15)

    def test_offsets_only_with_start_date(self):
        series = LineItemSeries(
            [LineItem.at_offset(1000, 0, 0, DISB), LineItem.at_offset(1010, 2, 0, PAY)],
            common_period=UnitPeriod(PeriodType.WEEKLY, 2),
            start_date="2021-03-01",
        )
        assert [item.date for item in series.items] == [date(2021, 3, 1), date(2021, 3, 29)]

    def test_offsets_only_without_start_date(self):
        series = LineItemSeries(
            [LineItem.at_offset(1000, 0, 0, DISB)], common_period=MONTHLY
        )
        with pytest.raises(CommonPeriodError):
            series.complete()

    def test_same_date_items_fall_back_to_daily(self):
        series = LineItemSeries(
            [
                LineItem.on_date(1000, date(2021, 1, 1), DISB),
                LineItem.on_date(1000, date(2021, 1, 1), PAY),
            ]
        )
        series.complete()
        assert series.common_period == DAILY
        assert all(item.span == PeriodSpan(0, 0) for item in series.items)

    def test_explicit_start_date_before_first_item(self):
        series = LineItemSeries(
            [
                LineItem.on_date(1000, date(2021, 1, 20), DISB),
                LineItem.on_date(510, date(2021, 2, 20), PAY),
                LineItem.on_date(510, date(2021, 3, 20), PAY),
            ],
            start_date=date(2021, 1, 10),
        )
        assert series.items[0].span == PeriodSpan(0, 10)
        assert series.start_date == date(2021, 1, 10)

    def test_start_date_after_first_item_raises(self, monthly_loan_items):
        series = LineItemSeries(monthly_loan_items, start_date=date(2020, 2, 1))
        with pytest.raises(ValueError):
            series.complete()

    def test_override_before_complete(self, monthly_loan):
        monthly_loan.common_period = UnitPeriod(PeriodType.MONTHLY, 2)
        monthly_loan.complete()
        assert monthly_loan.common_period == UnitPeriod(PeriodType.MONTHLY, 2)
        assert monthly_loan.periods_per_year == 6.0
        assert monthly_loan.items[2].span == PeriodSpan(1, 0)

    def test_recurrence_defaults_to_common_period(self):
        series = LineItemSeries(
            [
                LineItem.on_date(1000, date(2021, 1, 1), DISB),
                LineItem.on_date(100, date(2021, 2, 1), PAY, occurrences=11),
                LineItem.on_date(1, date(2021, 3, 1), PAY),
            ]
        )
        recurring = series.items[1]
        assert recurring.occurrences == 11
        assert recurring.recurrence_period == MONTHLY
        assert series.items[2].recurrence_period is None

    def test_reg_z_override(self, reg_z_1978):
        items = reg_z_1978.items
        assert reg_z_1978.periods_per_year == 0.5
        assert reg_z_1978.days_per_period == 720
        # one month against a 24 month period rounds to zero periods
        assert items[1].span == PeriodSpan(0, 31)
        assert items[1].recurrence_period == MONTHLY

    def test_completion_leaves_items_untouched(self, monthly_loan_items):
        snapshot = list(monthly_loan_items)
        LineItemSeries(monthly_loan_items).complete()
        assert monthly_loan_items == snapshot
