"""Shared schedules used across the APR tests.

Monthly loan: 5,000 disbursed 2020-01-15, repaid by 24 monthly payments of
230 on the 15th (nominal APR about 9.685%).
"""

from datetime import date

import pytest
from dateutil.relativedelta import relativedelta

from aprlib.conventions.types import LineItemKind, MONTHLY, PeriodType, UnitPeriod
from aprlib.schedule.items import LineItem
from aprlib.schedule.series import LineItemSeries

LOAN_DATE = date(2020, 1, 15)


@pytest.fixture
def monthly_loan_items():
    items = [LineItem.on_date(5000.0, LOAN_DATE, LineItemKind.DISBURSEMENT)]
    for n in range(1, 25):
        items.append(
            LineItem.on_date(230.0, LOAN_DATE + relativedelta(months=n), LineItemKind.PAYMENT)
        )
    return items


@pytest.fixture
def monthly_loan(monthly_loan_items):
    return LineItemSeries(monthly_loan_items)


@pytest.fixture
def annuity_loan():
    """The monthly loan with the payments entered as one recurring item."""
    return LineItemSeries(
        [
            LineItem.on_date(5000.0, LOAN_DATE, LineItemKind.DISBURSEMENT),
            LineItem.on_date(
                230.0,
                LOAN_DATE + relativedelta(months=1),
                LineItemKind.PAYMENT,
                occurrences=24,
                recurrence_period=MONTHLY,
            ),
        ]
    )


@pytest.fixture
def reg_z_1978():
    """5,000 on 1978-01-10, common period of 24 months, 24 monthly payments of 230."""
    return LineItemSeries(
        [
            LineItem.on_date(5000.0, date(1978, 1, 10), LineItemKind.DISBURSEMENT),
            LineItem.on_date(
                230.0,
                date(1978, 2, 10),
                LineItemKind.PAYMENT,
                occurrences=24,
                recurrence_period=MONTHLY,
            ),
        ],
        common_period=UnitPeriod(PeriodType.MONTHLY, 24),
    )
