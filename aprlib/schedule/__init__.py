# Re-export schedule components
from .common_period import (
    CommonPeriodInference,
    analyze_common_period,
    classify_gap,
    infer_common_period,
)
from .items import ByDate, ByOffset, LineItem, ResolvedLineItem
from .periods import (
    add_period,
    add_units,
    days_per_period,
    diff_months,
    diff_weeks,
    diff_years,
    periods_per_year,
    resolve_date,
    resolve_span,
)
from .series import CommonPeriodError, LineItemSeries, SeriesCompletedError
