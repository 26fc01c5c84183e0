"""
Forecast helpers over daily sales frames.

A sales frame is a pandas DataFrame with one row per day, a ``date`` column
and a ``units_sold`` column. These helpers feed the forecast chart and the
shipment planner: smoothed history, the adjusted daily demand forecast,
month-over-month growth and a seasonality curve.
"""

import calendar

import pandas as pd

from config.config import ForecastConfig
from models.enums import ForecastModel
from models.forecast import ForecastDataPoint
from utils.calculations import growth_rate, round_half_up, smooth
from utils.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "smooth_frame",
    "adjustment_factor",
    "forecast_daily_demand",
    "build_forecast_points",
    "monthly_growth",
    "seasonality_curve",
]


def smooth_frame(
    frame: pd.DataFrame,
    column: str = "units_sold",
    window_size: int = 7,
    output_column: str = "smoothed_units",
) -> pd.DataFrame:
    """
    Add a centered moving average of ``column`` to a copy of ``frame``.

    Values are exactly those of ``utils.calculations.smooth``: the window
    spans window_size // 2 rows on each side and is clipped at the ends of
    the frame.
    """
    result = frame.copy()
    result[output_column] = list(smooth(result[column].astype(float).tolist(), window_size))
    return result


def adjustment_factor(config: ForecastConfig) -> float:
    """Combined multiplier from the market and sales velocity adjustments (both in percent)."""
    return (1 + config.market_adjustment / 100) * (1 + config.sales_velocity_adjustment / 100)


def forecast_daily_demand(frame: pd.DataFrame, config: ForecastConfig, column: str = "units_sold") -> float:
    """
    Forecast average daily demand for a product.

    Averages the most recent days of history (how many depends on the
    forecast model) and applies the configured adjustments. Never negative.
    """
    if frame.empty:
        logger.debug("Empty sales frame, forecasting zero demand")
        return 0.0
    lookback = config.lookback_days()
    recent = frame[column].astype(float).tail(lookback)
    baseline = float(recent.mean())
    demand = max(0.0, baseline * adjustment_factor(config))
    logger.debug(
        f"Forecast demand {demand:.2f}/day from {len(recent)} days "
        f"(model={ForecastModel(config.model).value}, baseline={baseline:.2f})"
    )
    return demand


def build_forecast_points(
    frame: pd.DataFrame,
    date_column: str = "date",
    column: str = "units_sold",
    window_size: int = 7,
    forecast_column: str | None = None,
) -> list[ForecastDataPoint]:
    """Convert a sales frame into chart points with smoothed units (and forecast, if present)."""
    smoothed = smooth_frame(frame, column=column, window_size=window_size)
    points = []
    for values in smoothed.to_dict("records"):
        forecast = None
        if forecast_column is not None and pd.notna(values[forecast_column]):
            forecast = float(values[forecast_column])
        points.append(
            ForecastDataPoint(
                date=pd.Timestamp(values[date_column]).date(),
                units_sold=float(values[column]),
                smoothed_units=float(values["smoothed_units"]),
                forecast=forecast,
            )
        )
    return points


def monthly_growth(frame: pd.DataFrame, date_column: str = "date", column: str = "units_sold") -> pd.DataFrame:
    """
    Total units per calendar month and the growth against the previous month.

    Months without sales between the first and last month count as 0 units,
    so growth is always against the previous calendar month. The first month,
    and any month following a zero month, reports 0 growth.
    """
    if frame.empty:
        return pd.DataFrame(columns=["month", "units", "growth_rate"])
    dates = pd.to_datetime(frame[date_column])
    totals = frame[column].astype(float).groupby(dates.dt.to_period("M")).sum().sort_index()
    months = pd.period_range(totals.index.min(), totals.index.max(), freq="M")
    totals = totals.reindex(months, fill_value=0.0)
    previous = totals.shift(1).fillna(0.0)
    growth = [growth_rate(current, prior) for current, prior in zip(totals, previous)]
    return pd.DataFrame(
        {
            "month": totals.index.astype(str),
            "units": totals.to_numpy(),
            "growth_rate": growth,
        }
    )


def seasonality_curve(frame: pd.DataFrame, date_column: str = "date", column: str = "units_sold") -> dict[str, float]:
    """
    Seasonal index per calendar month: the month's mean daily units over the overall mean.

    Only months present in the frame appear. An all-zero history yields 0.0 everywhere.
    """
    if frame.empty:
        return {}
    dates = pd.to_datetime(frame[date_column])
    units = frame[column].astype(float)
    overall = units.mean()
    by_month = units.groupby(dates.dt.month).mean().sort_index()
    curve = {}
    for month, mean in by_month.items():
        index = mean / overall if overall else 0.0
        curve[calendar.month_abbr[int(month)]] = round_half_up(float(index), 4)
    return curve
