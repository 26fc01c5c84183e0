"""
Forecast data models.
"""

from dataclasses import dataclass
from datetime import date


@dataclass
class ForecastDataPoint:
    date: date
    units_sold: float
    smoothed_units: float
    forecast: float | None = None
    confidence: tuple[float, float] | None = None
