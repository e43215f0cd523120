from __future__ import annotations

import pandas as pd


class DataQualityError(RuntimeError):
    pass


def validate_monthly_series(df: pd.DataFrame) -> None:
    required = ["year_month", "percent_change"]
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise DataQualityError(f"Missing columns in monthly series: {missing}")

    if df["year_month"].isna().any():
        raise DataQualityError("year_month has nulls")

    if df["percent_change"].isna().any():
        raise DataQualityError("percent_change has nulls")

    if df.duplicated(subset=["year_month"]).any():
        raise DataQualityError("Duplicates on year_month in monthly series")

    if not df["year_month"].is_monotonic_increasing:
        raise DataQualityError("monthly series is not sorted by year_month")
