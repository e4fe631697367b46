# tools/generate_synthetic_keeling.py
"""
Generate a synthetic Keeling-curve CSV (trend + seasonal cycle + noise),
observed history followed by a forecast with widening 95% bounds.
Writes sample_keeling_data.csv in repo root, usable offline with
`keeling-chart --source sample_keeling_data.csv`.
"""
import numpy as np
import pandas as pd
from pathlib import Path

OUT = Path("sample_keeling_data.csv")

# Config: 736 observed months (Mar 1958 onwards) + 10 years of forecast
OBSERVED = 736
FORECAST = 120
START = "1958-03-01"

rng = np.random.default_rng(42)

months = OBSERVED + FORECAST
dates = pd.date_range(START, periods=months, freq="MS")
t = np.arange(months)

# Trend: accelerating rise from ~315 ppm
trend = 315.0 + 0.07 * t + 0.00009 * t ** 2

# Seasonal cycle: ~3 ppm peak-to-trough, peak in May
season = 3.0 * np.sin(2 * np.pi * (dates.month.to_numpy() - 2) / 12.0)

noise = rng.normal(scale=0.3, size=months)
noise[OBSERVED:] = 0.0  # forecast is the smooth model
yhat = (trend + season + noise).round(2)

# Bounds: tight on history, widening with forecast horizon
horizon = np.clip(t - OBSERVED + 1, 0, None)
half_width = 0.6 + 1.96 * 0.05 * np.sqrt(horizon) * 4
lower = (yhat - half_width).round(2)
upper = (yhat + half_width).round(2)

df = pd.DataFrame({
    "ds": dates.strftime("%Y-%m-%d"),
    "yhat": yhat,
    "yhat_lower": lower,
    "yhat_upper": upper,
})
OUT.write_text(df.to_csv(index=False))
print(f"WROTE {OUT} ({len(df)} rows, {OBSERVED} observed)")
