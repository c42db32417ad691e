"""Rough point-to-point range estimate for licensed stations.

Modified Friis transmission equation, solved for distance:

    d [km] = 10 ** ((P_t + G_t + G_r - P_r) / 20) / (41.88 * f [MHz])

P_t and P_r in dBm, gains in dBi. The source data gives powers in dBW
(dBm = dBW + 30). The far end's receive sensitivity and gain are unknown, so
the station's own receive figures stand in for them; the result is a guess,
not a link budget.
"""

from __future__ import annotations

import math

import numpy as np
import pandas as pd

DBW_TO_DBM = 30.0
FRIIS_CONSTANT = 41.88


def estimate_range(
    tx_power_dbw: float,
    tx_gain_dbi: float,
    rx_level_dbw: float,
    rx_gain_dbi: float,
    frequency_mhz: float,
) -> float:
    """Estimated range in km, or NaN when the frequency is zero or missing."""
    if not frequency_mhz or math.isnan(frequency_mhz):
        return math.nan

    p_t = tx_power_dbw + DBW_TO_DBM
    p_r = rx_level_dbw + DBW_TO_DBM
    return 10 ** ((p_t + tx_gain_dbi + rx_gain_dbi - p_r) / 20) / (FRIIS_CONSTANT * frequency_mhz)


def estimate_range_series(df: pd.DataFrame) -> pd.Series:
    """Vectorized estimate_range over a tower table with numeric columns."""
    freq = df["Tx_Frequency"].astype(float)
    p_t = df["Tx_Power"].astype(float) + DBW_TO_DBM
    p_r = df["Unfaded_Received_Signal_Level"].astype(float) + DBW_TO_DBM
    gains = df["Tx_Antenna_Gain"].astype(float) + df["Rx_Antenna_Gain"].astype(float)

    distance = np.power(10.0, (p_t + gains - p_r) / 20) / (FRIIS_CONSTANT * freq.where(freq != 0))
    return distance.rename("Range")
