"""Tests for the transfer-curve figure."""

from __future__ import annotations

import pytest

from rfpower.config import ConverterConfig
from rfpower.visualization import plot_power_curve, power_curve


class TestPowerCurve:
    def test_default_range(self) -> None:
        dbm, watts = power_curve()
        assert len(dbm) == len(watts) == 181
        assert dbm[0] == -30.0
        assert dbm[-1] == 60.0
        assert watts[0] == pytest.approx(1e-6)
        assert watts[-1] == pytest.approx(1e3)

    def test_custom_range(self) -> None:
        dbm, watts = power_curve(ConverterConfig(curve_min_dbm=0, curve_max_dbm=30, curve_points=4))
        assert list(dbm) == [0.0, 10.0, 20.0, 30.0]
        assert list(watts) == pytest.approx([1e-3, 1e-2, 1e-1, 1.0])


class TestPlot:
    def test_curve_only(self) -> None:
        fig = plot_power_curve()
        assert len(fig.data) == 1
        assert fig.layout.yaxis.type == "log"

    def test_operating_point_marked(self) -> None:
        fig = plot_power_curve(20.0, 0.1)
        assert len(fig.data) == 2
        assert list(fig.data[1].x) == [20.0]
        assert list(fig.data[1].y) == [0.1]

    def test_zero_watts_not_marked(self) -> None:
        # log axis cannot show 0 W
        assert len(plot_power_curve(-4000.0, 0.0).data) == 1
