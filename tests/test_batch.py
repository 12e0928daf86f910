"""Tests for array-based conversion, checked against the per-point path."""

import math

import numpy as np
import pytest

from osgb_geodesy import batch, datums
from osgb_geodesy.errors import NonConvergenceError, OutOfRangeError
from osgb_geodesy.gridref import OsGridRef
from osgb_geodesy.latlon import LatLon

LATS = np.array([49.9, 51.4778, 52.657570, 55.95, 58.6])
LONS = np.array([-5.2, -0.0016, 1.717922, -3.19, -3.0])


@pytest.fixture()
def points():
    return [LatLon(latitude=lat, longitude=lon) for lat, lon in zip(LATS, LONS)]


class TestCartesian:
    def test_matches_scalar(self, points):
        xyz = batch.to_cartesian_array(LATS, LONS, datums.WGS84.ellipsoid)
        assert xyz.shape == (len(points), 3)
        for row, point in zip(xyz, points):
            np.testing.assert_allclose(row, point.to_cartesian().to_array(), atol=1e-6)

    def test_transform_matches_scalar(self, points):
        xyz = batch.to_cartesian_array(LATS, LONS, datums.WGS84.ellipsoid)
        moved = batch.apply_transform_array(xyz, datums.OSGB36.transform)
        for row, point in zip(moved, points):
            expected = point.to_cartesian().apply_transform(datums.OSGB36.transform)
            np.testing.assert_allclose(row, expected.to_array(), atol=1e-6)

    def test_geodetic_round_trip(self):
        xyz = batch.to_cartesian_array(LATS, LONS, datums.OSGB36.ellipsoid)
        lats, lons = batch.to_geodetic_array(xyz, datums.OSGB36.ellipsoid)
        np.testing.assert_allclose(lats, LATS, atol=1e-9)
        np.testing.assert_allclose(lons, LONS, atol=1e-9)


class TestConvertDatum:
    @pytest.mark.parametrize("target", [datums.OSGB36, datums.ED50, datums.NAD27])
    def test_matches_scalar(self, points, target):
        lats, lons = batch.convert_datum_arrays(LATS, LONS, datums.WGS84, target)
        for lat, lon, point in zip(lats, lons, points):
            expected = point.convert_datum(target)
            assert lat == pytest.approx(expected.latitude, abs=1e-9)
            assert lon == pytest.approx(expected.longitude, abs=1e-9)

    def test_same_datum_is_identity(self):
        lats, lons = batch.convert_datum_arrays(LATS, LONS, datums.OSGB36, datums.OSGB36)
        np.testing.assert_array_equal(lats, LATS)
        np.testing.assert_array_equal(lons, LONS)

    def test_accepts_lists(self):
        lats, lons = batch.convert_datum_arrays([51.4778], [-0.0016], datums.WGS84, datums.OSGB36)
        assert lats.shape == (1,)


# ── Grid ─────────────────────────────────────────────────────────


class TestGrid:
    def test_forward_matches_scalar(self, points):
        eastings, northings = batch.to_grid_arrays(LATS, LONS)
        for e, n, point in zip(eastings, northings, points):
            grid = point.to_grid_ref()
            assert e == pytest.approx(grid.easting, abs=2e-3)
            assert n == pytest.approx(grid.northing, abs=2e-3)

    def test_caister(self):
        eastings, northings = batch.to_grid_arrays(
            [52 + 39 / 60 + 27.2531 / 3600], [1 + 43 / 60 + 4.5177 / 3600], datums.OSGB36,
        )
        assert eastings[0] == pytest.approx(651409.903, abs=1e-3)
        assert northings[0] == pytest.approx(313177.270, abs=1e-3)

    def test_inverse_matches_scalar(self):
        eastings = np.array([651409.903, 544359.0, 200000.0, 400000.0])
        northings = np.array([313177.270, 180653.0, 900000.0, 1200000.0])
        lats, lons = batch.from_grid_arrays(eastings, northings)
        for e, n, lat, lon in zip(eastings, northings, lats, lons):
            expected = OsGridRef(easting=e, northing=n).to_lat_lon()
            assert lat == pytest.approx(expected.latitude, abs=1e-8)
            assert lon == pytest.approx(expected.longitude, abs=1e-8)

    def test_inverse_on_osgb36(self):
        lats, lons = batch.from_grid_arrays([651409.903], [313177.270], datums.OSGB36)
        assert lats[0] == pytest.approx(52 + 39 / 60 + 27.2531 / 3600, abs=1e-7)
        assert lons[0] == pytest.approx(1 + 43 / 60 + 4.5177 / 3600, abs=1e-7)

    def test_nan_northing_fails(self):
        with pytest.raises(NonConvergenceError) as exc_info:
            batch.from_grid_arrays([400000.0, 400000.0], [300000.0, math.nan])
        assert math.isnan(exc_info.value.northing)

    def test_far_outside_grid_is_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            batch.from_grid_arrays([400000.0, 400000.0], [300000.0, 2e7])
        with pytest.raises(OutOfRangeError):
            batch.from_grid_arrays([1e9], [0.0])

    def test_antimeridian_reported_as_positive(self):
        xyz = batch.to_cartesian_array([0.0], [180.0], datums.WGS84.ellipsoid)
        xyz[:, 1] = -0.0
        _, lons = batch.to_geodetic_array(xyz, datums.WGS84.ellipsoid)
        assert lons[0] == 180.0

    def test_iteration_cap(self):
        with pytest.raises(NonConvergenceError) as exc_info:
            batch.from_grid_arrays([651409.903], [313177.270], max_iterations=1)
        assert exc_info.value.iterations == 1
