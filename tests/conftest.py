"""Shared test fixtures for the osgb_geodesy test suite."""

import pytest

from osgb_geodesy import config
from osgb_geodesy.datums import OSGB36, WGS84
from osgb_geodesy.dms import parse_dms
from osgb_geodesy.gridref import OsGridRef
from osgb_geodesy.latlon import LatLon


@pytest.fixture()
def plain_separator(monkeypatch):
    """Use an ordinary space between d/m/s components so expected strings stay readable."""
    monkeypatch.setattr(config, "DMS_SEPARATOR", " ")


@pytest.fixture()
def caister_osgb36():
    """Worked example from the OS coordinate systems guide (Caister water tower), on OSGB36."""
    return LatLon(
        latitude=parse_dms("52°39′27.2531″N"),
        longitude=parse_dms("1°43′4.5177″E"),
        datum=OSGB36,
    )


@pytest.fixture()
def greenwich_wgs84():
    """Royal Observatory transit circle as a GPS would report it."""
    return LatLon(latitude=51.4778, longitude=-0.0016, datum=WGS84)


@pytest.fixture()
def dg_grid_ref():
    return OsGridRef.parse("TQ 44359 80653")
