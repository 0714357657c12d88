#!/usr/bin/env python

""" Unit-tests for the solar geometry and sunlit/shaded radiation """

import unittest
from math import pi, exp

import twoleaf.default_params as default_params
import twoleaf.default_state as default_state
from twoleaf.file_parser import copy_defaults
from twoleaf.workspace import CanopyWorkspace, Leaf
from twoleaf.radiation import Radiation

__author__  = "Martin De Kauwe"
__version__ = "1.0 (09.02.2016)"
__email__   = "mdekauwe@gmail.com"


class RadiationTestCase(unittest.TestCase):

    def setUp(self):
        self.params = copy_defaults(default_params)
        self.state = copy_defaults(default_state)
        self.state.lai = 3.0
        self.rad = Radiation(self.params)
        self.cw = CanopyWorkspace()

    def test_sun_down_at_midnight(self):
        self.rad.calculate_solar_geometry(self.cw, 180.0, 0)
        self.assertEqual(self.cw.cos_zenith, 0.0)
        self.assertEqual(self.cw.elevation, 0.0)

    def test_summer_noon_elevation(self):
        # lat 35.9N near the solstice, sun ~77 degrees above the horizon
        self.rad.calculate_solar_geometry(self.cw, 172.0, 24)
        elevation = self.cw.elevation * 180.0 / pi
        self.assertGreater(elevation, 70.0)
        self.assertLess(elevation, 80.0)

    def test_winter_sun_lower_than_summer(self):
        self.rad.calculate_solar_geometry(self.cw, 172.0, 24)
        summer = self.cw.elevation
        self.rad.calculate_solar_geometry(self.cw, 355.0, 24)
        self.assertLess(self.cw.elevation, summer)
        self.assertGreater(self.cw.elevation, 0.0)

    def test_declination_at_solstices(self):
        summer = self.rad.calculate_solar_declination(self.rad.day_angle(172))
        winter = self.rad.calculate_solar_declination(self.rad.day_angle(355))
        self.assertAlmostEqual(summer * 180.0 / pi, 23.45, delta=0.5)
        self.assertAlmostEqual(winter * 180.0 / pi, -23.45, delta=0.5)

    def test_diffuse_fraction(self):
        self.rad.calculate_solar_geometry(self.cw, 172.0, 24)

        # overcast
        self.rad.get_diffuse_frac(self.cw, 172.0, 50.0)
        self.assertEqual(self.cw.diffuse_frac, 1.0)

        # clear sky
        self.rad.get_diffuse_frac(self.cw, 172.0, 900.0)
        self.assertGreater(self.cw.diffuse_frac, 0.0)
        self.assertLess(self.cw.diffuse_frac, 0.5)

        # night
        self.rad.calculate_solar_geometry(self.cw, 172.0, 0)
        self.rad.get_diffuse_frac(self.cw, 172.0, 0.0)
        self.assertEqual(self.cw.diffuse_frac, 1.0)

    def test_absorbed_radiation(self):
        par = 1800.0
        self.rad.calculate_solar_geometry(self.cw, 172.0, 24)
        self.rad.get_diffuse_frac(self.cw, 172.0, par / 2.3)
        self.rad.calculate_absorbed_radiation(self.cw, self.state, par)

        self.assertGreater(self.cw.apar_leaf[Leaf.SUNLIT],
                           self.cw.apar_leaf[Leaf.SHADED])
        self.assertGreater(self.cw.apar_leaf[Leaf.SHADED], 0.0)
        self.assertLess(self.cw.apar_leaf.sum(), par)
        self.assertGreater(self.cw.cscalar[Leaf.SUNLIT], 0.0)
        self.assertGreater(self.cw.cscalar[Leaf.SHADED], 0.0)

        # both leaves together hold the whole canopy's capacity
        kn = self.rad.kn
        total = (1.0 - exp(-kn * self.state.lai)) / kn
        self.assertAlmostEqual(self.cw.cscalar.sum(), total)

    def test_no_leaves_absorb_nothing(self):
        self.state.lai = 0.0
        self.cw.apar_leaf[:] = 5.0
        self.rad.calculate_solar_geometry(self.cw, 172.0, 24)
        self.rad.calculate_absorbed_radiation(self.cw, self.state, 1800.0)
        for leaf in Leaf:
            self.assertEqual(self.cw.apar_leaf[leaf], 0.0)
            self.assertEqual(self.cw.cscalar[leaf], 0.0)


if __name__ == "__main__":
    unittest.main()
