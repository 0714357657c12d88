#!/usr/bin/env python

""" Unit-tests for the leaf C3 photosynthesis model """

import unittest

import twoleaf.default_control as default_control
import twoleaf.default_params as default_params
import twoleaf.default_state as default_state
from twoleaf.file_parser import copy_defaults
from twoleaf.workspace import CanopyWorkspace, Met, Leaf
from twoleaf.photosynthesis import PhotosynthesisC3

__author__ = "Martin De Kauwe"
__version__ = "1.0 (04.03.2014)"
__email__  = "mdekauwe@gmail.com"


class PhotosynthesisC3TestCase(unittest.TestCase):

    def setUp(self):
        self.control = copy_defaults(default_control)
        self.params = copy_defaults(default_params)
        self.state = copy_defaults(default_state)
        self.ps = PhotosynthesisC3(self.control, self.params, self.state)

        self.cw = CanopyWorkspace()
        self.cw.leaf_idx = Leaf.SUNLIT
        self.cw.tleaf = 25.0
        self.cw.Cs = 380.0
        self.cw.dleaf = 1500.0
        self.cw.N0 = 2.5
        self.cw.apar_leaf[Leaf.SUNLIT] = 1000.0
        self.cw.cscalar[Leaf.SUNLIT] = 1.0
        self.met = Met()

    def test_arrhenius_at_measurement_temp(self):
        Tk = 25.0 + 273.15
        self.assertAlmostEqual(self.ps.arrh(55.0, 51560.0, Tk), 55.0)
        self.assertAlmostEqual(self.ps.peaked_arrh(110.0, 43790.0, Tk,
                                                   644.4338, 2E+05), 110.0)
        self.assertGreater(self.ps.arrh(55.0, 51560.0, Tk + 5.0), 55.0)

    def test_low_temperature_adjustment(self):
        self.assertEqual(self.ps.adj_for_low_temp(80.0, 273.15 - 1.0), 0.0)
        self.assertAlmostEqual(self.ps.adj_for_low_temp(80.0, 273.15 + 5.0),
                               40.0)
        self.assertEqual(self.ps.adj_for_low_temp(80.0, 273.15 + 15.0), 80.0)

    def test_fixed_jmax_vcmax(self):
        self.control.modeljm = 0
        (jmax, vcmax, vcmax25) = self.ps.calculate_jmax_and_vcmax(298.15,
                                                                  2.5, 0.5)
        self.assertAlmostEqual(vcmax25, self.params.vcmax * 0.5)
        self.assertAlmostEqual(vcmax, self.params.vcmax * 0.5)
        self.assertAlmostEqual(jmax, self.params.jmax * 0.5)

    def test_jmax_vcmax_from_leaf_n(self):
        self.control.modeljm = 1
        (jmax, vcmax, vcmax25) = self.ps.calculate_jmax_and_vcmax(298.15,
                                                                  2.5, 1.0)
        self.assertAlmostEqual(vcmax25, 20.497 * 2.5 + 8.403)
        self.assertAlmostEqual(jmax, 40.462 * 2.5 + 13.691)

        self.control.modeljm = 2
        (jmax, vcmax, vcmax25) = self.ps.calculate_jmax_and_vcmax(298.15,
                                                                  2.5, 1.0)
        self.assertAlmostEqual(jmax, self.params.jv_slope * vcmax25)

    def test_water_stress_reduces_capacity(self):
        (jmax, vcmax, _) = self.ps.calculate_jmax_and_vcmax(298.15, 2.5, 1.0)
        self.state.wtfac_root = 0.5
        (jmax_dry, vcmax_dry, _) = self.ps.calculate_jmax_and_vcmax(298.15,
                                                                    2.5, 1.0)
        self.assertAlmostEqual(jmax_dry, jmax * 0.5)
        self.assertAlmostEqual(vcmax_dry, vcmax * 0.5)

    def test_unknown_jmax_option(self):
        self.control.modeljm = 7
        self.assertRaises(AttributeError, self.ps.calculate_jmax_and_vcmax,
                          298.15, 2.5, 1.0)

    def test_respiration(self):
        self.assertAlmostEqual(self.ps.calc_respiration(298.15, 60.0), 0.9)
        self.assertAlmostEqual(self.ps.calc_respiration(308.15, 60.0), 1.8)

    def test_electron_transport(self):
        self.assertEqual(self.ps.calculate_electron_transport(0.0, 150.0), 0.0)
        J = self.ps.calculate_electron_transport(1000.0, 150.0)
        self.assertGreater(J, 0.0)
        self.assertLess(J, 150.0)

    def test_sunlit_leaf(self):
        (an, gsc) = self.ps.calculate_photosynthesis(self.cw, self.met)

        self.assertGreater(an, 5.0)
        self.assertLess(an, 40.0)
        self.assertGreater(gsc, 0.0)
        self.assertEqual(self.cw.an_leaf[Leaf.SUNLIT], an)
        self.assertEqual(self.cw.gsc_leaf[Leaf.SUNLIT], gsc)
        self.assertEqual(self.cw.an_leaf[Leaf.SHADED], 0.0)

    def test_dark_leaf_respires(self):
        self.cw.apar_leaf[Leaf.SUNLIT] = 0.0
        (an, gsc) = self.ps.calculate_photosynthesis(self.cw, self.met)
        self.assertLess(an, 0.0)
        self.assertGreater(gsc, 0.0)

    def test_co2_fertilisation(self):
        (an_amb, _) = self.ps.calculate_photosynthesis(self.cw, self.met)
        self.cw.Cs = 550.0
        (an_ele, _) = self.ps.calculate_photosynthesis(self.cw, self.met)
        self.assertGreater(an_ele, an_amb)

    def test_drier_air_closes_stomata(self):
        (_, gsc_moist) = self.ps.calculate_photosynthesis(self.cw, self.met)
        self.cw.dleaf = 3000.0
        (_, gsc_dry) = self.ps.calculate_photosynthesis(self.cw, self.met)
        self.assertLess(gsc_dry, gsc_moist)

    def test_only_medlyn_gs_model(self):
        self.control.gs_model = "LEUNING"
        self.assertRaises(AttributeError, self.ps.calculate_photosynthesis,
                          self.cw, self.met)


if __name__ == "__main__":
    unittest.main()
