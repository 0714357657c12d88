#!/usr/bin/env python

""" Unit-tests for reading the .cfg file and the met forcing """

import os
import shutil
import tempfile
import unittest

import twoleaf.default_params as default_params
from twoleaf.file_parser import (copy_defaults, ReadConfigFile,
                                 read_met_forcing, initialise_model_data,
                                 adjust_object_attributes, MET_VARS)

__author__  = "Martin De Kauwe"
__version__ = "1.0 (22.02.2011)"
__email__   = "mdekauwe@gmail.com"


CFG = """\
[files]
met_fname = %(met)s
out_fname = %(out)s

[params]
g1 = 3.2
topsoil_type = sandy_loam
b_root = None

[state]
shoot = 4.0

[control]
modeljm = 2
water_stress = no
ps_pathway = c3

[print]
gpp = yes
lai = yes
"""

MET = """\
#year,doy,hod,rain,par,tair,tsoil,vpd,co2,wind,press
1996,1,0,0.0,0.0,5.0,6.0,0.3,380.0,2.0,101.0
# a comment line
1996,1,1,0.5,0.0,4.8,6.0,0.25,380.0,2.0,101.0

"""


class FileParserTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.met_fname = os.path.join(self.tmp_dir, "met.csv")
        self.cfg_fname = os.path.join(self.tmp_dir, "test.cfg")
        self.out_fname = os.path.join(self.tmp_dir, "out.csv")
        with open(self.met_fname, "w") as f:
            f.write(MET)
        self.write_cfg(CFG)

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def write_cfg(self, text):
        with open(self.cfg_fname, "w") as f:
            f.write(text % {"met": self.met_fname, "out": self.out_fname})

    def test_copies_are_independent(self):
        p1 = copy_defaults(default_params)
        p2 = copy_defaults(default_params)
        p1.g1 = 99.0
        self.assertEqual(p2.g1, default_params.g1)
        self.assertFalse(hasattr(p1, "__author__"))

    def test_config_sections_are_cast(self):
        R = ReadConfigFile(self.cfg_fname)
        R.load_files()
        (control, params, state, files, print_opts) = R.get_config_dicts()

        self.assertEqual(params["g1"], 3.2)
        self.assertEqual(params["topsoil_type"], "sandy_loam")
        self.assertIsNone(params["b_root"])
        self.assertEqual(state["shoot"], 4.0)
        self.assertEqual(control["modeljm"], 2)
        self.assertIs(control["water_stress"], False)
        self.assertEqual(control["ps_pathway"], "C3")
        self.assertEqual(files["met_fname"], self.met_fname)
        self.assertEqual(list(print_opts), ["gpp", "lai"])

    def test_bad_control_value(self):
        self.write_cfg(CFG.replace("modeljm = 2", "modeljm = 2.5"))
        R = ReadConfigFile(self.cfg_fname)
        R.load_files()
        self.assertRaises(ValueError, R.get_config_dicts)

    def test_missing_config_file(self):
        R = ReadConfigFile(os.path.join(self.tmp_dir, "nothing.cfg"))
        self.assertRaises(IOError, R.load_files)

    def test_initialise_model_data(self):
        (control, params, state, files,
         fluxes, met_data, print_opts) = initialise_model_data(self.cfg_fname)

        self.assertEqual(params.g1, 3.2)
        self.assertEqual(params.g0, default_params.g0)
        self.assertEqual(control.modeljm, 2)
        self.assertEqual(files.cfg_fname, self.cfg_fname)
        self.assertEqual(fluxes.gpp, 0.0)
        self.assertEqual(len(met_data["tair"]), 2)

    def test_unknown_parameter(self):
        self.write_cfg(CFG.replace("g1 = 3.2", "not_a_param = 3.2"))
        self.assertRaises(RuntimeError, initialise_model_data, self.cfg_fname)

    def test_reserved_word(self):
        obj = copy_defaults(default_params)
        self.assertRaises(RuntimeError, adjust_object_attributes,
                          {"lambda": 1.0}, obj)

    def test_dump_does_not_read_anything(self):
        fname = os.path.join(self.tmp_dir, "nothing.cfg")
        (control, params, state, files,
         fluxes, met_data, print_opts) = initialise_model_data(fname,
                                                               DUMP=True)
        self.assertIsNone(met_data)
        self.assertEqual(files.cfg_fname, fname)
        self.assertEqual(params.g1, default_params.g1)

    def test_read_met_forcing(self):
        met_data = read_met_forcing(self.met_fname)

        for var in MET_VARS:
            self.assertEqual(len(met_data[var]), 2)
        self.assertEqual(met_data["hod"][1], 1.0)
        self.assertEqual(met_data["rain"][1], 0.5)
        self.assertEqual(met_data["co2"][0], 380.0)

    def test_met_header_row(self):
        fname = os.path.join(self.tmp_dir, "met_hdr.csv")
        with open(fname, "w") as f:
            f.write("# site: somewhere\n")
            f.write(MET)
        met_data = read_met_forcing(fname, met_header=1)
        self.assertEqual(len(met_data["year"]), 2)

    def test_met_missing_column(self):
        fname = os.path.join(self.tmp_dir, "met_short.csv")
        with open(fname, "w") as f:
            f.write("year,doy,hod,rain,par,tair\n")
            f.write("1996,1,0,0.0,0.0,5.0\n")
        self.assertRaises(ValueError, read_met_forcing, fname)

    def test_missing_met_file(self):
        self.assertRaises(IOError, read_met_forcing,
                          os.path.join(self.tmp_dir, "nothing.csv"))


if __name__ == "__main__":
    unittest.main()
