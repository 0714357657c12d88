#!/usr/bin/env python

""" Run the whole model from a .cfg file and check what ends up on disk """

import csv
import os
import shutil
import tempfile
import unittest
from math import pi, sin

from twoleaf.model import CanopyModel, cmdline_parser
from twoleaf.canopy import UnimplementedPathwayError
from twoleaf.file_parser import ReadConfigFile

__author__  = "Martin De Kauwe"
__version__ = "1.0 (15.02.2011)"
__email__   = "mdekauwe@gmail.com"


CFG = """\
[files]
met_fname = %(met)s
out_fname = %(out)s
out_param_fname = %(state)s

[control]
print_options = %(print_options)s
ps_pathway = %(ps_pathway)s
skip_failed_days = %(skip)s

[print]
lai = yes
pawater_root = yes
gpp = yes
transpiration = yes
"""


def write_met_file(fname, ndays=2, start_doy=181, year=1999):
    """ Clear-sky half-hourly forcing, sun up from 6am to 6pm """
    with open(fname, "w") as f:
        f.write("#year,doy,hod,rain,par,tair,tsoil,vpd,co2,wind,press\n")
        for day in range(ndays):
            for hod in range(48):
                if 12 <= hod < 36:
                    shape = sin(pi * (hod - 12.0) / 24.0)
                else:
                    shape = 0.0
                rain = 1.0 if hod == 2 else 0.0
                f.write("%d,%d,%d,%.1f,%.3f,%.3f,15.0,%.3f,380.0,2.0,101.0\n" %
                        (year, start_doy + day, hod, rain, 1800.0 * shape,
                         15.0 + 10.0 * shape, 0.5 + 1.5 * shape))


class CanopyModelTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.met_fname = os.path.join(self.tmp_dir, "met.csv")
        self.out_fname = os.path.join(self.tmp_dir, "out.csv")
        self.state_fname = os.path.join(self.tmp_dir, "final_state.cfg")
        self.cfg_fname = os.path.join(self.tmp_dir, "run.cfg")
        write_met_file(self.met_fname)

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def write_cfg(self, print_options="DAILY", ps_pathway="C3", skip=False):
        with open(self.cfg_fname, "w") as f:
            f.write(CFG % {"met": self.met_fname, "out": self.out_fname,
                           "state": self.state_fname,
                           "print_options": print_options,
                           "ps_pathway": ps_pathway, "skip": skip})

    def read_output(self):
        with open(self.out_fname, "r") as f:
            return list(csv.reader(f))

    def test_daily_output(self):
        self.write_cfg()
        M = CanopyModel(self.cfg_fname)
        hour_idx = M.run_sim()
        self.assertEqual(hour_idx, 96)

        rows = self.read_output()
        self.assertTrue(rows[0][0].startswith("#Revision_code:"))
        self.assertEqual(rows[1], ["year", "doy", "lai", "pawater_root",
                                   "gpp", "transpiration"])
        self.assertEqual(len(rows), 4)
        self.assertEqual([r[:2] for r in rows[2:]],
                         [["1999", "181"], ["1999", "182"]])
        for row in rows[2:]:
            self.assertGreater(float(row[4]), 0.0)
            self.assertGreater(float(row[5]), 0.0)

        # soil dries from one day to the next
        self.assertLess(float(rows[3][3]), float(rows[2][3]))

    def test_final_state(self):
        self.write_cfg(print_options="END")
        M = CanopyModel(self.cfg_fname)
        M.run_sim()

        # only the header goes in the daily file
        self.assertEqual(len(self.read_output()), 2)

        R = ReadConfigFile(self.state_fname)
        R.load_files()
        (control, params, state, files, print_opts) = R.get_config_dicts()
        self.assertAlmostEqual(state["pawater_root"], M.state.pawater_root,
                               places=5)
        self.assertEqual(control["print_options"], "END")

    def test_unimplemented_pathway_aborts(self):
        self.write_cfg(ps_pathway="C4")
        M = CanopyModel(self.cfg_fname)
        self.assertRaises(UnimplementedPathwayError, M.run_sim)
        self.assertIsNone(M.pr.odaily)

    def test_failed_days_are_skipped(self):
        self.write_cfg(ps_pathway="C4", skip=True)
        M = CanopyModel(self.cfg_fname)
        self.assertEqual(M.run_sim(), 96)

        # header only, no daily rows
        self.assertEqual(len(self.read_output()), 2)

    def test_failed_days_leave_soil_water_alone(self):
        self.write_cfg(skip=True)
        M = CanopyModel(self.cfg_fname)
        start = (M.state.pawater_root, M.state.pawater_topsoil,
                 M.state.wtfac_root, M.state.psi_s_root)

        # every day fails at its first sunlit half-hour, after the night's
        # rain has gone through the water balance
        M.cp.max_iter = 1
        self.assertEqual(M.run_sim(), 96)

        self.assertEqual((M.state.pawater_root, M.state.pawater_topsoil,
                          M.state.wtfac_root, M.state.psi_s_root), start)
        self.assertEqual(M.state.delta_sw_store, 0.0)
        self.assertEqual(len(self.read_output()), 2)

    def test_output_closed_when_balance_check_fails(self):
        self.write_cfg()
        M = CanopyModel(self.cfg_fname)

        def bad_balance():
            raise ValueError("Carbon balance check error")
        M.cb.check_carbon_balance = bad_balance

        self.assertRaises(ValueError, M.run_sim)
        self.assertIsNone(M.pr.odaily)

    def test_partial_day_in_met_file(self):
        with open(self.met_fname, "a") as f:
            f.write("1999,183,0,0.0,0.0,15.0,15.0,0.5,380.0,2.0,101.0\n")
        self.write_cfg()
        self.assertRaises(ValueError, CanopyModel, self.cfg_fname)

        # nothing is opened for a run that can't start
        self.assertFalse(os.path.exists(self.out_fname))

    def test_derived_initial_state(self):
        self.write_cfg()
        M = CanopyModel(self.cfg_fname)

        self.assertAlmostEqual(M.state.shootnc,
                               M.state.shootn / M.state.shoot)
        self.assertAlmostEqual(M.state.lai, 3.9 * 0.1 / 0.5 * M.state.shoot)
        self.assertLess(M.state.psi_s_root, 0.0)
        self.assertTrue(0.0 < M.state.wtfac_root <= 1.0)
        M.pr.clean_up()

    def test_dump_default_parameters(self):
        fname = os.path.join(self.tmp_dir, "defaults.cfg")
        CanopyModel(fname, DUMP=True)

        R = ReadConfigFile(fname)
        R.load_files()
        (control, params, state, files, print_opts) = R.get_config_dicts()
        self.assertEqual(params["g1"], 4.8)
        self.assertEqual(control["ps_pathway"], "C3")
        self.assertIn("gpp", print_opts)
        self.assertNotIn("shootnc", state)
        self.assertFalse(os.path.exists(self.out_fname))

    def test_command_line(self):
        (options, args) = cmdline_parser(["-d", "my.cfg"])
        self.assertTrue(options.DUMP)
        self.assertEqual(args, ["my.cfg"])

        (options, args) = cmdline_parser([])
        self.assertFalse(options.DUMP)
        self.assertEqual(args, [])


if __name__ == "__main__":
    unittest.main()
