#!/usr/bin/env python

"""
Example script of how I would run the model, the result is not necessarily
sensible...but essentially a clear summer week at Duke.

* Note you don't need to change the parameter values this way, though I think
it is preferable.

"""

import os
import configparser
import numpy as np

# How to import the model
from twoleaf import model
from twoleaf._version import __version__ as git_revision

__author__  = "Martin De Kauwe"
__version__ = "1.0 (11.02.2014)"
__email__   = "mdekauwe@gmail.com"


def adjust_param_file(fname, replace_dict):
    """ Change the values in an existing .cfg file in place, the keys can be
    in any section """
    config = configparser.ConfigParser()
    config.optionxform = str
    config.read(fname)
    for key, value in replace_dict.items():
        found = False
        for section in config.sections():
            if config.has_option(section, key):
                config.set(section, key, value)
                found = True
        if not found:
            raise RuntimeError("%s isn't in %s" % (key, fname))
    with open(fname, "w") as f:
        config.write(f)

def make_met_file(fname, year=2001, start_doy=180, ndays=7):
    """ Idealised half-hourly forcing, dry & sunny with an afternoon storm on
    the third day """
    hod = np.tile(np.arange(48), ndays)
    doy = np.repeat(np.arange(start_doy, start_doy + ndays), 48)
    shape = np.maximum(0.0, np.sin(np.pi * (hod - 12.0) / 24.0))
    shape[(hod < 12) | (hod >= 36)] = 0.0

    rain = np.zeros(hod.size)
    rain[(doy == start_doy + 2) & (hod >= 30) & (hod < 34)] = 5.0

    data = np.column_stack((np.full(hod.size, year), doy, hod, rain,
                            1900.0 * shape, 18.0 + 12.0 * shape,
                            np.full(hod.size, 20.0), 0.6 + 2.4 * shape,
                            np.full(hod.size, 380.0), 1.0 + 2.0 * shape,
                            np.full(hod.size, 100.5)))
    hdr = "year,doy,hod,rain,par,tair,tsoil,vpd,co2,wind,press"
    np.savetxt(fname, data, delimiter=",", header=hdr,
               fmt=["%d", "%d", "%d", "%.1f", "%.2f", "%.2f", "%.1f",
                    "%.3f", "%.1f", "%.2f", "%.1f"])

def main(experiment_id, site):

    # --- FILE PATHS, DIR NAMES ETC --- #
    param_dir = "params"
    met_dir = "met_data"
    run_dir = "outputs"
    for d in (param_dir, met_dir, run_dir):
        if not os.path.isdir(d):
            os.makedirs(d)

    itag = "%s_%s_two_leaf" % (experiment_id, site)
    otag = "%s_%s_two_leaf_final_state" % (experiment_id, site)
    cfg_fname = os.path.join(param_dir, itag + ".cfg")
    out_param_fname = os.path.join(param_dir, otag + ".cfg")
    met_fname = os.path.join(met_dir, "%s_half_hourly_met.csv" % site)
    out_fname = os.path.join(run_dir, "%s_%s_daily.csv" % (experiment_id,
                                                           site))
    make_met_file(met_fname)

    # dump the defaults and then change what we need to
    model.CanopyModel(cfg_fname, DUMP=True)

    # --- CHANGE PARAM VALUES ON THE FLY --- #
    replace_dict = {
                     "version": str(git_revision),

                     # files
                     "cfg_fname": cfg_fname,
                     "out_param_fname": out_param_fname,
                     "met_fname": met_fname,
                     "out_fname": out_fname,

                     # params
                     "latitude": "35.97",
                     "longitude": "-79.09",
                     "g1": "2.74",
                     "leaf_abs": "0.86",
                     "topsoil_type": "silty_clay_loam",
                     "rootsoil_type": "silty_clay_loam",

                     # state
                     "shoot": "4.2",
                     "shootn": "0.056",
                     "pawater_root": "120.0",

                     # control
                     "calc_sw_params": "true",
                     "modeljm": "1",
                     "print_options": "daily",
                     "ps_pathway": "c3",
                     "sw_stress_model": "1",
                     "water_stress": "true",
                   }
    adjust_param_file(cfg_fname, replace_dict)

    # --- RUN THE MODEL --- #
    M = model.CanopyModel(cfg_fname)
    M.run_sim()


if __name__ == "__main__":

    experiment_id = "NCEAS"
    site = "DUKE"
    main(experiment_id, site)
