""" Data held by the canopy for the duration of one simulated day: the
two-leaf workspace and the half-hourly met record """

from enum import IntEnum
import numpy as np

import twoleaf.constants as const

__author__  = "Martin De Kauwe"
__version__ = "1.0 (09.02.2016)"
__email__   = "mdekauwe@gmail.com"

NUM_LEAVES = 2


class Leaf(IntEnum):
    """ The two big leaves, used to index the per-leaf arrays """
    SUNLIT = 0
    SHADED = 1


class CanopyWorkspace(object):
    """ Canopy workspace, rebuilt (or re-used and overwritten) every day.

    Per-leaf arrays are indexed by Leaf and always have NUM_LEAVES entries.
    """
    def __init__(self):
        # per leaf
        self.an_leaf = np.zeros(NUM_LEAVES)     # net assimilation (umol m-2 s-1)
        self.gsc_leaf = np.zeros(NUM_LEAVES)    # stomatal conductance to CO2 (mol m-2 s-1)
        self.trans_leaf = np.zeros(NUM_LEAVES)  # transpiration (mol H2O m-2 s-1)
        self.rnet_leaf = np.zeros(NUM_LEAVES)   # isothermal net radiation (W m-2)
        self.apar_leaf = np.zeros(NUM_LEAVES)   # absorbed PAR (umol m-2 s-1)
        self.omega_leaf = np.zeros(NUM_LEAVES)  # decoupling coefficient [0,1]
        self.cscalar = np.zeros(NUM_LEAVES)     # scales top of canopy capacity to the leaf

        # canopy
        self.an_canopy = 0.0
        self.gsc_canopy = 0.0
        self.apar_canopy = 0.0
        self.trans_canopy = 0.0
        self.omega_canopy = 0.0
        self.rnet_canopy = 0.0

        # leaf surface, shared by whichever leaf is being solved
        self.leaf_idx = Leaf.SUNLIT
        self.tleaf = 0.0        # degC
        self.tleaf_new = 0.0    # degC
        self.Cs = 0.0           # CO2 at the leaf surface (umol mol-1)
        self.dleaf = 0.0        # VPD at the leaf surface (Pa)

        # sun & canopy N
        self.elevation = 0.0    # radians
        self.cos_zenith = 0.0
        self.diffuse_frac = 1.0
        self.N0 = 0.0           # top of canopy leaf N (g N m-2)


class Met(object):
    """ Met forcing for the current half-hour. Pressure and VPD are held in
    Pa, the forcing file gives them in kPa. """
    def __init__(self):
        self.year = 0.0
        self.doy = 0.0
        self.hod = 0.0
        self.rain = 0.0     # mm 30 min-1
        self.par = 0.0      # umol m-2 s-1
        self.sw_rad = 0.0   # W m-2
        self.tair = 0.0     # degC
        self.tsoil = 0.0    # degC
        self.vpd = 0.0      # Pa
        self.Ca = 0.0       # umol mol-1
        self.wind = 0.0     # m s-1
        self.press = 0.0    # Pa


def unpack_met_data(met_data, met, hour_idx):
    """ Grab the half-hour's met data out of the arrays.

    Parameters:
    ----------
    met_data : dictionary
        met forcing arrays for the whole run
    met : object
        met record, filled in place
    hour_idx : int
        cursor into the met arrays, counts half-hours from the start of the run
    """
    met.year = met_data['year'][hour_idx]
    met.doy = met_data['doy'][hour_idx]
    met.hod = met_data['hod'][hour_idx]
    met.rain = met_data['rain'][hour_idx]
    met.par = met_data['par'][hour_idx]
    met.tair = met_data['tair'][hour_idx]
    met.tsoil = met_data['tsoil'][hour_idx]
    met.vpd = met_data['vpd'][hour_idx] * const.KPA_2_PA
    met.Ca = met_data['co2'][hour_idx]
    met.wind = met_data['wind'][hour_idx]
    met.press = met_data['press'][hour_idx] * const.KPA_2_PA

    # if SW is supplied by the user then use this data, otherwise use the
    # standard conversion factor from PAR
    if 'sw_rad' in met_data:
        met.sw_rad = met_data['sw_rad'][hour_idx]
    else:
        met.sw_rad = met.par * const.PAR_2_SW
