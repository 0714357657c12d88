""" Two-leaf (sunlit/shaded) canopy, coupling leaf photosynthesis, stomatal
conductance and the leaf energy balance every half-hour and adding the result
to the day's carbon and water budgets """

import sys
from collections import namedtuple
from math import exp, fabs

import twoleaf.constants as const
from twoleaf.workspace import Leaf, unpack_met_data
from twoleaf.radiation import Radiation
from twoleaf.photosynthesis import PhotosynthesisC3
from twoleaf.water_balance import (WaterBalance, SoilMoisture, PenmanMonteith,
                                   calc_sat_water_vapour_press)

__author__  = "Martin De Kauwe"
__version__ = "1.0 (09.02.2016)"
__email__   = "mdekauwe@gmail.com"

# day status
OK = "OK"
UNIMPLEMENTED_PATHWAY = "UNIMPLEMENTED_PATHWAY"
CONVERGENCE_FAILURE = "CONVERGENCE_FAILURE"

DayResult = namedtuple("DayResult", ["status", "hour_idx", "sunlight_hrs",
                                     "error"])

# state carried from one day to the next, put back if a day fails
DAY_STATE_VARS = ["pawater_topsoil", "pawater_root", "psi_s_topsoil",
                  "psi_s_root", "wtfac_topsoil", "wtfac_root",
                  "delta_sw_store", "tsoil"]


class CanopyError(RuntimeError):
    """ A canopy day that can't be completed """
    pass


class UnimplementedPathwayError(CanopyError):
    """ Photosynthetic pathway other than C3 """
    pass


class ConvergenceError(CanopyError):
    """ Leaf temperature didn't settle within the iteration limit """
    def __init__(self, leaf, tleaf, tleaf_new, iterations):
        self.leaf = leaf
        self.tleaf = tleaf
        self.tleaf_new = tleaf_new
        self.iterations = iterations
        msg = ("No convergence in the %s leaf energy balance after %d "
               "iterations (Tleaf %.3f -> %.3f)" % (leaf.name.lower(),
                                                    iterations, tleaf,
                                                    tleaf_new))
        CanopyError.__init__(self, msg)


class Canopy(object):
    """ Canopy of two big leaves, sunlit and shaded.

    Each half-hour of the day the leaf temperature, the CO2 and VPD at the
    leaf surface, assimilation, stomatal conductance and transpiration of
    each leaf are iterated to a self-consistent solution, then summed to the
    canopy and added to the day's fluxes.

    References:
    -----------
    * Wang & Leuning (1998) Agricultural & Forest Meterorology, 91, 89-111.
    * Dai et al. (2004) Journal of Climate, 17, 2281-2299.
    * De Pury & Farquhar (1997) PCE, 20, 537-557.
    """
    def __init__(self, control, params, state, fluxes, met_data,
                 radiation=None, photosynthesis=None, penman=None,
                 water_balance=None, soil_moisture=None, max_iter=100,
                 tolerance=0.02, min_an=1E-04, min_par=20.0):
        """
        Parameters
        ----------
        control : integers, object
            model control flags
        params: floats, object
            model parameters
        state: floats, object
            model state
        fluxes : floats, object
            model fluxes
        met_data : floats, dictionary
            meteorological forcing data
        radiation, photosynthesis, penman, water_balance, soil_moisture : object
            sub-models, the defaults are built when not given
        max_iter : int
            maximum number of leaf temperature iterations
        tolerance : float
            leaf temperature convergence criterion (degC)
        min_an : float
            net assimilation (umol m-2 s-1) below which the leaf doesn't
            transpire
        min_par : float
            PAR (umol m-2 s-1) above which the sun is treated as up
        """
        self.control = control
        self.params = params
        self.state = state
        self.fluxes = fluxes
        self.met_data = met_data
        self.max_iter = max_iter
        self.tolerance = tolerance
        self.min_an = min_an
        self.min_par = min_par

        if radiation is None:
            radiation = Radiation(params)
        if photosynthesis is None:
            photosynthesis = PhotosynthesisC3(control, params, state)
        if penman is None:
            penman = PenmanMonteith(leaf_width=params.leaf_width)
        if water_balance is None:
            water_balance = WaterBalance(control, params, state, fluxes)
        if soil_moisture is None:
            soil_moisture = SoilMoisture(control, params, state)
            soil_moisture.initialise_parameters()

        self.rb = radiation
        self.ps = photosynthesis
        self.pm = penman
        self.wb = water_balance
        self.sm = soil_moisture

    def run_canopy_day(self, cw, met, hour_idx):
        """ Run one day and report how it went.

        Parameters:
        ----------
        cw : object
            canopy workspace
        met : object
            met record, filled each half-hour
        hour_idx : int
            cursor into the met arrays at the start of the day

        Returns:
        --------
        result : DayResult
            status, the cursor for the next day, number of sunlit slots and
            the error. On failure the cursor still moves past the whole day,
            the soil water state is put back to how it was at the start of
            the day and nothing else in the day's output can be used.
        """
        end_of_day = hour_idx + self.control.num_hlf_hrs
        start_state = dict((var, getattr(self.state, var))
                           for var in DAY_STATE_VARS)
        try:
            (hour_idx, sunlight_hrs) = self.calculate_canopy_day(cw, met,
                                                                 hour_idx)
        except UnimplementedPathwayError as error:
            self.restore_state(start_state)
            return DayResult(UNIMPLEMENTED_PATHWAY, end_of_day, 0, error)
        except ConvergenceError as error:
            self.restore_state(start_state)
            return DayResult(CONVERGENCE_FAILURE, end_of_day, 0, error)

        return DayResult(OK, hour_idx, sunlight_hrs, None)

    def restore_state(self, saved):
        for var, value in saved.items():
            setattr(self.state, var, value)

    def calculate_canopy_day(self, cw, met, hour_idx):
        """ Loop over the half-hours of the day

        Returns:
        --------
        hour_idx : int
            cursor for the start of the next day
        sunlight_hrs : int
            number of half-hours the sun was up
        """
        if self.control.ps_pathway != "C3":
            raise UnimplementedPathwayError("%s photosynthesis is not "
                                            "implemented" %
                                            self.control.ps_pathway)
        sunlight_hrs = 0
        for hod in range(self.control.num_hlf_hrs):
            unpack_met_data(self.met_data, met, hour_idx)

            self.rb.calculate_solar_geometry(cw, met.doy, hod)
            self.rb.get_diffuse_frac(cw, met.doy, met.sw_rad)

            sun_up = cw.elevation > 0.0 and met.par > self.min_par
            if sun_up:
                self.rb.calculate_absorbed_radiation(cw, self.state, met.par)
                cw.N0 = calculate_top_of_canopy_leafn(self.params, self.state)

                for leaf in Leaf:
                    cw.leaf_idx = leaf
                    self.solve_leaf_energy_balance(cw, met)
            else:
                zero_hourly_fluxes(cw)

                # pre-dawn soil water potential
                if hod == self.control.predawn_hod:
                    self.sm.calc_soil_water_potential()

            scale_to_canopy(cw)
            sum_hourly_carbon_fluxes(cw, self.fluxes, self.params)
            self.wb.calculate_water_balance(met, cw.trans_canopy,
                                            cw.omega_canopy, cw.rnet_canopy)
            hour_idx += 1
            if sun_up:
                sunlight_hrs += 1

        # daily average omega over the sunlit half-hours
        if sunlight_hrs > 0:
            self.fluxes.omega /= float(sunlight_hrs)
        else:
            sys.stderr.write("No sunlit half-hours on day %d of %d, "
                             "omega set to zero\n" % (met.doy, met.year))
            self.fluxes.omega = 0.0

        self.state.tsoil /= float(self.control.num_hlf_hrs)

        if self.control.water_stress:
            (self.state.wtfac_topsoil,
             self.state.wtfac_root) = self.sm.calculate_soil_water_fac()
        else:
            # really this should only be a debugging option!
            self.state.wtfac_topsoil = 1.0
            self.state.wtfac_root = 1.0

        return (hour_idx, sunlight_hrs)

    def solve_leaf_energy_balance(self, cw, met):
        """ Iterate the leaf temperature, leaf surface CO2 and VPD until the
        leaf temperature is stable, the leaf to solve is cw.leaf_idx.

        Each pass: photosynthesis & stomatal conductance at the current leaf
        surface state, Penman-Monteith transpiration with that conductance,
        then a new leaf temperature from the energy balance (under-relaxed,
        a quarter of the step), Cs from the boundary layer and the surface
        VPD from the transpiration.

        Raises:
        -------
        ConvergenceError
            leaf temperature hasn't converged after max_iter iterations
        """
        idx = cw.leaf_idx
        initialise_leaf_surface(cw, met)

        for iteration in range(1, self.max_iter + 1):
            (an, gsc) = self.ps.calculate_photosynthesis(cw, met)
            cw.an_leaf[idx] = an
            cw.gsc_leaf[idx] = gsc

            # leaf isn't photosynthesising, so it won't be transpiring either
            if an <= self.min_an:
                cw.trans_leaf[idx] = 0.0
                cw.rnet_leaf[idx] = 0.0
                cw.omega_leaf[idx] = 0.0
                return

            sw_rad = cw.apar_leaf[idx] * const.PAR_2_SW
            rnet = calc_leaf_net_rad(self.params, self.state, met.tair,
                                     met.vpd, sw_rad)
            (trans, LE, gbc,
             gh, gv, omega) = self.pm.calc_leaf_fluxes(met, cw.tleaf, rnet,
                                                       gsc)
            cw.trans_leaf[idx] = trans
            cw.rnet_leaf[idx] = rnet
            cw.omega_leaf[idx] = omega

            # new leaf temperature, surface CO2 & VPD
            delta_T = (rnet - LE) / (const.CP * const.MASS_AIR * gh)
            cw.tleaf_new = met.tair + delta_T / 4.0
            cw.Cs = met.Ca - an / gbc
            cw.dleaf = trans * met.press / gv

            if fabs(cw.tleaf - cw.tleaf_new) < self.tolerance:
                return

            if iteration == self.max_iter:
                raise ConvergenceError(Leaf(idx), cw.tleaf, cw.tleaf_new,
                                       iteration)

            cw.tleaf = cw.tleaf_new


def initialise_leaf_surface(cw, met):
    """ Start the leaf surface at the ambient conditions """
    cw.tleaf = met.tair
    cw.dleaf = met.vpd
    cw.Cs = met.Ca


def calc_leaf_net_rad(params, state, tair, vpd, sw_rad):
    """ Isothermal net radiation of a leaf (W m-2)

    Parameters:
    -----------
    params: floats, object
        model parameters, leaf_abs
    state: floats, object
        model state, lai
    tair : float
        air temperature (degC)
    vpd : float
        vapour pressure deficit (Pa)
    sw_rad : float
        shortwave radiation absorbed by the leaf (W m-2)

    References:
    -----------
    * Leuning et al. (1995) Plant, Cell and Environment, 18, 1183-1200.
    """
    Tk = tair + const.DEG_TO_KELVIN

    # actual vapour pressure (Pa)
    ea = calc_sat_water_vapour_press(tair) - vpd

    # apparent emissivity for a hemisphere radiating at air temp eqn D4
    emissivity_atm = 0.642 * (ea / Tk)**(1.0 / 7.0)

    # isothermal net LW radiaiton at top of canopy, assuming emissivity of
    # the canopy is 1
    net_lw_rad = (1.0 - emissivity_atm) * const.SIGMA * Tk**4

    # black leaves, diffuse radiation extinction coefficient of 0.8
    kd = 0.8

    return params.leaf_abs * sw_rad - net_lw_rad * kd * exp(-kd * state.lai)


def calculate_top_of_canopy_leafn(params, state, kn=0.3):
    """ Top of the canopy leaf N (g N m-2), assuming N declines exponentially
    through the canopy with extinction coefficient kn.

    See Chen et al 93, Oecologia, 93,63-69.
    """
    if state.lai > 0.0:
        # leaf mass per area (g C m-2 leaf)
        lma = 1.0 / params.sla * params.cfracts * const.KG_AS_G

        # total canopy N (g N m-2)
        ntot = state.shootnc * lma * state.lai
        N0 = ntot * kn / (1.0 - exp(-kn * state.lai))
    else:
        N0 = 0.0

    return N0


def zero_carbon_day_fluxes(fluxes):
    fluxes.gpp_gCm2 = 0.0
    fluxes.npp_gCm2 = 0.0
    fluxes.gpp = 0.0
    fluxes.npp = 0.0
    fluxes.auto_resp = 0.0
    fluxes.apar = 0.0
    fluxes.gs_mol_m2_sec = 0.0


def zero_hourly_fluxes(cw):
    """ Sun is down, nothing absorbed, nothing assimilated """
    for leaf in Leaf:
        cw.an_leaf[leaf] = 0.0
        cw.gsc_leaf[leaf] = 0.0
        cw.trans_leaf[leaf] = 0.0
        cw.rnet_leaf[leaf] = 0.0
        cw.apar_leaf[leaf] = 0.0
        cw.omega_leaf[leaf] = 0.0


def scale_to_canopy(cw):
    cw.an_canopy = cw.an_leaf[Leaf.SUNLIT] + cw.an_leaf[Leaf.SHADED]
    cw.gsc_canopy = cw.gsc_leaf[Leaf.SUNLIT] + cw.gsc_leaf[Leaf.SHADED]
    cw.apar_canopy = cw.apar_leaf[Leaf.SUNLIT] + cw.apar_leaf[Leaf.SHADED]
    cw.trans_canopy = cw.trans_leaf[Leaf.SUNLIT] + cw.trans_leaf[Leaf.SHADED]
    cw.omega_canopy = (cw.omega_leaf[Leaf.SUNLIT] +
                       cw.omega_leaf[Leaf.SHADED]) / 2.0
    cw.rnet_canopy = cw.rnet_leaf[Leaf.SUNLIT] + cw.rnet_leaf[Leaf.SHADED]


def sum_hourly_carbon_fluxes(cw, fluxes, params):
    """ Add the half-hour's canopy assimilation to the day """
    # umol m-2 s-1 -> gC m-2 30 min-1
    fluxes.gpp_gCm2 += (cw.an_canopy * const.UMOL_TO_MOL *
                        const.MOL_C_TO_GRAMS_C * const.SEC_2_HLFHR)
    fluxes.npp_gCm2 = fluxes.gpp_gCm2 * params.cue
    fluxes.gpp = fluxes.gpp_gCm2 * const.GRAM_C_2_TONNES_HA
    fluxes.npp = fluxes.npp_gCm2 * const.GRAM_C_2_TONNES_HA
    fluxes.auto_resp = fluxes.gpp - fluxes.npp
    fluxes.apar += cw.apar_canopy
    fluxes.gs_mol_m2_sec += cw.gsc_canopy
