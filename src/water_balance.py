# -*- coding: UTF-8 -*-
""" Half-hourly water balance, leaf transpiration and soil moisture """

from math import exp, sqrt

from twoleaf.utilities import clip
import twoleaf.constants as const

__author__  = "Martin De Kauwe"
__version__ = "1.0 (02.05.2012)"
__email__   = "mdekauwe@gmail.com"


class WaterBalance(object):
    """Dynamic water balance model, two layer "leaky-bucket".

    Called every half-hour with the canopy fluxes, the daily totals are
    accumulated in the fluxes object.

    References:
    ===========
    * McMurtrie, R. (1990) Water/nutrient interactions affecting the
        productivity of stands of Pinus radiata. Forest Ecology and Management,
        30, 415-423.

    """
    def __init__(self, control, params, state, fluxes):
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

        """
        self.params = params
        self.fluxes = fluxes
        self.control = control
        self.state = state
        self.P = Penman()

    def calculate_water_balance(self, met, trans_canopy, omega_canopy,
                                rnet_canopy):
        """ Calculate the half-hour's water balance and add it to the day

        Parameters:
        ----------
        met : object
            met forcing for the half-hour
        trans_canopy : float
            canopy transpiration (mol H2O m-2 s-1)
        omega_canopy : float
            canopy decoupling coefficient
        rnet_canopy : float
            net radiation absorbed by the canopy (W m-2)

        """
        conv = const.MOLE_WATER_2_G_WATER * const.G_TO_KG * const.SEC_2_HLFHR
        transpiration = trans_canopy * conv

        (erain, interception) = self.calc_infiltration(met.rain)
        soil_evap = self.calc_soil_evaporation(met, rnet_canopy)
        runoff = self.update_water_storage(transpiration, soil_evap, erain)

        self.fluxes.transpiration += transpiration
        self.fluxes.soil_evap += soil_evap
        self.fluxes.interception += interception
        self.fluxes.erain += erain
        self.fluxes.runoff += runoff
        self.fluxes.et += transpiration + soil_evap + interception

        # normalised by the number of sunlit slots at the end of the day
        self.fluxes.omega += omega_canopy

        # normalised by the number of slots at the end of the day
        self.state.tsoil += met.tsoil

    def zero_water_day_fluxes(self):
        """ Reset the daily water accumulators """
        self.fluxes.transpiration = 0.0
        self.fluxes.soil_evap = 0.0
        self.fluxes.interception = 0.0
        self.fluxes.erain = 0.0
        self.fluxes.runoff = 0.0
        self.fluxes.et = 0.0
        self.fluxes.omega = 0.0
        self.state.delta_sw_store = 0.0
        self.state.tsoil = 0.0

    def calc_infiltration(self, rain):
        """ Estimate "effective" rain, or infiltration I guess.

        Interception is a fraction of rainfall which scales with leaf area up
        to a maximum at max_intercep_lai; the rest reaches the soil.

        Parameters:
        -------
        rain : float
            rainfall [mm 30 min-1]

        Returns:
        --------
        erain : float
            effective rainfall [mm 30 min-1]
        interception : float
            canopy interception [mm 30 min-1]
        """
        rain *= self.params.rfmult
        if self.state.lai > 0.0:
            frac = (self.params.intercep_frac *
                    min(1.0, self.state.lai / self.params.max_intercep_lai))
            interception = rain * frac
            erain = max(0.0, rain - interception)
        else:
            erain = max(0.0, rain)
            interception = 0.0

        return (erain, interception)

    def calc_net_radiation(self, sw_rad, tair):
        """ Net radiation above the canopy (W m-2), incoming shortwave less
        the albedo and an empirical net longwave loss.

        References:
        -----------
        * Ritchie (1972) Water Resources Research, 8, 1204-1213.
        * Monteith and Unsworth (1990) Principles of Environmental Physics.
        """
        # Net loss of long-wave radn, Monteith & Unsworth '90, pg 52, eqn 4.17
        net_lw = 107.0 - 0.3 * tair # W m-2

        return max(0.0, sw_rad * (1.0 - self.params.albedo) - net_lw)

    def calc_soil_evaporation(self, met, rnet_canopy):
        """ Use Penman eqn to calculate top soil evaporation flux at the
        potential rate.

        Soil evaporation is dependent upon soil wetness and plant cover. The net
        radiation term is scaled for the canopy cover and the impact of soil
        wetness is accounted for in the wtfac term. As the soil dries the
        evaporation component reduces significantly.

        Key assumptions from Ritchie...

        * When plant provides shade for the soil surface, evaporation will not
        be the same as bare soil evaporation. Wind speed, net radiation and VPD
        will all belowered in proportion to the canopy density. Following
        Ritchie role ofwind, VPD are assumed to be negligible and are therefore
        ignored.

        Parameters:
        -----------
        met : object
            met forcing for the half-hour
        rnet_canopy : float
            net radiation absorbed by the canopy [W m-2]

        Returns:
        --------
        soil_evap : float
            soil evaporation [mm 30 min-1]

        """
        net_rad = self.calc_net_radiation(met.sw_rad, met.tair)

        # Surface radiation is reduced by overstory LAI cover. This empirical
        # fit comes from Ritchie (1972) and is formed by a fit between the LAI
        # of 5 crops types and the fraction of observed net radiation at the
        # surface. The soil can't receive more than the canopy leaves behind.
        soil_rad = net_rad * exp(-0.398 * self.state.lai)
        soil_rad = min(soil_rad, max(0.0, net_rad - rnet_canopy))

        # mol H2O m-2 s-1
        soil_evap = self.P.calc_evaporation(soil_rad, met.tair, met.press)

        # reduce soil evaporation if top soil is dry
        soil_evap *= self.state.wtfac_topsoil

        conv = const.MOLE_WATER_2_G_WATER * const.G_TO_KG * const.SEC_2_HLFHR

        return soil_evap * conv

    def update_water_storage(self, transpiration, soil_evap, erain):
        """ Calculate root and top soil plant available water and runoff.

        Soil drainage is estimated using a "leaky-bucket" approach with two
        soil layers. In reality this is a combined drainage and runoff
        calculation, i.e. "outflow". There is no drainage out of the "bucket"
        soil.

        Returns:
        --------
        outflow : float
            outflow [mm 30 min-1]
        """
        # reduce transpiration from the top soil if it is dry
        trans_frac = (self.params.fractup_soil * self.state.wtfac_topsoil)

        # Total soil layer
        self.state.pawater_topsoil += (erain - (transpiration * trans_frac) -
                                       soil_evap)

        self.state.pawater_topsoil = clip(self.state.pawater_topsoil, min=0.0,
                                          max=self.params.wcapac_topsoil)

        # Total root zone
        previous = self.state.pawater_root
        self.state.pawater_root += erain - transpiration - soil_evap

        # calculate runoff and remove any excess from rootzone
        if self.state.pawater_root > self.params.wcapac_root:
            runoff = self.state.pawater_root - self.params.wcapac_root
            self.state.pawater_root -= runoff
        else:
            runoff = 0.0

        self.state.pawater_root = clip(self.state.pawater_root, min=0.0,
                                       max=self.params.wcapac_root)

        self.state.delta_sw_store += self.state.pawater_root - previous

        return runoff


class SoilMoisture(object):
    """ Estimate current soil moisture factor and soil water potential

    Parameters
    ----------
    control : integers, object
        model control flags
    params: floats, object
        model parameters
    state: floats, object
        model state

    References:
    -----------
    * Cosby et al. (1984) Water Resources Research, 20, 682-690.
    """
    def __init__(self, control, params, state):

        self.params = params
        self.control = control
        self.state = state
        self.silt_index = 0
        self.sand_index = 1
        self.clay_index = 2

    def initialise_parameters(self):
        """ Fill in the soil parameters the user hasn't set. If these are not
        known for the site use values derived from Cosby et al. """
        topsoil_type = self.params.topsoil_type
        rootsoil_type = self.params.rootsoil_type

        (theta_fc_tsoil, theta_wp_tsoil, theta_sp_tsoil,
         b_tsoil, psi_sat_tsoil) = self.calc_soil_params(
                                    self.get_soil_fracs(topsoil_type))
        (theta_fc_root, theta_wp_root, theta_sp_root,
         b_root, psi_sat_root) = self.calc_soil_params(
                                    self.get_soil_fracs(rootsoil_type))

        if self.control.calc_sw_params:
            # Plant available water in top soil (mm)
            self.params.wcapac_topsoil = (self.params.topsoil_depth *
                                          (theta_fc_tsoil - theta_wp_tsoil))

            # Plant available water in rooting zone (mm)
            self.params.wcapac_root = (self.params.rooting_depth *
                                       (theta_fc_root - theta_wp_root))

        if self.params.b_topsoil is None:
            self.params.b_topsoil = b_tsoil
        if self.params.psi_sat_topsoil is None:
            self.params.psi_sat_topsoil = psi_sat_tsoil
        if self.params.theta_sat_topsoil is None:
            self.params.theta_sat_topsoil = theta_sp_tsoil
        if self.params.theta_wp_topsoil is None:
            self.params.theta_wp_topsoil = theta_wp_tsoil

        if self.params.b_root is None:
            self.params.b_root = b_root
        if self.params.psi_sat_root is None:
            self.params.psi_sat_root = psi_sat_root
        if self.params.theta_sat_root is None:
            self.params.theta_sat_root = theta_sp_root
        if self.params.theta_wp_root is None:
            self.params.theta_wp_root = theta_wp_root

        # calculate Landsberg and Waring SW modifier parameters if not
        # specified by the user based on a site calibration
        if (self.params.ctheta_topsoil is None and
            self.params.ntheta_topsoil is None and
            self.params.ctheta_root is None and
            self.params.ntheta_root is None):

            (self.params.ctheta_topsoil,
             self.params.ntheta_topsoil) = self.get_soil_params(topsoil_type)

            (self.params.ctheta_root,
             self.params.ntheta_root) = self.get_soil_params(rootsoil_type)

    def get_soil_params(self, soil_type):
        """ For a given soil type, get the parameters for the soil
        moisture availability based on Landsberg and Waring.

        Reference
        ---------
        * Landsberg and Waring (1997) Forest Ecology & Management, 95, 209-228.
        * updated with additional values based on Ward et al. 2000 cited in
          Feikema et al (2010) Description of the 3PG+ forest growth model
         """
        soil_params = {"sand": (0.75, 10.0),
                       "loamy_sand": (0.7, 9.0),
                       "sandy_loam": (0.65, 8.0),
                       "loam": (0.6, 7.0),
                       "silty_loam": (0.55, 6.0),
                       "silty_clay_loam": (0.5, 5.0),
                       "clay_loam": (0.45, 4.0),
                       "sandy_clay": (0.4, 3.0),
                       "silty_clay": (0.35, 2.0),
                       "clay": (0.3, 1.0)}
        try:
            return soil_params[soil_type]
        except KeyError:
            raise ValueError("There are no parameters for your soil type (%s). "
                             "Either use the other soil water stress model or "
                             "specify the parameters." % soil_type)

    def get_soil_fracs(self, soil_type):
        """ Based on Table 2 in Cosby et al 1984, page 2."""
        soil_fracs = {"sand": [0.05, 0.92, 0.03],
                      "loamy_sand": [0.12, 0.82, 0.06],
                      "sandy_loam": [0.32, 0.58, 0.1],
                      "loam": [0.39, 0.43, 0.18],
                      "silty_loam": [0.70, 0.17, 0.13],
                      "sandy_clay_loam": [0.15, 0.58, 0.27],
                      "clay_loam": [0.34, 0.32, 0.34],
                      "silty_clay_loam": [0.56, 0.1, 0.34],
                      "sandy_clay": [0.06, 0.52, 0.42],
                      "silty_clay": [0.47, 0.06, 0.47],
                      "clay": [0.2, 0.22, 0.58]}
        try:
            return soil_fracs[soil_type]
        except KeyError:
            raise ValueError("Could not understand soil type: %s" % soil_type)

    def calc_soil_params(self, fsoil):
        """ Cosby parameters for use within the Clapp Hornberger soil hydraulics
        scheme are calculated based on the texture components of the soil.

        NB: Cosby et al were ambiguous in their paper as to what log base to
        use.  The correct implementation is base 10, as below.

        Parameters:
        ----------
        fsoil : list
            fraction of silt, sand, and clay (in that order

        Returns:
        --------
        theta_fc : float
            volumetric soil water concentration at field capacity
        theta_wp : float
            volumetric soil water concentration at the wilting point
        theta_sp : float
            volumetric soil water concentration at saturation
        b : float
            Clapp Hornberger exponent
        psi_sat : float
            saturated soil water potential (MPa)

        """
        pressure_head_wilt = 152.9
        pressure_head_crit = 3.364

        # Clapp Hornberger exponent
        b = 3.1 + 15.7 * fsoil[self.clay_index] - 0.3 * fsoil[self.sand_index]

        # soil matric potential at saturation, m of head
        sathh = (0.01 * 10.0**(2.17 - 0.63 * fsoil[self.clay_index] - 1.58 *
                               fsoil[self.sand_index]))
        psi_sat = -sathh * const.MPA_PER_M_HEAD

        # volumetric soil moisture concentrations at the saturation point
        theta_sp = (0.505 - 0.037 * fsoil[self.clay_index] - 0.142 *
                     fsoil[self.sand_index])

        # volumetric soil moisture concentrations at the wilting point
        # assumed to = to a suction of -1.5 MPa or a depth of water of 152.9 m
        theta_wp = theta_sp * (sathh / pressure_head_wilt)**(1.0 / b)

        # volumetric soil moisture concentrations at the critical point (field
        # capacity) assumed to equal a suction of -0.033 MPa or a
        # depth of water of 3.364 m
        theta_fc = theta_sp * (sathh / pressure_head_crit)**(1.0 / b)

        return (theta_fc, theta_wp, theta_sp, b, psi_sat)

    def calc_soil_water_potential(self):
        """ Pre-dawn soil water potential (MPa) of the top soil and the root
        zone, Clapp & Hornberger (1978) """
        self.state.psi_s_topsoil = self.calc_psi(self.state.pawater_topsoil,
                                                 self.params.topsoil_depth,
                                                 self.params.theta_wp_topsoil,
                                                 self.params.theta_sat_topsoil,
                                                 self.params.psi_sat_topsoil,
                                                 self.params.b_topsoil)
        self.state.psi_s_root = self.calc_psi(self.state.pawater_root,
                                              self.params.rooting_depth,
                                              self.params.theta_wp_root,
                                              self.params.theta_sat_root,
                                              self.params.psi_sat_root,
                                              self.params.b_root)

    def calc_psi(self, pawater, depth, theta_wp, theta_sat, psi_sat, b):
        """ Water potential (MPa) of a layer holding pawater (mm) of plant
        available water above the wilting point """
        theta = theta_wp + pawater / depth
        theta = clip(theta, min=1E-06, max=theta_sat)

        return psi_sat * (theta / theta_sat)**(-b)

    def calculate_soil_water_fac(self):
        """ Estimate a relative water availability factor [0..1]

        A drying soil results in physiological stress that can induce stomatal
        closure and reduce transpiration. Further, N mineralisation depends on
        top soil moisture.

        References:
        -----------
        * Landsberg and Waring (1997) Forest Ecology and Management, 95, 209-228.
          See --> Figure 2.
        * Egea et al. (2011) Agricultural Forest Meteorology, 151, 1370-1384.

        Returns:
        --------
        wtfac_topsoil : float
            water availability factor for the top soil [0,1]
        wtfac_root : float
            water availability factor for the root zone [0,1]
        """
        # turn into fraction...
        smc_topsoil = self.state.pawater_topsoil / self.params.wcapac_topsoil
        smc_root = self.state.pawater_root / self.params.wcapac_root
        smc_topsoil = clip(smc_topsoil, min=0.0, max=1.0)
        smc_root = clip(smc_root, min=0.0, max=1.0)

        if self.control.sw_stress_model == 0:
            wtfac_topsoil = smc_topsoil**self.params.qs
            wtfac_root = smc_root**self.params.qs

        elif self.control.sw_stress_model == 1:
            wtfac_topsoil = self.calc_sw_modifier(smc_topsoil,
                                                  self.params.ctheta_topsoil,
                                                  self.params.ntheta_topsoil)

            wtfac_root = self.calc_sw_modifier(smc_root,
                                               self.params.ctheta_root,
                                               self.params.ntheta_root)
        else:
            raise AttributeError("Unknown soil water stress model: %s" %
                                 self.control.sw_stress_model)

        return (clip(wtfac_topsoil, min=0.0, max=1.0),
                clip(wtfac_root, min=0.0, max=1.0))

    def calc_sw_modifier(self, theta, c_theta, n_theta):
        """ From Landsberg and Waring """
        return 1.0  / (1.0 + ((1.0 - theta) / c_theta)**n_theta)


def calc_sat_water_vapour_press(tac):
    """ Saturation vapour pressure (Pa) at temperature tac (degC)

    References:
    -----------
    * Jones (1992) Plants and microclimate, pg. 110, eqn 5.1 (Buck 1981)
    """
    return 613.75 * exp(17.502 * tac / (240.97 + tac))


class PenmanMonteith(object):

    """ Water loss from a single big leaf. The leaf loses heat through a
    boundary layer (forced & free convection) and by re-radiation, water
    vapour passes through the stomata and the boundary layer in series.

    Everything here is in molar units, conductances mol m-2 s-1, VPD and
    pressure in Pa.

    References:
    -----------
    * Leuning et al. (1995) Plant, Cell and Environment, 18, 1183-1200.
    * Jones (1992) Plants and microclimate, Appendix 3.
    * Monteith and Unsworth (1990) Principles of Environmental Physics.
    * Jarvis and McNaughton (1986) Advances in Ecological Research, 15, 1-49.
    """

    def __init__(self, leaf_width=0.02, min_wind=0.1):
        """
        Parameters:
        -----------
        leaf_width : float
            characteristic leaf width [m]
        min_wind : float
            wind speed floor for the forced convection [m s-1]
        """
        self.leaf_width = leaf_width
        self.min_wind = min_wind

    def calc_leaf_fluxes(self, met, tleaf, rnet, gsc):
        """ Penman-Monteith transpiration of the leaf

        Parameters:
        -----------
        met : object
            met forcing for the half-hour
        tleaf : float
            leaf temperature [degC]
        rnet : float
            isothermal net radiation of the leaf [W m-2]
        gsc : float
            stomatal conductance to CO2 [mol m-2 s-1]

        Returns:
        --------
        trans : float
            transpiration [mol H2O m-2 s-1]
        LE : float
            latent heat flux [W m-2]
        gbc : float
            boundary layer conductance to CO2 [mol m-2 s-1]
        gh : float
            total (two sided) conductance to heat [mol m-2 s-1]
        gv : float
            total conductance to water vapour [mol m-2 s-1]
        omega : float
            decoupling coefficient
        """
        tair = met.tair
        press = met.press

        lambdax = self.calc_latent_heat_of_vapourisation(tair)
        gamma = self.calc_pyschrometric_constant(lambdax, press)
        slope = self.calc_slope_of_saturation_vapour_pressure_curve(tair)

        gradn = self.calc_radiation_conductance(tair)
        gbhu = self.calc_bdn_layer_forced_conduct(tair, press, met.wind)
        gbhf = self.calc_bdn_layer_free_conduct(tair, tleaf, press)

        # total boundary layer conductance for heat
        gbh = gbhu + gbhf

        # total conductance to heat, two sided
        gh = 2.0 * (gbh + gradn)

        gbv = const.GBVGBH * gbh
        gsv = const.GSVGSC * gsc
        gbc = gbh / const.GBHGBC

        if gsv > 0.0:
            # stomata and boundary layer in series
            gv = (gbv * gsv) / (gbv + gsv)

            arg1 = slope * rnet + met.vpd * gh * const.CP * const.MASS_AIR
            arg2 = slope + gamma * gh / gv
            LE = arg1 / arg2
            trans = LE / lambdax

            # decoupling coefficent, Jarvis and McNaughton, 1986
            # when omega is close to zero, it is said to be well coupled and
            # gs is the dominant controller of water loss (gs<ga).
            e = slope / gamma
            omega = (1.0 + e) / (1.0 + e + gbv / gsv)
        else:
            gv = 0.0
            LE = 0.0
            trans = 0.0
            omega = 0.0

        return (trans, LE, gbc, gh, gv, omega)

    def calc_radiation_conductance(self, tair):
        """ Radiation conductance [mol m-2 s-1], Leuning et al. (1995) eqn D3
        """
        Tk = tair + const.DEG_TO_KELVIN
        arg1 = 4.0 * const.SIGMA * Tk**3 * const.LEAF_EMISSIVITY

        return arg1 / (const.CP * const.MASS_AIR)

    def calc_bdn_layer_forced_conduct(self, tair, press, wind):
        """ Boundary layer conductance for heat from forced convection
        [mol m-2 s-1], Leuning et al. (1995) eqn E1 """
        cmolar = press / (const.RGAS * (tair + const.DEG_TO_KELVIN))
        wind = max(wind, self.min_wind)

        return 0.003 * sqrt(wind / self.leaf_width) * cmolar

    def calc_bdn_layer_free_conduct(self, tair, tleaf, press):
        """ Boundary layer conductance for heat from free convection
        [mol m-2 s-1], Leuning et al. (1995) eqns E3-E4 """
        cmolar = press / (const.RGAS * (tair + const.DEG_TO_KELVIN))

        # Grashof number
        grashof = 1.6E8 * abs(tleaf - tair) * self.leaf_width**3

        return 0.5 * const.DHEAT * grashof**0.25 / self.leaf_width * cmolar

    def calc_slope_of_saturation_vapour_pressure_curve(self, tair):
        """ Slope of the saturation vapour pressure curve [Pa K-1], a
        finite difference of the saturation function """
        dt = 0.1
        return (calc_sat_water_vapour_press(tair + dt) -
                calc_sat_water_vapour_press(tair)) / dt

    def calc_pyschrometric_constant(self, lambdax, press):
        """ Psychrometric constant [Pa K-1]

        Parameters:
        -----------
        lambdax : float
             latent heat of water vaporization [J mol-1]
        press : float
            air pressure [Pa]
        """
        return const.CP * const.MASS_AIR * press / lambdax

    def calc_latent_heat_of_vapourisation(self, tair):
        """ After Harrison (1963), returned in J mol-1 """
        return (const.H2OLV0 - 2.365E3 * tair) * const.H2OMW


class Penman(PenmanMonteith):
    """
    Evaporation at the potential/equilibrium rate, where aerodynamic conductance
    is zero (i.e. winds are calm).

    References
    ----------
    * Monteith and Unsworth (1990) Principles of Environmental
      Physics, pg. 185-187.
    """

    def calc_evaporation(self, net_rad, tair, press):
        """ Equilibrium evaporation

        Parameters:
        -----------
        net_rad : float
            net radiation at the surface [W m-2]
        tair : float
            air temperature [degC]
        press : float
            air pressure [Pa]

        Returns:
        --------
        evap : float
            evaporation [mol H2O m-2 s-1]

        """
        lambdax = self.calc_latent_heat_of_vapourisation(tair)
        gamma = self.calc_pyschrometric_constant(lambdax, press)
        slope = self.calc_slope_of_saturation_vapour_pressure_curve(tair)

        return max(0.0, ((slope / (slope + gamma)) * net_rad) / lambdax)
