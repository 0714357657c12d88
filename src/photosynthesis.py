""" Leaf-scale C3 photosynthesis coupled to stomatal conductance. Full
description below """

from math import exp, sqrt

import twoleaf.constants as const
from twoleaf.utilities import float_lt, quadratic

__author__ = "Martin De Kauwe"
__version__ = "1.0 (04.03.2014)"
__email__  = "mdekauwe@gmail.com"


class PhotosynthesisC3(object):
    """ C3 photosynthesis for one of the two big leaves

    Farquhar et al. (1980) biochemistry, Rubisco- and RuBP-regeneration
    limited rates, coupled to the Medlyn et al. (2011) stomatal model at the
    leaf surface. Substituting gs = g0 + (1 + g1/sqrt(D)) * A/Cs into the
    diffusion and biochemical supply eqns gives a quadratic in Ci for each
    limitation which is solved analytically (the approach used in MAESTRA).

    The leaf surface state (leaf temperature, Cs, surface VPD) and the leaf's
    absorbed PAR are read from the canopy workspace.

    References:
    -----------
    * Farquhar et al. (1980) Planta, 149, 78-90.
    * Medlyn, B. E. et al (2011) Global Change Biology, 17, 2134-2144.
    * Medlyn et al. (2002) PCE, 25, 1167-1179.
    * Leuning (1990) Aust. J. Plant Physiol., 17, 159-175.

    Rubisco kinetic parameter values are from:
    * Bernacchi et al. (2001) PCE, 24, 253-259.
    """

    def __init__(self, control, params, state):
        """
        Parameters
        ----------
        control : integers, object
            model control flags
        params: floats, object
            model parameters
        state: floats, object
            model state
        """
        self.control = control
        self.params = params
        self.state = state
        self.mt = self.params.measurement_temp + const.DEG_TO_KELVIN

    def calculate_photosynthesis(self, cw, met):
        """ Net assimilation and stomatal conductance of the current leaf

        Parameters:
        ----------
        cw : object
            canopy workspace, leaf_idx selects the leaf
        met : object
            met forcing for the half-hour

        Returns:
        --------
        an : float
            net leaf assimilation (umol m-2 s-1)
        gsc : float
            stomatal conductance to CO2 (mol m-2 s-1)
        """
        idx = cw.leaf_idx
        Tk = cw.tleaf + const.DEG_TO_KELVIN
        Cs = cw.Cs
        par = cw.apar_leaf[idx]

        gamma_star = self.calculate_co2_compensation_point(Tk)
        km = self.calculate_michaelis_menten_parameter(Tk)
        (jmax, vcmax, vcmax25) = self.calculate_jmax_and_vcmax(Tk, cw.N0,
                                                              cw.cscalar[idx])
        J = self.calculate_electron_transport(par, jmax)
        Vj = J / 4.0
        rd = self.calc_respiration(Tk, vcmax25)

        g0 = max(1E-09, self.params.g0)
        gs_over_a = self.calc_gs_over_a(cw.dleaf, Cs)

        # Rubisco-limited
        A = g0 + gs_over_a * (vcmax - rd)
        B = ((1.0 - Cs * gs_over_a) * (vcmax - rd) + g0 * (km - Cs) -
             gs_over_a * (vcmax * gamma_star + km * rd))
        C = (-(1.0 - Cs * gs_over_a) * (vcmax * gamma_star + km * rd) -
             g0 * km * Cs)
        cic = quadratic(a=A, b=B, c=C, large=True)
        if cic is None or cic <= 0.0 or cic > Cs:
            ac = 0.0
        else:
            ac = self.assim(cic, gamma_star, a1=vcmax, a2=km)

        # RuBP-regeneration limited
        A = g0 + gs_over_a * (Vj - rd)
        B = ((1.0 - Cs * gs_over_a) * (Vj - rd) +
             g0 * (2.0 * gamma_star - Cs) -
             gs_over_a * (Vj * gamma_star + 2.0 * gamma_star * rd))
        C = (-(1.0 - Cs * gs_over_a) * gamma_star * (Vj + 2.0 * rd) -
             g0 * 2.0 * gamma_star * Cs)
        cij = quadratic(a=A, b=B, c=C, large=True)
        if cij is None:
            cij = Cs
        aj = self.assim(cij, gamma_star, a1=Vj, a2=2.0 * gamma_star)

        # Below light compensation, take Ci as Cs
        if aj - rd < 1E-06:
            cij = Cs
            aj = self.assim(cij, gamma_star, a1=Vj, a2=2.0 * gamma_star)

        an = min(ac, aj) - rd
        gsc = max(g0, g0 + gs_over_a * an)

        cw.an_leaf[idx] = an
        cw.gsc_leaf[idx] = gsc

        return (an, gsc)

    def calc_gs_over_a(self, dleaf, Cs, dmin=0.05):
        """ Slope of stomatal conductance to CO2 against assimilation, Medlyn
        et al. (2011), the root-zone water factor reduces g1

        Parameters:
        ----------
        dleaf : float
            vapour pressure deficit at the leaf surface (Pa)
        Cs : float
            CO2 concentration at the leaf surface (umol mol-1)
        dmin : float
            lower limit on the VPD (kPa), avoids a singularity at D = 0
        """
        if self.control.gs_model != "MEDLYN":
            raise AttributeError('Only Belindas gs model is implemented')

        dkpa = max(dmin, dleaf * const.PA_2_KPA)
        g1w = self.params.g1 * self.state.wtfac_root

        return (1.0 + g1w / sqrt(dkpa)) / Cs

    def calculate_co2_compensation_point(self, Tk):
        """ CO2 compensation point in the absence of mitochondrial respiration

        Parameters:
        ----------
        Tk : float
            leaf temperature (Kelvin)

        Returns:
        -------
        gamma_star : float
            CO2 compensation point in the abscence of mitochondrial respiration
        """
        return self.arrh(self.params.gamstar25, self.params.eag, Tk)

    def calculate_michaelis_menten_parameter(self, Tk):
        """ Effective Michaelis-Menten coefficent of Rubisco activity

        Parameters:
        ----------
        Tk : float
            leaf temperature (Kelvin)

        Returns:
        -------
        Km : float
            Effective Michaelis-Menten constant for Rubisco catalytic activity
        """
        # Michaelis-Menten coefficents for carboxylation by Rubisco
        Kc = self.arrh(self.params.kc25, self.params.eac, Tk)

        # Michaelis-Menten coefficents for oxygenation by Rubisco
        Ko = self.arrh(self.params.ko25, self.params.eao, Tk)

        # return effective Michaelis-Menten coefficient for CO2
        return Kc * (1.0 + self.params.oi / Ko)

    def calculate_jmax_and_vcmax(self, Tk, N0, cscalar):
        """ Calculate the maximum RuBP regeneration rate (Jmax) and the
        maximum rate of rubisco-mediated carboxylation (Vcmax) of the leaf, the
        top of canopy values scaled down to the big leaf by cscalar.

        Parameters:
        ----------
        Tk : float
            leaf temperature (Kelvin)
        N0 : float
            top of canopy leaf N (g N m-2)
        cscalar : float
            scaling from the top of the canopy to the big leaf

        Returns:
        --------
        jmax : float (umol/m2/sec)
            the maximum rate of electron transport at leaf temperature
        vcmax : float (umol/m2/sec)
            the maximum rate of carboxylation at leaf temperature
        vcmax25 : float (umol/m2/sec)
            the maximum rate of carboxylation at 25 degC
        """
        if self.control.modeljm == 0:
            jmax25 = self.params.jmax
            vcmax25 = self.params.vcmax
        elif self.control.modeljm == 1:
            jmax25 = self.params.jmaxna * N0 + self.params.jmaxnb
            vcmax25 = self.params.vcmaxna * N0 + self.params.vcmaxnb
        elif self.control.modeljm == 2:
            vcmax25 = self.params.vcmaxna * N0 + self.params.vcmaxnb
            jmax25 = self.params.jv_slope * vcmax25 - self.params.jv_intercept
        else:
            raise AttributeError("Unknown Jmax/Vcmax option: %s" %
                                 self.control.modeljm)

        jmax25 *= cscalar
        vcmax25 *= cscalar

        # this response is well-behaved for TLEAF < 0.0
        jmax = self.peaked_arrh(jmax25, self.params.eaj, Tk,
                                self.params.delsj, self.params.edj)
        vcmax = self.arrh(vcmax25, self.params.eav, Tk)

        # reduce photosynthetic capacity with moisture stress
        jmax *= self.state.wtfac_root
        vcmax *= self.state.wtfac_root

        # Function allowing Jmax/Vcmax to be forced linearly to zero at low T
        jmax = self.adj_for_low_temp(jmax, Tk)
        vcmax = self.adj_for_low_temp(vcmax, Tk)

        return (jmax, vcmax, vcmax25)

    def calculate_electron_transport(self, par, jmax):
        """ Potential electron transport rate, non-rectangular hyperbola of
        absorbed PAR (umol m-2 s-1) """
        if par <= 0.0 or jmax <= 0.0:
            return 0.0

        theta = self.params.theta
        alpha_par = self.params.alpha_j * par
        J = quadratic(a=theta, b=-(alpha_par + jmax), c=alpha_par * jmax,
                      large=False)
        if J is None:
            return 0.0
        return J

    def adj_for_low_temp(self, param, Tk, lower_bound=0.0, upper_bound=10.0):
        """
        Function allowing Jmax/Vcmax to be forced linearly to zero at low T

        Parameters:
        ----------
        Tk : float
            leaf temperature (Kelvin)
        """
        Tc = Tk - const.DEG_TO_KELVIN

        if float_lt(Tc, lower_bound):
            param = 0.0
        elif float_lt(Tc, upper_bound):
            param *= (Tc - lower_bound) / (upper_bound - lower_bound)

        return param

    def assim(self, ci, gamma_star, a1, a2):
        """ Assimilation rate, limitation is defined by the variables passed as
        a1 and a2, i.e. if we are calculating vcmax or jmax limited.

        Parameters:
        ----------
        ci : float
            intercellular CO2 concentration.
        gamma_star : float
            CO2 compensation point in the abscence of mitochondrial respiration
        a1 : float
            variable depends on whether the calculation is light or rubisco
            limited.
        a2 : float
            variable depends on whether the calculation is light or rubisco
            limited.

        Returns:
        -------
        assimilation_rate : float
            assimilation rate assuming either light or rubisco limitation.
        """
        if float_lt(ci, gamma_star):
            return 0.0
        else:
            return a1 * (ci - gamma_star) / (a2 + ci)

    def calc_respiration(self, Tk, vcmax25, Tref=25.0):
        """ Day respiration (umol m-2 s-1), a fixed fraction of Vcmax25 with a
        Q10 temperature response.

        References:
        -----------
        * Collatz et al (1991) Agricultural and Forest Meteorology, 54,
          107-136.
        """
        # scaling constant to Vcmax25 for C3 plants
        fdr = 0.015
        Rd25 = fdr * vcmax25
        Q10 = 2.0

        return Rd25 * Q10**(((Tk - const.DEG_TO_KELVIN) - Tref) / 10.0)

    def arrh(self, k25, Ea, Tk):
        """ Temperature dependence of kinetic parameters is described by an
        Arrhenius function

        Parameters:
        ----------
        k25 : float
            rate parameter value at 25 degC
        Ea : float
            activation energy for the parameter [J mol-1]
        Tk : float
            leaf temperature [deg K]

        Returns:
        -------
        kt : float
            temperature dependence on parameter

        References:
        -----------
        * Medlyn et al. 2002, PCE, 25, 1167-1179.
        """
        return k25 * exp((Ea * (Tk - self.mt)) / (self.mt * const.RGAS * Tk))

    def peaked_arrh(self, k25, Ea, Tk, deltaS, Hd):
        """ Temperature dependancy approximated by peaked Arrhenius eqn,
        accounting for the rate of inhibition at higher temperatures.

        Parameters:
        ----------
        k25 : float
            rate parameter value at 25 degC
        Ea : float
            activation energy for the parameter [J mol-1]
        Tk : float
            leaf temperature [deg K]
        deltaS : float
            entropy factor [J mol-1 K-1)
        Hd : float
            describes rate of decrease about the optimum temp [J mol-1]

        Returns:
        -------
        kt : float
            temperature dependence on parameter

        References:
        -----------
        * Medlyn et al. 2002, PCE, 25, 1167-1179.
        """
        arg1 = self.arrh(k25, Ea, Tk)
        arg2 = 1.0 + exp((self.mt * deltaS - Hd) / (self.mt * const.RGAS))
        arg3 = 1.0 + exp((Tk * deltaS - Hd) / (Tk * const.RGAS))

        return arg1 * arg2 / arg3
