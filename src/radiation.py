""" Sub-daily solar geometry, diffuse fraction and sunlit/shaded absorbed PAR
for the two big leaves """

from math import pi, sin, cos, acos, exp, sqrt

import twoleaf.constants as const
from twoleaf.utilities import clip
from twoleaf.workspace import Leaf

__author__  = "Martin De Kauwe"
__version__ = "1.0 (09.02.2016)"
__email__   = "mdekauwe@gmail.com"


class Radiation(object):
    """ Radiation sub-model, calculates the apar of the sunlit/shaded leaves.

    References:
    -----------
    * De Pury & Farquhar (1997) PCE, 20, 537-557.
    * Spitters et al. (1986) Agricultural & Forest Meteorology, 38, 217-229.
    * Spencer (1971) Search, 2, 172.
    * Wang & Leuning (1998) Agricultural & Forest Meterorology, 91, 89-111.
    """
    def __init__(self, params, kn=0.3, sigma=0.15, kd_prime=0.719,
                 rho_cd=0.036):
        """
        Parameters
        ----------
        params: floats, object
            model parameters
        kn : float
            extinction coefficent for Nitrogen
        sigma : float
            leaf scattering coefficient of PAR
        kd_prime : float
            diffuse and scattered diffuse PAR extinction coefficient
        rho_cd : float
            canopy reflection coefficient for diffuse PAR
        """
        self.params = params
        self.kn = kn
        self.sigma = sigma
        self.kd_prime = kd_prime
        self.rho_cd = rho_cd

    def calculate_solar_geometry(self, cw, doy, hod):
        """ The solar zenith angle is the angle between the zenith and the
        centre of the sun's disc. The solar elevation angle is the altitude of
        the sun, the angle between the horizon and the centre of the sun's disc.
        Since these two angles are complementary, the cosine of either one of
        them equals the sine of the other, i.e. cos theta = sin beta.

        Parameters:
        ----------
        cw : object
            canopy workspace, cos_zenith & elevation [radians] are set
        doy : float
            day of year
        hod : int
            half-hour of the day [0, num_hlf_hrs)
        """
        gamma = self.day_angle(doy)
        rdec = self.calculate_solar_declination(gamma)
        et = self.calculate_eqn_of_time(gamma)
        t0 = self.calculate_solar_noon(et)
        h = self.calculate_hour_angle(hod, t0)
        rlat = self.params.latitude * pi / 180.0

        cos_zenith = sin(rlat) * sin(rdec) + cos(rlat) * cos(rdec) * cos(h)
        cw.cos_zenith = clip(cos_zenith, min=0.0, max=1.0)
        cw.elevation = pi / 2.0 - acos(cw.cos_zenith)

    def day_angle(self, doy):
        """ Eccentricity of the earth's orbit, radians """
        return 2.0 * pi * (doy - 1.0) / 365.0

    def calculate_solar_declination(self, gamma):
        """ Solar declination angle (radians), Spencer (1971) """
        return (0.006918 - 0.399912 * cos(gamma) + 0.070257 * sin(gamma) -
                0.006758 * cos(2.0 * gamma) + 0.000907 * sin(2.0 * gamma) -
                0.002697 * cos(3.0 * gamma) + 0.00148 * sin(3.0 * gamma))

    def calculate_eqn_of_time(self, gamma):
        """ Equation of time (minutes), correction for the difference between
        solar time and clock time, Spencer (1971) """
        et = (0.000075 + 0.001868 * cos(gamma) - 0.032077 * sin(gamma) -
              0.014615 * cos(2.0 * gamma) - 0.04089 * sin(2.0 * gamma))
        return et * 229.18

    def calculate_solar_noon(self, et):
        """ Solar noon (hours), corrected for longitude within the time zone
        and the equation of time """
        lon = self.params.longitude
        ls = round(lon / 15.0) * 15.0 # standard meridian
        return 12.0 + (4.0 * (ls - lon) - et) / 60.0

    def calculate_hour_angle(self, hod, t0):
        """ Hour angle (radians) at the mid-point of the half-hour """
        t = (hod + 0.5) / 2.0
        return pi * (t - t0) / 12.0

    def get_diffuse_frac(self, cw, doy, sw_rad):
        """ For the moment, I am only going to implement Spitters, so this is
        a bit of a useless wrapper function.

        Parameters:
        ----------
        cw : object
            canopy workspace, diffuse_frac is set
        doy : float
            day of year
        sw_rad : float
            incident shortwave radiation [W m-2]
        """
        cw.diffuse_frac = self.spitters(doy, sw_rad, cw.cos_zenith)

    def spitters(self, doy, sw_rad, cos_zenith):
        """ Spitters algorithm to estimate the diffuse component from the
        measured hourly global radiation.

        Parameters:
        ----------
        doy : float
            day of year
        sw_rad : float
            incident shortwave radiation [W m-2]
        cos_zenith : float
            cosine of the solar zenith angle

        Returns:
        -------
        diffuse : float
            diffuse component of incoming radiation, 1.0 when the sun is down

        """
        sin_beta = cos_zenith
        so = self.calc_extra_terrestrial_rad(doy, cos_zenith)
        if sin_beta <= 0.0 or so <= 0.0:
            return 1.0

        # atmospheric transmisivity
        tau = clip(sw_rad / so, min=0.0, max=1.0)

        # For zenith angles > 80 degrees, diffuse_frac = 1.0
        if cos_zenith > 0.17:

            # Spitters formula
            R = 0.847 - 1.61 * sin_beta + 1.04 * sin_beta**2
            K = (1.47 - R) / 1.66
            if tau <= 0.22:
                diffuse_frac = 1.0
            elif tau <= 0.35:
                diffuse_frac = 1.0 - 6.4 * (tau - 0.22)**2
            elif tau <= K:
                diffuse_frac = 1.47 - 1.66 * tau
            else:
                diffuse_frac = R
        else:
            diffuse_frac = 1.0

        return clip(diffuse_frac, min=0.0, max=1.0)

    def calc_extra_terrestrial_rad(self, doy, cos_zenith):
        """ Solar radiation incident outside the earth's atmosphere, e.g.
        extra-terrestrial radiation [W m-2]. The value varies a little with the
        earths orbit. """
        if cos_zenith > 0.0:
            ecc = 1.0 + 0.033 * cos(2.0 * pi * (doy - 10.0) / 365.0)
            return const.SOLAR_CONSTANT * ecc * cos_zenith
        return 0.0

    def calculate_absorbed_radiation(self, cw, state, par):
        """ Calculate absorded irradiance of sunlit and shaded fractions of
        the canopy. The Irradiance absorbed by a fraction of the canopy is the
        integral of absorbed irradiance over the leaf area of that fraction of
        the canopy.

        - Assuming a spherical leaf angle distribution, with no clumping.

        Parameters:
        ----------
        cw : object
            canopy workspace, apar_leaf & cscalar are set
        state: floats, object
            model state
        par : float
            incident PAR [umol m-2 s-1]

        References:
        -----------
        * De Pury & Farquhar (1997) PCE, 20, 537-557, eqns 13-20 & A19-A25.
        """
        lai = state.lai
        if lai <= 0.0 or cw.cos_zenith <= 0.0:
            for i in Leaf:
                cw.apar_leaf[i] = 0.0
                cw.cscalar[i] = 0.0
            return

        sigma = self.sigma
        kd_prime = self.kd_prime
        kn = self.kn

        # beam radiation extinction coefficient of canopy, spherical leaves
        kb = 0.5 / cw.cos_zenith

        # beam and scattered beam PAR extinction coefficent
        kb_prime = kb * sqrt(1.0 - sigma)

        # canopy reflection coefficients for beam PAR, horizontal leaves and
        # uniform leaf-angle distribution
        rho_h = (1.0 - sqrt(1.0 - sigma)) / (1.0 + sqrt(1.0 - sigma))
        rho_cb = 1.0 - exp(-2.0 * rho_h * kb / (1.0 + kb))

        direct_par = par * (1.0 - cw.diffuse_frac)
        diffuse_par = par * cw.diffuse_frac

        # total canopy absorbed irradiance
        qc = ((1.0 - rho_cb) * direct_par * (1.0 - exp(-kb_prime * lai)) +
              (1.0 - self.rho_cd) * diffuse_par * (1.0 - exp(-kd_prime * lai)))

        # direct beam
        qsun_beam = direct_par * (1.0 - sigma) * (1.0 - exp(-kb * lai))

        # diffuse
        qsun_diffuse = (diffuse_par * (1.0 - self.rho_cd) *
                        (1.0 - exp(-(kd_prime + kb) * lai)) *
                        kd_prime / (kd_prime + kb))

        # scattered beam
        qsun_scattered = direct_par * (
                            (1.0 - rho_cb) *
                            (1.0 - exp(-(kb_prime + kb) * lai)) *
                            kb_prime / (kb_prime + kb) -
                            (1.0 - sigma) * (1.0 - exp(-2.0 * kb * lai)) / 2.0)

        cw.apar_leaf[Leaf.SUNLIT] = max(0.0, qsun_beam + qsun_diffuse +
                                        qsun_scattered)
        cw.apar_leaf[Leaf.SHADED] = max(0.0, qc - cw.apar_leaf[Leaf.SUNLIT])

        # scale top of canopy photosynthetic capacity to the two big leaves
        # assuming N declines exponentially with cumulative leaf area
        cw.cscalar[Leaf.SUNLIT] = (1.0 - exp(-(kb + kn) * lai)) / (kb + kn)
        cw.cscalar[Leaf.SHADED] = (1.0 - exp(-kn * lai)) / kn - cw.cscalar[Leaf.SUNLIT]
