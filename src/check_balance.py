#!/usr/bin/env python
""" Check model C and water balances """

from math import fabs

__author__  = "Martin De Kauwe"
__version__ = "1.0 (01.07.2013)"
__email__   = "mdekauwe@gmail.com"


class CheckBalance(object):
    """ Check the model is balancing C and water

    - Haven't decided if it makes sense to run this all the time or as a check
      when changes are made to the code base.
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

    def check_carbon_balance(self, tolerance=1E-9):
        """ NPP is a fixed fraction of GPP, the rest is respired """
        npp = self.fluxes.gpp * self.params.cue
        if fabs(self.fluxes.npp - npp) > tolerance:
            raise ValueError("Carbon balance check error: NPP %f != GPP x CUE "
                             "%f" % (self.fluxes.npp, npp))

        ra = self.fluxes.gpp - self.fluxes.npp
        if fabs(self.fluxes.auto_resp - ra) > tolerance:
            raise ValueError("Carbon balance check error: Ra %f != GPP - NPP "
                             "%f" % (self.fluxes.auto_resp, ra))

    def check_water_balance(self, rain, tolerance=1E-4):
        """ Day's rain (mm) is lost or stored in the root zone """
        sources = rain * self.params.rfmult
        sinks = (self.fluxes.runoff + self.fluxes.transpiration +
                 self.fluxes.soil_evap + self.fluxes.interception)
        stores = self.state.delta_sw_store
        balance = sources - sinks - stores
        if fabs(balance) > tolerance:
            raise ValueError("Water balance check error: %f mm" % balance)
