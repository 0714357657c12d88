#!/usr/bin/env python
""" Half-hourly two-leaf canopy model of the G'DAY family, which runs the
canopy day by day and writes out the daily carbon and water fluxes. See below
for model description.
"""

import sys
import numpy as np

import twoleaf.constants as const
from twoleaf.file_parser import initialise_model_data
from twoleaf.print_outputs import PrintOutput
from twoleaf.check_balance import CheckBalance
from twoleaf.water_balance import WaterBalance, SoilMoisture
from twoleaf.workspace import CanopyWorkspace, Met
from twoleaf.canopy import Canopy, OK, zero_carbon_day_fluxes
from twoleaf.utilities import float_eq, uniq

__author__ = "Martin De Kauwe"
__version__ = "1.0 (15.02.2011)"
__email__  = "mdekauwe@gmail.com"


class CanopyModel(object):
    """ Two-leaf canopy model.

    Each half-hour the canopy is split into a sunlit and a shaded big leaf
    whose temperature, stomatal conductance, assimilation and transpiration
    are solved together. The half-hourly fluxes are summed to daily GPP, NPP,
    autotrophic respiration and the daily water balance, and the soil water
    state carries over from one day to the next.

    References:
    ----------
    * Wang & Leuning (1998) Agricultural & Forest Meterorology, 91, 89-111.
    * De Pury & Farquhar (1997) PCE, 20, 537-557.
    * Medlyn, B. E. et al (2011) Global Change Biology, 17, 2134-2144.
    """
    def __init__(self, fname=None, DUMP=False, met_header=0):

        """ Set up model

        * Read meterological forcing file
        * Read user config file and adjust the model parameters, control or
          initial state attributes that are used within the code.
        * Setup all class instances
        * Initialise things, zero stores etc.

        Parameters:
        ----------
        fname : string
            filename of model parameters, including path. None runs the
            defaults
        DUMP : logical
            dump a the default parameters to a file and do nothing else
        met_header : int
            row number of met file header with variable names

        """
        self.day_output = [] # store daily outputs

        # initialise model structures and read met data
        (self.control, self.params,
            self.state, self.files,
            self.fluxes, self.met_data,
            self.print_opts) = initialise_model_data(fname, met_header,
                                                     DUMP=DUMP)

        # the canopy runs whole days, so check before any output is opened
        if not DUMP:
            num_hlf_hrs = self.control.num_hlf_hrs
            if len(self.met_data["year"]) % num_hlf_hrs != 0:
                raise ValueError("Met file holds %d half-hours, which is not "
                                 "a whole number of %d slot days" %
                                 (len(self.met_data["year"]), num_hlf_hrs))

        self.pr = PrintOutput(self.params, self.state, self.fluxes,
                              self.control, self.files, self.print_opts,
                              open_output=not DUMP)

        # print model defaults
        if DUMP:
            self.pr.save_default_parameters()
            return

        # build list of variables to print
        (self.print_state, self.print_fluxes) = self.pr.get_vars_to_print()

        # class instances
        self.sm = SoilMoisture(self.control, self.params, self.state)
        self.sm.initialise_parameters()

        self.wb = WaterBalance(self.control, self.params, self.state,
                               self.fluxes)

        self.cb = CheckBalance(self.control, self.params, self.state,
                               self.fluxes)

        self.cw = CanopyWorkspace()
        self.met = Met()
        self.cp = Canopy(self.control, self.params, self.state, self.fluxes,
                         self.met_data, water_balance=self.wb,
                         soil_moisture=self.sm)

        # calculate initial stuff, e.g. N:C ratios and soil water
        self.day_end_calculations()
        self.state.pawater_root = min(self.state.pawater_root,
                                      self.params.wcapac_root)
        self.state.pawater_topsoil = min(self.state.pawater_topsoil,
                                         self.params.wcapac_topsoil)
        if self.state.lai is None:
            self.state.lai = max(0.01, (self.params.sla * const.M2_AS_HA /
                                        const.KG_AS_TONNES /
                                        self.params.cfracts *
                                        self.state.shoot))
        self.sm.calc_soil_water_potential()
        if self.control.water_stress:
            (self.state.wtfac_topsoil,
             self.state.wtfac_root) = self.sm.calculate_soil_water_fac()

        # figure out the number of years for simulation and the number of
        # days in each year
        num_hlf_hrs = self.control.num_hlf_hrs
        self.years = uniq(self.met_data["year"])
        self.days_in_year = [int(np.sum(self.met_data["year"] == yr)) //
                             num_hlf_hrs for yr in self.years]

        if self.control.water_stress == False:
            sys.stderr.write("**** You have turned off the drought stress")
            sys.stderr.write(", I assume you're debugging??!\n")

    def run_sim(self):
        """ Run model simulation!

        Returns:
        --------
        hour_idx : int
            number of half-hours of met forcing used
        """
        hour_idx = 0
        try:
            # =============== #
            #   YEAR LOOP     #
            # =============== #
            for i, yr in enumerate(self.years):
                self.day_output = [] # empty daily storage list for outputs

                # =============== #
                #   DAY LOOP      #
                # =============== #
                for doy in range(self.days_in_year[i]):
                    zero_carbon_day_fluxes(self.fluxes)
                    self.wb.zero_water_day_fluxes()

                    result = self.cp.run_canopy_day(self.cw, self.met,
                                                    hour_idx)
                    hour_idx = result.hour_idx

                    if result.status != OK:
                        if self.control.skip_failed_days:
                            sys.stderr.write("Skipping year %d, day %d: "
                                             "%s\n" % (yr, doy + 1,
                                                       result.error))
                            continue
                        raise result.error

                    self.cb.check_carbon_balance()

                    # calculate N:C ratios
                    self.day_end_calculations()

                    # =============== #
                    #   END OF DAY    #
                    # =============== #
                    self.save_daily_outputs(yr, int(self.met.doy))

                # =============== #
                #   END OF YEAR   #
                # =============== #
                if self.control.print_options == "DAILY":
                    self.print_output_file()

            # final state
            if self.control.print_options == "END":
                self.print_output_file()
        finally:
            self.pr.clean_up()

        return hour_idx

    def print_output_file(self):
        """ Either print the daily output file (at the end of the year) or
        print the final state + param file. """

        # print the daily output file, this is done once at the end of each yr
        if self.control.print_options == "DAILY":
            self.pr.write_daily_outputs_file(self.day_output)

        # print the final state
        elif self.control.print_options == "END":
            self.pr.save_state()

    def day_end_calculations(self):
        """Calculate derived values from state variables. """
        # update N:C of the foliage
        if float_eq(self.state.shoot, 0.0):
            self.state.shootnc = 0.0
        else:
            self.state.shootnc = self.state.shootn / self.state.shoot

    def save_daily_outputs(self, year, doy):
        """ Save the daily fluxes + state in a big list.

        This should be a more efficient way to write the daily output in a
        single step at the end of the year.

        Parameters:
        -----------
        year : integer
            simulation year
        doy : integer
            day of year
        """
        output = [int(year), doy]
        for var in self.print_state:
            output.append(getattr(self.state, var))
        for var in self.print_fluxes:
            output.append(getattr(self.fluxes, var))
        self.day_output.append(output)


def cmdline_parser(argv=None):
    """ Parse the command line for user options

    Returns:
    --------
    options : object
        various cmd line options supplied by the user
    args : objects
        list of arguments

    """
    from optparse import OptionParser

    desc = """Half-hourly two-leaf canopy model"""
    clp = OptionParser("Usage: %prog [options] filename", description = desc)
    clp.add_option("-d", "--dump", action="store_true", dest="DUMP",
                    default=False, help="Dump a default .INI file")
    options, args = clp.parse_args(argv)
    return options, args


def main(argv=None):
    """ run the model with the .cfg file given on the command line """

    # timing...
    import time
    start_time = time.time()

    (options, args) = cmdline_parser(argv)
    fname = args[0] if args else None

    M = CanopyModel(fname, DUMP=options.DUMP)
    if options.DUMP:
        return
    M.run_sim()

    end_time = time.time()
    sys.stderr.write("\nTotal simulation time: %.1f seconds\n\n" %
                                                    (end_time - start_time))


if __name__ == "__main__":

    main()
