import csv

from twoleaf._version import __version__ as revision

__author__  = "Martin De Kauwe"
__version__ = "1.0 (21.03.2011)"
__email__   = "mdekauwe@gmail.com"

# written when the .cfg file has no [print] section
DEFAULT_PRINT_VARS = ["lai", "shootnc", "pawater_root", "pawater_topsoil",
                      "wtfac_root", "wtfac_topsoil", "psi_s_root",
                      "psi_s_topsoil", "tsoil", "gpp", "npp", "auto_resp",
                      "apar", "gs_mol_m2_sec", "omega", "transpiration",
                      "soil_evap", "interception", "erain", "et", "runoff"]


class PrintOutput(object):
    """Print model self.state and fluxes.

    Potential really to print anything, but for the moment the obvious.
    """
    def __init__(self, params, state, fluxes, control, files, print_opts,
                 open_output=True):
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
        files : strings, object
            model file names
        print_opts : dictionary
            output print options
        open_output : logical
            open the daily output file, not needed when only dumping the
            default parameters

        """
        self.params = params
        self.state = state
        self.fluxes = fluxes
        self.control = control
        self.files = files
        if print_opts:
            self.print_opts = print_opts
        else:
            self.print_opts = DEFAULT_PRINT_VARS

        # stamp the code version into the output file
        self.revision_code = revision

        # dump the default run parameters for the user to change
        self.default_param_fname = self.files.cfg_fname

        # dump the state at the end of a run
        self.out_param_fname = self.files.out_param_fname

        # daily output file hdr
        self.print_fluxes = []
        self.print_state = []
        for var in self.print_opts:
            if hasattr(self.state, var):
                self.print_state.append(var)
            elif hasattr(self.fluxes, var):
                self.print_fluxes.append(var)
            else:
                raise AttributeError("Error accessing var to print: %s" % var)

        self.odaily = None
        if open_output:
            try:
                self.odaily = open(self.files.out_fname, 'w', newline='')
            except IOError:
                raise IOError("Can't open %s file for write" %
                              self.files.out_fname)
            self.wr = csv.writer(self.odaily, delimiter=',')
            self.write_daily_output_header()

    def get_vars_to_print(self):
        """ return lists of variable names to print out """
        return (self.print_state, self.print_fluxes)

    def save_default_parameters(self):
        """ Print default model state, control and param files.

        User should be adjusting these files as the defaults may be utter
        rubbish.
        """
        try:
            oparams = open(self.default_param_fname, 'w')
        except IOError:
            raise IOError("Can't open %s file for write" %
                            self.default_param_fname)
        with oparams:
            self.print_parameters(oparams=oparams)

    def save_state(self):
        """ Save model state

        Keep the state with the intention of starting the next model run from
        this point.
        """
        try:
            oparams = open(self.out_param_fname, 'w')
        except IOError:
            raise IOError("Can't open %s file for write" %
                            self.out_param_fname)
        with oparams:
            self.print_parameters(oparams=oparams)

    def print_parameters(self, oparams=None):
        """ print model parameters

        This is either called before running the program so that the user can
        see the default parameters. Otherwise it is called at the end of
        run time, in which case it will represent the state of the model. This
        file can then be used to restart a run.

        Parameters:
        -----------
        oparams : fp
            output parameter file pointer

        """
        # derived each day, not something the user sets
        ignore = ['delta_sw_store', 'shootnc', 'wtfac_topsoil', 'wtfac_root',
                  'psi_s_root', 'psi_s_topsoil', 'tsoil']

        self.dump_ini_data("[version]\n", None, ignore, oparams, version=True)
        self.dump_ini_data("\n[files]\n", self.files, ignore, oparams)
        self.dump_ini_data("\n[params]\n", self.params, ignore, oparams)
        self.dump_ini_data("\n[state]\n", self.state, ignore, oparams)
        self.dump_ini_data("\n[control]\n", self.control, ignore, oparams)
        self.dump_ini_data("\n[print]\n", self.print_opts, ignore, oparams,
                            print_tag=True)

    def dump_ini_data(self, ini_section_tag, obj, ignore, fp, print_tag=False,
                      version=False):
        """ Write one section of the ini file, builtin attributes are skipped

        Parameters:
        ----------
        ini_section_tag : string
            section header
        obj : object
            clas object
        ignore : list
            variables to ignore when printing output
        fp : fp
            out file pointer
        print_tag : logical
            if true the [print] section, obj is the list of variables
        version : logical
            if true write the code version
        """
        try:
            fp.write(ini_section_tag)
            if version:
                fp.write('%s = %s\n' % ("version", self.revision_code))
            elif print_tag:
                fp.writelines('%s = %s\n' % (i, "yes") for i in obj)
            else:
                data = sorted(i for i in vars(obj) if not i.startswith('_')
                              and i not in ignore)
                fp.writelines('%s = %s\n' % (i, getattr(obj, i))
                              for i in data)
        except IOError:
            raise IOError("Error writing params file")

    def write_daily_output_header(self):
        self.wr.writerow(["%s:%s" % ("#Revision_code", self.revision_code)])
        header = ["year", "doy"]
        header.extend(self.print_state)
        header.extend(self.print_fluxes)
        self.wr.writerow(header)

    def write_daily_outputs_file(self, day_outputs):
        """ Write daily outputs to a csv file """
        self.wr.writerows(day_outputs)

    def clean_up(self):
        """ close the output file that holds the daily output """
        if self.odaily is not None:
            self.odaily.close()
            self.odaily = None
