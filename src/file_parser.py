#!/usr/bin/env python
""" Load all the model initialisation data, see docstring below"""

__author__  = "Martin De Kauwe"
__version__ = "1.0 (22.02.2011)"
__email__   = "mdekauwe@gmail.com"


import re
import copy
import keyword
import configparser
import numpy as np

import twoleaf.default_params as p
import twoleaf.default_control as c
import twoleaf.default_state as s
import twoleaf.default_files as fi
import twoleaf.default_fluxes as fl
from twoleaf.utilities import str2boolean

MET_VARS = ["year", "doy", "hod", "rain", "par", "tair", "tsoil", "vpd", "co2",
            "wind", "press"]


class ModelData(object):
    """ Container for one set of model variables (control, params, ...) """
    pass


def initialise_model_data(fname, met_header=0, DUMP=False):
    """ Load default model data, met forcing and return
    If there are user supplied input files initialise model with these instead

    Parameters:
    ----------
    fname : string
        filename of input options, parameters. Filename should include path!
        None means run with the defaults
    met_header : int
        row number of met file header with variable names
    DUMP : logical
        dump a the default parameters to a file, met data is not read

    Returns:
    --------
    control : integers, object
        model control flags
    params: floats, object
        model parameters
    state: floats, object
        model state
    files : strings, object
        model file names
    fluxes : floats, object
        model fluxes
    met_data : numpy arrays, dictionary
        meteorological forcing data
    print_opts : dictionary
        variables to write to the daily output file

    """
    # fresh copies each call, if this code is run in a monte carlo fashion
    # the defaults must not carry over between instances
    params = copy_defaults(p)
    state = copy_defaults(s)
    control = copy_defaults(c)
    files = copy_defaults(fi)
    fluxes = copy_defaults(fl)

    if fname is None or DUMP:
        user_control, user_params, user_state = {}, {}, {}
        user_files, user_print = {}, {}
        if fname is not None:
            files.cfg_fname = fname
    else:
        R = ReadConfigFile(fname)
        R.load_files()
        (user_control, user_params, user_state,
            user_files, user_print) = R.get_config_dicts()
        files.cfg_fname = fname

    if DUMP == False:
        params = adjust_object_attributes(user_params, params)
        state = adjust_object_attributes(user_state, state)
        control = adjust_object_attributes(user_control, control)
        files = adjust_object_attributes(user_files, files)

        # get driving data
        met_data = read_met_forcing(files.met_fname, met_header)
    else:
        met_data = None

    return (control, params, state, files, fluxes, met_data, user_print)

def copy_defaults(module):
    """ Copy the public variables of a defaults module onto a new object """
    obj = ModelData()
    for key, value in vars(module).items():
        if not key.startswith("_"):
            setattr(obj, key, copy.copy(value))
    return obj


class ReadConfigFile(object):
    """ Read supplied config file (.cfg/.ini).

    Return various dictionaries based on defined sections.
    """
    def __init__(self, fname):

        """
        Parameters:
        ----------
        fname : string
            filename of parameter (CFG) file [including path]

        """
        self.config_file = fname
        self.Config = configparser.ConfigParser()
        self.Config.optionxform = str # Respect case

    def load_files(self):
        """ load config file

        Returns:
        --------
        config : list
            files which were successfully read

        """
        try:
            config = self.Config.read(self.config_file)
        except configparser.Error as e:
            raise IOError('%s' % e)
        if not config:
            raise IOError('Could not read config file: "%s"' %
                          self.config_file)

        return config

    def get_config_dicts(self):
        """ Break config file into small dictionaries based on sections.

        Returns:
        --------
        control : dictionary
            model control flags
        params: dictionary
            model parameters
        state: dictionary
            model state
        files : dictionary
            file names
        print : dictionary
            output variables

        """
        user_files = self.build_dict_from_ini_file("files")
        user_params = self.build_dict_from_ini_file("params")
        user_control = self.build_dict_from_ini_file("control")
        user_state = self.build_dict_from_ini_file("state")
        user_print_opts = self.build_dict_from_ini_file("print")

        return (user_control, user_params, user_state, user_files,
                user_print_opts)

    def build_dict_from_ini_file(self, section):
        """
        Return the .cfg file as a series of dictionaries depending on which
        section is called.

        the configparser package reads everything as a string, so we have to
        cast it ourselves. This isn't entriely straightforward, as we need to
        (i) catch None's, (ii) catch underscores as isalpha() ignores these and
        (iii) cast float/ints

        Parameters:
        -----------
        section : string
            Identifier to grab the relevant section from the .cfg file, e.g.
            "params"

        Returns:
        --------
        d : dictionary
            dictionary containing stuff from the .cfg file.
        """
        flags = ['water_stress', 'calc_sw_params', 'skip_failed_days']
        flags_up = ["print_options", "ps_pathway", "gs_model"]

        d = {}
        if not self.Config.has_section(section):
            return d

        for option in self.Config.options(section):
            value = self.Config.get(section, option).strip()
            try:
                if section == "params" or section == "state":
                    if value.replace('_','').isalpha() and value != "None":
                        d[option] = value
                    elif value == "None":
                        d[option] = None
                    else:
                        d[option] = float(value)
                elif section == "control":
                    if option in flags:
                        d[option] = str2boolean(value)
                    elif option in flags_up:
                        d[option] = value.upper()
                    elif value.replace('_','').isalpha() and value != "None":
                        d[option] = value
                    elif value == "None":
                        d[option] = None
                    else:
                        d[option] = int(value)
                elif section == "print" or section == "files":
                    d[option] = value
            except ValueError:
                raise ValueError("Error reading .cfg file into dictionary: "
                                 "[%s] %s = %s" % (section, option, value))

        return d


def read_met_forcing(fname, met_header=0, comment='#'):
    """ Read the half-hourly driving data into a dictionary
    method searches for the header row (optionally hash tagged) in order to
    build the named dictionary

    Parameters:
    -----------
    fname : string
        filename of met forcing file
    met_header : int
        row number of met file header with variable names
    comment : string, optional
        character defining a comment

    Returns:
    --------
    data : dictionary
        met forcing data, numpy arrays indexed by the half-hour of the run

    """
    data = {}
    var_names = None
    try:
        f = open(fname, 'r')
    except IOError:
        raise IOError('Could not read met file: "%s"' % fname)

    with f:
        for line_number, line in enumerate(f):
            if line_number == met_header:
                # remove comment tag
                var_names = [v.strip() for v in
                             re.sub(comment, ' ', line).strip().split(",")]
            elif (line_number > met_header and line.strip() and
                  not line.lstrip().startswith(comment)):
                values = [float(i) for i in line.split(",")]
                for name, value in zip(var_names, values):
                    data.setdefault(name, []).append(value)

    missing = [v for v in MET_VARS if v not in data]
    if missing:
        raise ValueError('Met file "%s" is missing: %s' %
                         (fname, ", ".join(missing)))

    return dict((k, np.asarray(v, dtype=np.float64)) for k, v in data.items())

def adjust_object_attributes(user_dict, obj):
    """Loop through the user supplied dict and change relevant attributes

    Parameters:
    -----------
    user_dict : dictionary
        dictionary that contains values to change
    obj : object
        default model parameters

    Returns:
    --------
    obj : object
        adjusted parameters object

    """
    # check user hasn't specified a parameter we are not expecting...
    # make sure parameters is not named a reserved python word
    bad_words = keyword.kwlist
    bad_vars = [method for method in dir(str) if method[:2]=='__']
    for key, value in user_dict.items():
        if key in bad_words or key in bad_vars:
            err_msg = "You cant name your parameter anything from:\n\n %s" \
                            % bad_words
            raise RuntimeError(err_msg)
        elif hasattr(obj, key):
            setattr(obj, key, value)
        else:
            err_msg = ".cfg file contains variable not in the model: %s" % key
            raise RuntimeError(err_msg)
    return obj
