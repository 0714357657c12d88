"""
Two-leaf canopy default files and locations. These should of course be
specified in any config file, but this will act as a dummy to remind a user
"""

__author__  = "Martin De Kauwe"
__version__ = "1.0 (14.02.2011)"
__email__   = "mdekauwe@gmail.com"

cfg_fname = "params/twoleaf.cfg"
met_fname = "met_data/half_hourly_met.csv"
out_fname = "outputs/twoleaf_output.csv"
out_param_fname = "params/out_twoleaf.cfg"
