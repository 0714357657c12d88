"""
Two-leaf canopy default module: Initial State

Read into the model unless the user changes these at runtime with definitions
in the .INI file

"""
__author__  = "Martin De Kauwe"
__version__ = "1.0 (14.02.2011)"
__email__   = "mdekauwe@gmail.com"

# Plant state variables (t/ha)
shoot         = 3.38042           # shoot c
shootn        = 0.0635            # shoot n
shootnc       = None              # shoot N:C, derived from shootn / shoot
lai           = None              # leaf area index (m2 m-2), derived from shoot c & sla unless given

# Soil water state
pawater_root    = 200.0           # plant available water - root zone (mm)
pawater_topsoil = 50.0            # plant available water - top soil(mm)
wtfac_root      = 1.0             # water availability factor, root zone [0,1]
wtfac_topsoil   = 1.0             # water availability factor, top soil [0,1]
psi_s_root      = 0.0             # pre-dawn soil water potential, root zone (MPa)
psi_s_topsoil   = 0.0             # pre-dawn soil water potential, top soil (MPa)
delta_sw_store  = 0.0             # change in root zone store over the day (mm)
tsoil           = 0.0             # daily mean soil temperature (degC), accumulated over the day
