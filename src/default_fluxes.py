"""
Two-leaf canopy default fluxes

Read into the model unless the user changes these at runtime with definitions
in the .INI file

"""

__author__  = "Martin De Kauwe"
__version__ = "1.0 (14.02.2011)"
__email__   = "mdekauwe@gmail.com"

# Carbon fluxes
gpp_gCm2 = 0.0          # gross primary production (g C m-2 d-1)
npp_gCm2 = 0.0          # net primary production (g C m-2 d-1)
gpp = 0.0               # gross primary production (t C ha-1 d-1)
npp = 0.0               # net primary production (t C ha-1 d-1)
auto_resp = 0.0         # autotrophic respiration (t C ha-1 d-1)
apar = 0.0              # accumulated absorbed PAR (umol m-2 s-1, summed over slots)
gs_mol_m2_sec = 0.0     # accumulated canopy stomatal conductance to CO2 (mol m-2 s-1, summed over slots)

# water fluxes
omega = 0.0             # decoupling coefficient, averaged over the sunlit slots
transpiration = 0.0     # mm d-1
soil_evap = 0.0         # mm d-1
interception = 0.0      # mm d-1
erain = 0.0             # effective rainfall (mm d-1)
et = 0.0                # evapotranspiration (mm d-1)
runoff = 0.0            # mm d-1
