"""
Two-leaf canopy default model parameters

Read into the model unless the user changes these at runtime with definitions
in the .INI file

"""

__author__  = "Martin De Kauwe"
__version__ = "1.0 (14.02.2011)"
__email__   = "mdekauwe@gmail.com"

# miscellaneous
latitude         = 35.9      # latitude (degrees, negative for south)
longitude        = -79.09    # longitude (degrees, negative for west)
albedo           = 0.123     # albedo

# canopy & leaf parameters
sla               = 3.9      # specific leaf area (m2 one-sided/kg DW)
cfracts           = 0.5      # carbon fraction of dry biomass
cue               = 0.5      # carbon use efficiency, or the ratio of NPP to GPP
leaf_abs          = 0.5      # leaf absorptance of solar radiation [0,1]
leaf_width        = 0.02     # characteristic leaf width (m), used in the boundary layer conductance

# set photosynthetic parameters
alpha_j           = 0.26     # initial slope of rate of electron transport, used in calculation of quantum yield. Value calculated by Belinda
delsj             = 644.4338 # Deactivation energy for electron transport (J mol-1 k-1)
eac               = 79430.0  # Activation energy for carboxylation [J mol-1]
eao               = 36380.0  # Activation energy for oxygenation [J mol-1]
eag               = 37830.0  # Activation energy at CO2 compensation point [J mol-1]
eaj               = 43790.0  # Activation energy for electron transport (J mol-1)
eav               = 51560.0  # Activation energy for Rubisco (J mol-1)
edj               = 2e+05    # Deactivation energy for electron transport (J mol-1)
gamstar25         = 42.75    # Base rate of CO2 compensation point at 25 deg C [umol mol-1]
jmaxna            = 40.462   # slope of the reln btween jmax and leaf N content (g N m-2) - (umol/g n/s)
jmaxnb            = 13.691   # intercept of jmax vs n (umol/g n/s)
jmax              = 110.0    # maximum rate of electron transport at 25 degC, top of canopy (umol m-2 s-1), used when modeljm=0
jv_slope          = 1.86     # slope of the Jmax:Vcmax relationship, used when modeljm=2
jv_intercept      = 0.0      # intercept of the Jmax:Vcmax relationship, used when modeljm=2
kc25              = 404.9    # Base rate for carboxylation by Rubisco at 25degC [mmol mol-1]
ko25              = 278400.0 # Base rate for oxygenation by Rubisco at 25degC [umol mol-1]. Note value in Bernacchie 2001 is in mmol!!
measurement_temp  = 25.0     # temperature Vcmax/Jmax are measured at, typical 25.0 (celsius)
oi                = 205000.0 # intercellular concentration of O2 [umol mol-1]
theta             = 0.7      # curvature of photosynthetic light response curve
vcmaxna           = 20.497   # slope of the reln btween vcmax and leaf N content (g N m-2) - (umol/g n/s)
vcmaxnb           = 8.403    # intercept of vcmax vs n (umol/g n/s)
vcmax             = 55.0     # maximum rate of carboxylation at 25 degC, top of canopy (umol m-2 s-1), used when modeljm=0
g1                = 4.8      # stomatal conductance parameter: Slope of reln btw gs and assimilation (fitted by species/pft).
g0                = 0.0      # stomatal conductance intercept (mol m-2 s-1)

# water model parameters
wcapac_root       = 240.0    # Max plant avail soil water -root zone, i.e. total (mm) (smc_sat-smc_wilt) * root_depth (750mm) = [mm (water) / m (soil depth)]
wcapac_topsoil    = 100.0    # Max plant avail soil water -top soil (mm)
rooting_depth     = 750.0    # Rooting depth (mm)
topsoil_depth     = 350.0    # Topsoil depth (mm)
topsoil_type      = "loam"   # soil texture of the top soil
rootsoil_type     = "loam"   # soil texture of the root zone
ctheta_topsoil    = None     # Fitted parameter based on Landsberg and Waring
ntheta_topsoil    = None     # Fitted parameter based on Landsberg and Waring
ctheta_root       = None     # Fitted parameter based on Landsberg and Waring
ntheta_root       = None     # Fitted parameter based on Landsberg and Waring
fractup_soil      = 0.5      # fraction of uptake from top soil layer
rfmult            = 1.0      # rainfall multiplier
intercep_frac     = 0.15     # Maximum intercepted fraction, values in Oishi et al 2008, AFM, 148, 1719-1732 ~13.9% +/- 4.1, so going to assume 15% following Landsberg and Sands 2011, pg. 193.
max_intercep_lai  = 3.0      # canopy LAI at which interception is maximised.
qs                = 1.0      # exponent in water stress modifier, =1.0 JULES type representation, the smaller the values the more curved the depletion.
b_topsoil         = None     # Clapp Hornberger exponent, top soil (derived from texture if None)
b_root            = None     # Clapp Hornberger exponent, root zone (derived from texture if None)
psi_sat_topsoil   = None     # saturated soil water potential, top soil (MPa)
psi_sat_root      = None     # saturated soil water potential, root zone (MPa)
theta_sat_topsoil = None     # volumetric water content at saturation, top soil
theta_sat_root    = None     # volumetric water content at saturation, root zone
theta_wp_topsoil  = None     # volumetric water content at the wilting point, top soil
theta_wp_root     = None     # volumetric water content at the wilting point, root zone
