"""
A series of everyday constants, well.

Module defines a series of constant, e.g.
import twoleaf.constants as const
>>>print(const.SIGMA)
>>>5.67e-08

Refs
====
* McCree, K. J., 1972, Test of current definitions of photosynthetically
active radiation against leaf photosynthesis data. A
gricultural Meteorology, 10, 442-453.
* Leuning et al. (1995) Plant, Cell and Environment, 18, 1183-1200.
* Jones (1992) Plants and microclimate, Appendix 3.

"""
M2_AS_HA = 1E-4
KG_AS_TONNES = 1E-3
KG_AS_G = 1E+3
G_TO_KG = 0.001
DEG_TO_KELVIN = 273.15
MOL_C_TO_GRAMS_C = 12.0
MOLE_WATER_2_G_WATER = 18.02
UMOL_TO_MOL = 1E-6
KPA_2_PA = 1000.0
PA_2_KPA = 0.001
SEC_2_HLFHR = 1800.0
GRAM_C_2_TONNES_HA = 0.01  # g C m-2 -> t C ha-1
RGAS = 8.314  # universal gas constant (J mol-1 K-1)

# radiation
SIGMA = 5.67E-8  # Stefan-Boltzmann constant (W m-2 K-4)
SW_2_PAR = 2.3  # umol J-1, 0.5 ratio of PAR to SW x 4.6 umol J-1 (McCree)
PAR_2_SW = 1.0 / SW_2_PAR
SOLAR_CONSTANT = 1370.0  # W m-2
LEAF_EMISSIVITY = 0.95

# air & water vapour
CP = 1010.0  # specific heat of dry air (J kg-1 K-1)
MASS_AIR = 29.0E-3  # molecular mass of air (kg mol-1)
H2OLV0 = 2.501E6  # latent heat of H2O at 0 degC (J kg-1)
H2OMW = 18.0E-3  # mol mass H2O (kg mol-1)
DHEAT = 21.5E-6  # molecular diffusivity for heat (m2 s-1)

# conductance ratios
GBVGBH = 1.075  # boundary layer conductance water vapour : heat
GSVGSC = 1.57  # stomatal conductance water vapour : CO2
GBHGBC = 1.32  # boundary layer conductance heat : CO2

# soil water
MPA_PER_M_HEAD = 9.81E-3  # 1 m of water head expressed as MPa
