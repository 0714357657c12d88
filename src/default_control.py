"""
Two-leaf canopy default control flags

Read into the model unless the user changes these at runtime with definitions
in the .INI file

"""
__author__  = "Martin De Kauwe"
__version__ = "1.0 (04.03.2014)"
__email__   = "mdekauwe@gmail.com"

calc_sw_params = False     # false=user supplies field capacity and wilting point, true=calculate them based on cosby et al.
gs_model = "MEDLYN"        # Currently only this model, but others could be added.
modeljm = 1                # 0=Jmax and Vcmax parameters are read in, 1=parameters are calculated from leaf N content, 2=Vcmax from N, Jmax from Vcmax
num_hlf_hrs = 48           # number of half-hour slots in a day
predawn_hod = 10           # half-hour slot used for the pre-dawn soil water potential, 10 = 5 am
print_options = "DAILY"    # "daily"=every timestep, "end"=end of run
ps_pathway = "C3"          # Photosynthetic pathway, c3/c4 (only c3 is implemented)
skip_failed_days = False   # False=a failed canopy solve aborts the run, True=the day is skipped and reported
sw_stress_model = 1        # 0=JULES type linear stress func, 1=Landsberg and Waring non-linear func
water_stress = True        # water stress modifier turned on=1 (default)...ability to turn off to test things without drought stress = 0
