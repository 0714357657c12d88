""" Half-hourly two-leaf canopy C & water model """

from twoleaf._version import __version__
