
# This file is originally generated from Git information by running 'setup.py
# version'

__version__ = '1.0'
