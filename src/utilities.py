""" Various misc funcs """

from math import fabs

__author__  = "Martin De Kauwe"
__version__ = "1.0 (09.03.2011)"
__email__   = "mdekauwe@gmail.com"

def float_eq(arg1, arg2, tol=1E-14):
    """arg1 == arg2"""
    return fabs(arg1 - arg2) < tol + tol * fabs(arg2)

def float_lt(arg1, arg2, tol=1E-14):
    """arg1 < arg2"""
    return arg2 - arg1 > fabs(arg1) * tol

def clip(value, min=None, max=None):
    """clip(value [, min [, max]]) => value

    Return value clipped to the range [min, max] inclusive. If either
    min or max is None, no clipping is performed on that side.
    """
    if min is not None and value < min:
        value = min
    if max is not None and value > max:
        value = max
    return value

def uniq(inlist):
    # order preserving
    uniques = []
    for item in inlist:
        if item not in uniques:
            uniques.append(item)
    return uniques

def str2boolean(value):
    """ Take the string value and return the boolean value, check case etc..."""
    if value is True or value is False or value == 0 or value == 1:
        return bool(value)
    elif isinstance(value, str) and value:
        if value.lower() in ['true', 't', '1', 'yes']:
            return True
        elif value.lower() in ['false', 'f', '0', 'no']:
            return False
    raise ValueError("%s is no recognized as a boolean value" % value)

def quadratic(a=None, b=None, c=None, large=True):
    """ minimilist quadratic solution

    Parameters:
    ----------
    a : float
        co-efficient
    b : float
        co-efficient
    c : float
        co-efficient
    large : logical
        return the larger (positive) root, otherwise the smaller

    Returns:
    --------
    root : float
        None if there is no real solution
    """
    if float_eq(a, 0.0):
        if float_eq(b, 0.0):
            return None
        return -c / b

    d = b**2.0 - 4.0 * a * c # discriminant
    if d < 0.0:
        return None

    if large:
        root = (-b + d**0.5) / (2.0 * a)
    else:
        root = (-b - d**0.5) / (2.0 * a)

    return root
