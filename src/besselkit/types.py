"""Helpers for scalar types

Useful type aliases, and common conventions in this package
"""

import numpy as np

SReal = float | int | np.floating | np.integer
"""Scalar real number (orders)"""
SComplex = complex | SReal | np.complexfloating
"""Scalar complex number (arguments)"""
