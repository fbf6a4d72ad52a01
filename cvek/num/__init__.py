# cvek/num/__init__.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Numerical backend dispatcher for CVEK."""

from cvek.config import init_backend

from . import shared as _shared

_cvek_backend_ = init_backend()

if _cvek_backend_ == "numpy":
    from . import numpy_backend as _backend
else:
    raise RuntimeError(
        "Please set the CVEK_BACKEND environment variable to 'numpy' (or leave it unset)."
    )

# Re-export backend API.
for _name in dir(_backend):
    if _name.startswith("__"):
        continue
    globals()[_name] = getattr(_backend, _name)

# Re-export backend-independent helpers from shared.py.
get_dtype = _shared.get_dtype
compute_gammaln = _shared.compute_gammaln
as_feature_matrix = _shared.as_feature_matrix
as_response_vector = _shared.as_response_vector
