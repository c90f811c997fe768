"""
Configuration constants for graphwalk.

Tunable settings live here.  Anything that makes sense to change per
deployment can be overridden from the environment.
"""

import os

# =============================================================================
# Graph Construction
# =============================================================================

# Weight used by Graph.add_undirected_edge when the caller omits one
DEFAULT_EDGE_WEIGHT = 1

# =============================================================================
# Run Recording
# =============================================================================

# Upper bound on steps a Recorder will buffer before giving up
MAX_RECORDED_STEPS = int(os.environ.get("GRAPHWALK_MAX_STEPS", "100000"))
