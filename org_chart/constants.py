"""
Org Chart — Default Values

The canonical sample organization and the diagnostic thresholds.
Registration order of EMPLOYEE_NAMES determines identities (CEO is 1).
"""

from typing import Tuple

CEO_NAME: str = "Mark Zuckerberg"

EMPLOYEE_NAMES: Tuple[str, ...] = (
    "Sarah Donald",
    "Tyler Simpson",
    "Bruce Willis",
    "Georgina Flangy",
    "Cassandra Reynolds",
    "Mary Blue",
    "Tina Teff",
    "Will Turner",
    "Harry Tobs",
    "Thomas Brown",
    "George Carrey",
    "Gary Styles",
    "Sophie Turner",
    "Bob Saget",
)

# (supervisor name, subordinate names) applied in order.
REPORTING_LINES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (CEO_NAME, ("Sarah Donald", "Tyler Simpson", "Bruce Willis", "Georgina Flangy")),
    ("Sarah Donald", ("Cassandra Reynolds",)),
    ("Tyler Simpson", ("Harry Tobs", "George Carrey", "Gary Styles")),
    ("Georgina Flangy", ("Sophie Turner",)),
    ("Cassandra Reynolds", ("Mary Blue", "Bob Saget")),
    ("Harry Tobs", ("Thomas Brown",)),
    ("Bob Saget", ("Tina Teff",)),
    ("Tina Teff", ("Will Turner",)),
)

# --- Diagnostics ---
SPAN_OF_CONTROL_WARNING: int = 7
DEPTH_WARNING: int = 6
