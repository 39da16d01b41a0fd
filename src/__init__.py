"""Account Statement PDF Generator.

Renders a JSON account statement as a formatted PDF document and opens it
in the system's default viewer.
"""

__version__ = "1.0.0"
__author__ = "Statement Tools Team"
