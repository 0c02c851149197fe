"""pageres — capture screenshots of websites in different resolutions.

The package turns a loose mix of URLs, resolutions and preset keywords into
a list of capture jobs and hands them to a pluggable runner.
"""

__version__ = "1.0.0"
