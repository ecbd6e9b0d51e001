"""
Process exit statuses.

Values follow the BSD sysexits convention where one applies.
"""

OK = 0
FAILURE = 1
UNAVAILABLE = 69
CONFIG = 78
INTERRUPTED = 130
