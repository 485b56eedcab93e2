"""Unit names and constants for timediff.

Time unit constants represent durations in milliseconds.
"""

UNITS = ('days', 'hours', 'minutes', 'seconds')

# Time unit constants (all values in milliseconds)
SECOND = 1000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR

UNIT_MILLISECONDS = {
    'days': DAY,
    'hours': HOUR,
    'minutes': MINUTE,
    'seconds': SECOND,
}
