# No dependencies
import math

CHANNEL_MAX = 255
PERCENT_MAX = 100.0
HUE_DEGREES = 360

# Decimal places used when serialising
PERCENT_PLACES = 2
ALPHA_PLACES = 4

# Divisors for CSS hue units
HUE_UNITS = {
    "deg": 360.0,
    "grad": 400.0,
    "rad": 2 * math.pi,
    "turn": 1.0,
}
