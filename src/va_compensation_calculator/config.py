from types import MappingProxyType

from va_compensation_calculator.models import CompensationRatesConfig

# Demo values only. These are not the official VA compensation rates.
DEFAULT_COMPENSATION_RATES = CompensationRatesConfig(
    year_label="sample",
    monthly_rates=MappingProxyType(
        {
            10: 171,
            20: 338,
            30: 524,
            40: 755,
            50: 1075,
            60: 1361,
            70: 1716,
            80: 1995,
            90: 2241,
            100: 3737,
        }
    ),
)

RATING_MIN = 0
RATING_MAX = 100
COMBINED_RATING_MAX = 100

DISCLAIMER = "(Compensation amounts are sample values, not official VA numbers.)"

# Log records go to stderr; keep the menu on stdout quiet by default.
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
