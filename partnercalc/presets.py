
TITLE = "Partnership Profit Calculator"

INTRO = (
    "Calculate potential profits based on turnover and sell rate, "
    "with our fixed buy rate of 0.3%."
)

FOOTNOTE = (
    "The profit calculation is based on your partner's turnover and the difference "
    "between your sell rate and our fixed buy rate of 0.3%."
)
FOOTNOTE_FORMULA = (
    "First 6 months: 30% of (turnover × rate difference) | "
    "Second 6 months: 15% of (turnover × rate difference)"
)

BUY_RATE = 0.3  # percent, fixed

DEFAULT_TURNOVER = 100000.0
DEFAULT_SELL_RATE = 1.0
SELL_RATE_MIN = 0.4
SELL_RATE_MAX = 5.0
SELL_RATE_STEP = 0.1

# Share of (turnover × rate difference) paid out per half year
FIRST_HALF_SHARE = 0.30
SECOND_HALF_SHARE = 0.15

CURRENCY_SYMBOL = "$"

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
