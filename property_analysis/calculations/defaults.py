"""
Calculation Defaults

Fixed assumptions shared by every stage of the property analysis.
These are constants, not settings: changing them changes every
projection the engine has ever produced.
"""

# Income
DEFAULT_VACANCY_RATE = 0.05
WEEKS_PER_MONTH = 4

# Growth (applied once per projection year, starting in year 2)
APPRECIATION_RATE = 0.03
RENT_GROWTH_RATE = 0.025

# Projection horizons
MONTHS_PER_YEAR = 12
MONTHLY_PROJECTION_MONTHS = 12
ANNUAL_PROJECTION_YEARS = 30

# Discounted cash flow
DISCOUNT_RATE = 0.08
NPV_HORIZON_YEARS = 5
IRR_GUESS = 0.1
IRR_MAX_ITERATIONS = 100
IRR_TOLERANCE = 0.0001

# Recommendation cut-offs (total score out of 100)
BUY_SCORE_THRESHOLD = 80
CONSIDER_SCORE_THRESHOLD = 60
