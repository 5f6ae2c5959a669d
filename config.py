
# ---------------- CONFIG ----------------
SEED = 7
SEASON_LENGTH = 30          # days
LOG_LEVEL = "WARNING"

# Stand config
START_CASH = 2.00           # dollars each stand begins with
MAX_STANDS = 30
MAX_GLASSES = 1000          # per day
MAX_SIGNS = 50              # per day
MAX_PRICE_CENTS = 100
SIGN_COST = 0.15            # dollars per advertising sign

# ----- UNIT COST SCHEDULE -----
# (first day the cost applies, cents per glass)
COST_SCHEDULE = (
    (1, 2),                 # mother's free sugar
    (3, 4),
    (7, 5),                 # mix price increase
)

# ----- WEATHER -----
EVENT_FREE_DAYS = 2         # first days are always fair
FAIR_UPPER = 0.6            # base draw in [0, 0.6) -> fair
CLOUDY_UPPER = 0.8          # [0.6, 0.8) -> cloudy, [0.8, 1.0) -> hot
STORM_CHANCE = 0.25         # on cloudy days
STREET_WORK_CHANCE = 0.25   # on fair days
RAIN_SEVERITY_BASE = 30     # percent
RAIN_SEVERITY_STEP = 10
RAIN_SEVERITY_STEPS = 5     # -> 30, 40, 50, 60, 70
REDRAW_RAIN_SEVERITY = True # redraw severity at resolution instead of using the forecast

# ----- DEMAND -----
BASE_DEMAND = 30            # glasses at the reference price
REFERENCE_PRICE = 10        # cents
HIGH_PRICE_SLOPE = 0.8
LOW_PRICE_NUMERATOR = 1000 * 30
AD_RATE = 0.5               # advertising saturation rate per sign
HEAT_WAVE_MULT = 2.0
STREET_WORK_MULT = 0.1
