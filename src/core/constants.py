"""
Core constants and limits.

Defines the fixed parameters of the perpetual-futures trade calculator
and the defaults used by its surrounding application.
"""

# Leverage Limits
MIN_LEVERAGE = 1.0
MAX_LEVERAGE = 125.0

# Risk Management
MAINTENANCE_MARGIN_RATE_DEFAULT = 0.004  # 0.4% maintenance margin

# Fee Constants
DEFAULT_FEE_RATE = 0.0005  # 0.05% per side

# Numeric tolerance for near-zero denominators and risk amounts
EPSILON = 1e-9

# Input parsing limits
MIN_FUNDS = 0.01
MIN_PRICE = 0.01
MIN_POSITION_PERCENT = 1.0
MAX_POSITION_PERCENT = 100.0

# Input defaults
DEFAULT_DIRECTION = "short"
DEFAULT_POSITION_PERCENT = 10

# Persistence
SETTINGS_STORAGE_KEY = "tradeCalculatorSettings"
DEFAULT_SETTINGS_FILE = ".trade_calculator_settings.json"

# Exchange rate
EXCHANGE_RATE_URL = "https://api.exchangerate-api.com/v4/latest/USD"
EXCHANGE_RATE_CURRENCY = "TWD"
EXCHANGE_RATE_REFRESH_SECONDS = 3600.0  # 1 hour
EXCHANGE_RATE_TIMEOUT_SECONDS = 10.0
