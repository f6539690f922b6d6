"""Configuration management for the Stockroom application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from stockroom.infra.paths import INVENTORY_FILE as DEFAULT_INVENTORY_FILE
from stockroom.utilities import constants

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = _env_flag('DEBUG', 'False')
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'WARNING').upper()

# Inventory Settings
INVENTORY_FILE: Final[Path] = Path(os.getenv('INVENTORY_FILE', str(DEFAULT_INVENTORY_FILE)))
INVENTORY_CAPACITY: Final[int] = int(os.getenv('INVENTORY_CAPACITY', str(constants.MAX_PRODUCTS)))
SWEEP_EXPIRED_AFTER_SALE: Final[bool] = _env_flag('SWEEP_EXPIRED_AFTER_SALE', 'True')

# Stock Alerts Configuration
DAYS_BEFORE_EXPIRY: Final[int] = int(os.getenv('DAYS_BEFORE_EXPIRY', str(constants.DAYS_BEFORE_EXPIRY)))
LOW_STOCK_THRESHOLD: Final[int] = int(os.getenv('LOW_STOCK_THRESHOLD', str(constants.LOW_STOCK_THRESHOLD)))
