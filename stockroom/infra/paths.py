from pathlib import Path

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
INVENTORY_FILE = DATA_DIR / 'inventory.txt'

__all__ = ['DATA_DIR', 'INVENTORY_FILE']
