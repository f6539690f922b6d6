import logging
import sys

from stockroom.utilities.config import (
    APP_HOST, APP_PORT, INVENTORY_CAPACITY, INVENTORY_FILE, LOG_LEVEL, SWEEP_EXPIRED_AFTER_SALE
)


def serve():
    import uvicorn
    from stockroom.api.api_run import app
    from stockroom.utilities.network import server_urls

    urls = server_urls(APP_PORT)
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on {urls['local']} (Press CTRL+C to quit)")
    if "lan" in urls:
        print(f"Accessible from other devices at: {urls['lan']}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)


def run_console():
    from stockroom.console import ConsoleApp
    from stockroom.domain.Billing import Billing
    from stockroom.domain.Inventory import Inventory
    from stockroom.infra.Inventory_Repository import load_inventory

    inventory = load_inventory(INVENTORY_FILE, Inventory(capacity=INVENTORY_CAPACITY))
    ConsoleApp(inventory, Billing(inventory, sweep_expired=SWEEP_EXPIRED_AFTER_SALE)).run()


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args and args[0] == "serve":
        serve()
    else:
        run_console()
    return 0


if __name__ == "__main__":
    sys.exit(main())
