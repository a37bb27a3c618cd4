"""Looks up a part and its price guide using credentials from the environment."""

import json
import logging
import os
import sys

from bricklink import APIError, BricklinkError, CatalogClient, ItemType

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
LOGGER = logging.getLogger("basic_usage")


def main(item_number: str = "3001", color_id: int = 5) -> int:
    with CatalogClient.from_env() as client:
        try:
            item = json.loads(client.get_item(ItemType.PART, item_number))
            LOGGER.info("item %s: %s", item_number, item.get("data", {}).get("name"))

            price = json.loads(
                client.get_item_price("PART", item_number, {"color_id": str(color_id), "guide_type": "sold"})
            )
            LOGGER.info("avg sold price: %s", price.get("data", {}).get("avg_price"))
        except APIError as exc:
            LOGGER.error("api_error status=%s body=%s", exc.status_code, exc.body)
            return 1
        except BricklinkError:
            LOGGER.exception("request_failed")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
