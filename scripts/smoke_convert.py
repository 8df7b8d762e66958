import json
import os
import sys

from fastapi.testclient import TestClient
from converter.core.config import Settings
from converter.main import create_app

"""Smoke test for the converter app using the offline static provider.

Loads the page, runs one cross-currency and one same-currency conversion
through the JSON API, and prints the responses.
"""


def run():
    settings = Settings(exchange_rate_provider="static")
    settings.init_post_load()
    with TestClient(create_app(settings_override=settings)) as client:
        page = client.get("/ui")
        currencies = client.get("/api/currencies").json()
        cross = client.get("/api/convert", params={"amount": "100", "from": "USD", "to": "NGN"})
        same = client.get("/api/convert", params={"amount": "5", "from": "EUR", "to": "EUR"})
        invalid = client.get("/api/convert", params={"amount": "-1", "from": "USD", "to": "EUR"})
        print(
            json.dumps(
                {
                    "ui_status": page.status_code,
                    "currencies": currencies,
                    "cross": cross.json(),
                    "same": same.json(),
                    "invalid": {"status": invalid.status_code, "body": invalid.json()},
                },
                indent=2,
                ensure_ascii=False,
            )
        )


if __name__ == "__main__":
    sys.path.append(os.getcwd())
    run()
