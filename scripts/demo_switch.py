import os
import sys

from switchcase.core import log
from switchcase.core.metrics import snapshot_all
from switchcase.core.switch import Switch
from switchcase.table_config import build_from_yaml


def describe(n: int):
    return (
        Switch.make(n % 3)
        .case(0, lambda: "fizz")
        .case(1, lambda: None)  # fall through to default
        .default(lambda: str(n))
    )


def main():
    log.setup()
    l = log.get("demo")

    for n in range(6):
        l.info("n=%d -> %s", n, describe(n))

    # optional: python scripts/demo_switch.py table.yaml 3
    if len(sys.argv) >= 3:
        hs = build_from_yaml(sys.argv[1], int(sys.argv[2]))
        l.info("table lookup -> %s", hs.default(lambda: os.getenv("DEMO_DEFAULT", "<none>")))

    for c in snapshot_all()["counters"]:
        l.info("[ctr] %s %s value=%.0f", c["name"], c["labels"], c["value"])


if __name__ == "__main__":
    main()
