"""Small demonstration of storing and reading a value."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from .model import CacheError, Options
from .storage import Cache


@dataclass
class SampleData:
    """Example payload kept in the cache."""

    foo: str = ""
    bar: int = 0


def main(argv: list[str] | None = None) -> int:
    """Store a sample value, read it back and print its fields."""
    parser = argparse.ArgumentParser(description="Demonstrate the expiring cache.")
    parser.parse_args(argv)

    with Cache[str, SampleData](Options()) as cache:
        cache.set("someUUID", SampleData(foo="bar", bar=1))
        try:
            data = cache.get("someUUID")
        except CacheError as exc:
            print(exc)
            data = SampleData()
        print(data.foo, data.bar)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())