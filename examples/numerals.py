#!/usr/bin/env python3
"""String-to-number example.

Three interpretations are tried in order: decimal digits, English
numerals ("zero".."twenty") and Roman numerals ("I".."XX"). The first
one that understands the input wins.

Usage:
    python examples/numerals.py 2019 twelve XIV sieben
"""

from __future__ import annotations

import argparse
import logging

from fchain import Trace, attempt, build, lookup, run

ENGLISH = (
    "zero one two three four five six seven eight nine ten eleven twelve "
    "thirteen fourteen fifteen sixteen seventeen eighteen nineteen twenty"
).split()
ROMAN = "I II III IV V VI VII VIII IX X XI XII XIII XIV XV XVI XVII XVIII XIX XX".split()

decimal_to_number = attempt(int)
english_numeral_to_number = lookup({word: n for n, word in enumerate(ENGLISH)})
roman_to_number = lookup({numeral: n for n, numeral in enumerate(ROMAN, start=1)})


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("words", nargs="*", default=["2019", "twelve", "XIV", "sieben"])
    parser.add_argument("--trace", action="store_true", help="print evaluation evidence")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    trace = Trace(enabled=args.trace)
    string_to_number = build(
        decimal_to_number,
        english_numeral_to_number,
        roman_to_number,
        name="string_to_number",
    ).with_trace(trace)
    members = list(string_to_number)

    for word in args.words:
        built = string_to_number(word)
        dynamic = run(members, word)
        assert built == dynamic
        print(f"{word!r:>10} -> {built.value if built else '(no match)'}")

    if args.trace:
        print("\nTrace:")
        for ev in trace.get_events():
            indent = "  " if ev.action != "chain_begin" else ""
            print(f"{indent}[{ev.id}] {ev.action} {ev.info}")


if __name__ == "__main__":
    main()
