"""
Basic options: building, transforming and unwrapping optional values.

Run: python examples/basic_options.py
"""
import logging

from optionpy import Option, MISSING, UnwrapOnNoneError, from_optional, some


def lookup_port(env: dict) -> Option[int]:
    return from_optional(env.get("PORT", MISSING)).filter(str.isdigit).map(int)


def main():
    logging.basicConfig(level=logging.DEBUG)

    print("port =>", lookup_port({"PORT": "8080"}))             # Some(8080)
    print("bad port =>", lookup_port({"PORT": "http"}))         # NONE
    print("default =>", lookup_port({}).unwrap_or(80))          # 80

    pair = some("host").zip(lookup_port({"PORT": "1"}))
    print("pair =>", pair.match(lambda hp: f"{hp[0]}:{hp[1]}", lambda: "n/a"))

    try:
        lookup_port({}).expect("PORT must be set")
    except UnwrapOnNoneError as err:
        print("expect =>", err, "| user message:", err.is_user_message)


if __name__ == "__main__":
    main()
