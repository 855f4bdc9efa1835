"""
Tiny walkthrough of live counting on in-memory surfaces.
"""

from __future__ import annotations

import logging

from countable import CountResult, SelectorMap, TextSurface, create


def report(surface: TextSurface, result: CountResult) -> None:
    print(f"{surface.name}: {result.to_dict()}")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    title = TextSurface("Draft title", name="title")
    body = TextSurface("First paragraph.\n\nSecond one, with punctuation!", name="body")
    api = create(SelectorMap({"title": title, "body": body, "fields": [title, body]}))

    api.live("fields", report, {"hardReturns": True})
    body.text += "\n\nA third paragraph."
    api.die("title")
    title.text = "Not reported any more"
    api.once("title", report)
    api.live("missing", report)


if __name__ == "__main__":
    main()
