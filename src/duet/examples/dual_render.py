"""Example: render one tree both ways.

Demonstrates component inlining, text separators and marker escaping.
"""

import asyncio

from duet import dumps_wire, h, render_page


def Price(amount):
    return h("span", {"class": "price"}, "$", amount)


async def Greeting(name):
    await asyncio.sleep(0)  # stands in for I/O
    return h("p", None, "Hello, ", name, "!")


root = h(
    "section",
    None,
    h(Greeting, {"name": "world"}),
    h(Price, {"amount": 5}),
)

page = asyncio.run(render_page(root))

print("=" * 60)
print("MARKUP")
print("=" * 60)
print(page.markup)

print("=" * 60)
print("WIRE")
print("=" * 60)
print(dumps_wire(page.wire))
