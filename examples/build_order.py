"""Ordering build steps with a GraphSet.

Run with ``python examples/build_order.py``.
"""

import graphset as gs

# Each edge (a, b) means "a must run before b"
steps = gs.GraphSet[str]()
for step in ["fetch", "configure", "compile", "test", "package", "docs"]:
    steps.add(step)

steps.new_edge("fetch", "configure")
steps.new_edge("configure", "compile")
steps.new_edge("compile", "test")
steps.new_edge("compile", "package")
steps.new_edge("test", "package")

print(steps)
print(steps.sort())

# A step that waits on itself can never run
steps.new_edge("docs", "docs")
print(steps.has_cycle())
