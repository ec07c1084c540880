"""
Example: nested loops expand lazily; only atomic commands come out.

Usage:
    python examples/nested_loops.py
"""

import animscript as asc

SOURCE = """
(define dot ((circle (0 0) 5)))
(loop 3 (
    (loop 2 ((shift dot right)))
    (shift dot down)
))
(loop 0 ((erase dot)))
"""

if __name__ == "__main__":
    for i, command in enumerate(asc.commands(SOURCE)):
        print(f"{i:3d}  {command}")

    context = asc.execute_all(SOURCE)
    print(f"\n{context}: {sorted(context.objects)}")
