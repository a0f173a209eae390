"""Support namespace for small, dependency-free helpers.

Scope:
- Stateless helpers that `Ix` implementations share (e.g., partial-order
  comparisons in ``ordering.py``).
- No instances, no registries, no wiring.

Import direction:
- May be imported by any rangeix package.
- Must not import from application packages.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules.
"""
