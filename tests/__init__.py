"""gfn test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/function.
- helpers/      : Shared assertion utilities (no tests here).

General guidance
- Keep tests deterministic: pass an explicitly seeded ``random.Random`` to
  ``shuffle``/``sample`` or use the ``rng`` fixture.
- Mapping iteration order is implementation-defined; sort before comparing.
- Property-based tests live in ``*_props.py`` modules and are marked ``property``.
- Markers: unit, property
"""
