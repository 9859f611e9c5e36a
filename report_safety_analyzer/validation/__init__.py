"""Validation runners.

This package contains *non-interactive* tooling for checking report files.

Design goals
------------
1) Keep printing and exit codes out of the analysis path.
2) Make runs reproducible and scriptable (CLI-style entry points).
3) Build the run configuration explicitly from arguments; no ambient state.
"""
