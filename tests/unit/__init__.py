"""Unit tests.

Purpose
- Verify a single module or function in isolation.

Guidelines
- No real I/O; stub the environment and clocks.
- Prefer behavior-centric assertions over implementation details.
"""
