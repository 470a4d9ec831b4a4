"""
Benchmark suite for jsonfizz encoding and parsing performance.

Compares jsonfizz with default delimiters against standard JSON libraries:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Also measures the cost of custom delimiters and hook pipelines.
"""
