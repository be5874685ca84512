"""
Chat query engine.

Modules:
    classifier  - keyword intent classification
    executor    - per-intent aggregation and history logging
"""
