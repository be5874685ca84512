"""
HTTP layer.

Modules:
    deps     - dependencies resolving the store objects held on ``app.state``
    schemas  - camelCase response models
    v1       - versioned routers (floats, measurements, chat, export)
"""
